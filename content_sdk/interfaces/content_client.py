"""Abstract base classes for content service clients.

Two roles exist.  The *private* client acts for the authenticated caller on
their own event and holds every mutating operation.  The *public* client
acts for a guest looking at someone else's event by subdomain, read-only.

Call context (the caller's identity) is implicit in a browser, where cookies
carry it.  On a server it must be explicit: :meth:`with_context` returns a
new client with a session token attached, leaving the original untouched.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from content_sdk.models.entities import Event, EventPlan, PictureSet, SubEventDetails
from content_sdk.models.session import Session, SessionToken


@dataclass(frozen=True)
class UpdateEventOptions:
    """Fields to change on the caller's event.

    Attributes
    ----------
    title:
        New title, 4 to 128 characters after trimming.
    picture_set:
        Replacement picture set.
    sub_event_details:
        Replacement sub-event list.
    sub_domain:
        New subdomain.  The service answers 409 if another event holds it.

    Only fields that are not ``None`` are sent.
    """

    title: str | None = None
    picture_set: PictureSet | None = None
    sub_event_details: list[SubEventDetails] | None = None
    sub_domain: str | None = None


class IContentPrivateClient(ABC):
    """Contract for the caller's privileged operations on their own event."""

    @abstractmethod
    def with_context(self, session_token: SessionToken) -> IContentPrivateClient:
        """Return a new client that sends *session_token* on every call."""

    @abstractmethod
    async def create_event(self, session: Session, plan: EventPlan | str) -> Event:
        """Create the caller's event on *plan*.

        Raises
        ------
        content_sdk.utils.errors.EventAlreadyExistsForUserError
            If the caller already owns an event.
        content_sdk.utils.errors.UnauthorizedContentError
            If the caller is not authorized.
        """

    @abstractmethod
    async def update_event(self, session: Session, update_options: UpdateEventOptions) -> Event:
        """Apply *update_options* to the caller's event and return the result.

        Raises
        ------
        content_sdk.utils.errors.EventNotFoundError
            If the caller has no event.
        content_sdk.utils.errors.SubDomainInUseError
            If the requested subdomain belongs to another event.
        content_sdk.utils.errors.EventRemovedError
            If the event was removed.
        """

    @abstractmethod
    async def delete_event(self, session: Session) -> None:
        """Remove the caller's event.  Removal is terminal."""

    @abstractmethod
    async def mark_setup_wizard_skipped(self, session: Session) -> Event:
        """Record that the caller dismissed the setup wizard."""

    @abstractmethod
    async def get_event(self) -> Event:
        """Fetch the caller's event.

        Raises
        ------
        content_sdk.utils.errors.EventNotFoundError
            If the caller has no event.
        content_sdk.utils.errors.EventRemovedError
            If the event was removed.
        """

    @abstractmethod
    async def check_subdomain_available(self, sub_domain: str) -> bool:
        """Return ``True`` if no event holds *sub_domain*."""

    @abstractmethod
    async def get_billing_management_page_uri(self) -> str:
        """Return the secure URI of the hosted billing management page."""


class IContentPublicClient(ABC):
    """Contract for guests reading a published event."""

    @abstractmethod
    def with_context(self, session_token: SessionToken) -> IContentPublicClient:
        """Return a new client that sends *session_token* on every call."""

    @abstractmethod
    async def get_event_by_subdomain(self, sub_domain: str) -> Event:
        """Fetch the event published under *sub_domain*.

        Raises
        ------
        content_sdk.utils.errors.EventNotFoundError
            If no event has that subdomain.
        """

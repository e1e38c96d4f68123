"""Data transfer objects for client-server communication.

Request bodies, response bodies, and the private-response envelope.  These are
the shapes that go over HTTP; application code mostly deals with the entities
in :mod:`content_sdk.models.entities` and the tagged
:data:`EventEnvelope` returned by :func:`decode_private_event_response`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from content_sdk.models.entities import (
    WIRE_CONFIG,
    Event,
    EventPlan,
    PictureSet,
    SubEventDetails,
)
from content_sdk.utils.validators import SecureWebUri, SubDomain, Title


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class CreateEventRequest(BaseModel):
    """Body of a create request."""

    model_config = WIRE_CONFIG

    plan: EventPlan

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class UpdateEventRequest(BaseModel):
    """Body of an update request.

    Every field is optional.  Fields left as ``None`` are not sent, and the
    service leaves the matching event fields untouched.
    """

    model_config = WIRE_CONFIG

    title: Title | None = None
    picture_set: PictureSet | None = None
    sub_event_details: list[SubEventDetails] | None = None
    sub_domain: SubDomain | None = None

    def to_wire(self) -> dict[str, Any]:
        """Serialize only the fields that are present."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------

class PublicEventResponse(BaseModel):
    """Response body for the public (guest) API."""

    model_config = WIRE_CONFIG

    event: Event


class CheckSubDomainAvailableResponse(BaseModel):
    """Response body for the subdomain availability check."""

    model_config = WIRE_CONFIG

    available: bool


class ChargebeeManagePageResponse(BaseModel):
    """Response body holding the hosted billing management page."""

    model_config = WIRE_CONFIG

    manage_account_uri: SecureWebUri


# ---------------------------------------------------------------------------
# Private response envelope
# ---------------------------------------------------------------------------

class RemovedEvent(BaseModel):
    """Envelope variant: the user's event has been removed."""

    model_config = ConfigDict(frozen=True)


class PresentEvent(BaseModel):
    """Envelope variant: the user's event exists."""

    model_config = ConfigDict(frozen=True)

    event: Event


EventEnvelope = RemovedEvent | PresentEvent


class PrivateEventResponse(BaseModel):
    """Response body for most private API calls.

    Exactly one of ``event_is_removed`` and ``event`` carries information:
    a removed event has no data, and a live event always has data.  This
    spans two fields, so it is checked after both are decoded.
    """

    model_config = WIRE_CONFIG

    event_is_removed: bool
    event: Event | None = Field(default=None)

    @model_validator(mode="after")
    def _check_exclusive(self) -> PrivateEventResponse:
        if self.event_is_removed and self.event is not None:
            raise ValueError("Expected no event when it is removed")
        if not self.event_is_removed and self.event is None:
            raise ValueError("Expected an event when it is not removed")
        return self

    def to_envelope(self) -> EventEnvelope:
        if self.event is None:
            return RemovedEvent()
        return PresentEvent(event=self.event)


def decode_private_event_response(raw: Any) -> EventEnvelope:
    """Decode a private response payload into its envelope variant.

    Raises:
        pydantic.ValidationError: If the payload is malformed or breaks the
            removed/present rule.
    """
    return PrivateEventResponse.model_validate(raw).to_envelope()

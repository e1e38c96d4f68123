"""HTTP implementations of the content service clients.

Both clients wrap an injected ``httpx.AsyncClient`` (for testability and
connection pooling) and issue exactly one request per call.  There are no
retries.  Failures surface immediately as a
:class:`~content_sdk.utils.errors.ContentError` subclass chosen from the
status code:

    transport failure        -> ContentError
    401                      -> UnauthorizedContentError
    404                      -> EventNotFoundError
    409 on create            -> EventAlreadyExistsForUserError
    409 on update            -> SubDomainInUseError
    other non-2xx            -> ContentError (with status_code)
    undecodable body         -> ContentError
    envelope says removed    -> EventRemovedError

Clients are immutable values.  :meth:`with_context` builds a new client
around the same ``httpx.AsyncClient`` rather than changing this one.
"""

from __future__ import annotations

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from content_sdk.config.settings import Settings
from content_sdk.interfaces.content_client import (
    IContentPrivateClient,
    IContentPublicClient,
    UpdateEventOptions,
)
from content_sdk.models.dtos import (
    ChargebeeManagePageResponse,
    CheckSubDomainAvailableResponse,
    CreateEventRequest,
    PrivateEventResponse,
    PublicEventResponse,
    RemovedEvent,
    UpdateEventRequest,
)
from content_sdk.models.entities import Event, EventPlan
from content_sdk.models.session import Session, SessionToken
from content_sdk.utils.errors import (
    ContentError,
    EventAlreadyExistsForUserError,
    EventNotFoundError,
    EventRemovedError,
    SubDomainInUseError,
    UnauthorizedContentError,
)
from content_sdk.utils.logging import get_logger

_PRIVATE_EVENTS_PATH = "/api/private/events"
_MARK_WIZARD_SKIPPED_PATH = "/api/private/events/ui-mark-skipped-setup-wizard"
_BILLING_PAGE_PATH = "/api/private/events/chargebee-management-page-uri"
_CHECK_SUBDOMAIN_PATH = "/api/private/check-subdomain-available"
_PUBLIC_EVENTS_PATH = "/api/public/events"

_ModelT = TypeVar("_ModelT", bound=BaseModel)


class _ContentHttpClient:
    """Request plumbing shared by the private and public clients."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: Settings,
        session_token: SessionToken | None = None,
    ) -> None:
        self._http = http_client
        self._settings = settings
        self._session_token = session_token
        self._base_url = settings.content_service_base_url
        self._logger = get_logger(__name__)

    @property
    def session_token(self) -> SessionToken | None:
        return self._session_token

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _headers(self, session: Session | None = None) -> dict[str, str]:
        """Build request headers.  *session* is given only for mutating calls."""
        headers = {
            "Origin": self._settings.origin,
            "Accept": "application/json",
            "Cache-Control": "no-cache",
        }
        if self._session_token is not None:
            headers[self._settings.session_token_header] = self._session_token.to_header_value()
        if session is not None:
            headers[self._settings.xsrf_token_header] = session.xsrf_token
        return headers

    async def _send(
        self,
        method: str,
        path: str,
        *,
        session: Session | None = None,
        params: dict[str, str] | None = None,
        body: dict[str, Any] | None = None,
        conflict_error: type[ContentError] | None = None,
    ) -> httpx.Response:
        """Issue one request and map failure statuses onto the error family."""
        url = f"{self._base_url}{path}"
        try:
            response = await self._http.request(
                method,
                url,
                params=params,
                json=body,
                headers=self._headers(session),
                follow_redirects=False,
            )
        except httpx.HTTPError as exc:
            self._logger.warning("content_request_failed", method=method, path=path, error=str(exc))
            raise ContentError(f"Could not reach content service: {exc}") from exc

        status = response.status_code
        self._logger.debug("content_request", method=method, path=path, status=status)

        if status == 401:
            raise UnauthorizedContentError()
        if status == 404:
            raise EventNotFoundError()
        if status == 409 and conflict_error is not None:
            raise conflict_error()
        if not response.is_success:
            self._logger.warning("content_service_error", method=method, path=path, status=status)
            raise ContentError(f"Service response {status}", status_code=status)

        return response

    def _decode(self, response: httpx.Response, model: type[_ModelT]) -> _ModelT:
        """Parse the JSON body of *response* into *model*."""
        try:
            raw = response.json()
        except ValueError as exc:
            raise ContentError("Could not decode JSON response") from exc

        try:
            return model.model_validate(raw)
        except ValidationError as exc:
            self._logger.warning(
                "content_response_invalid",
                model=model.__name__,
                error_count=exc.error_count(),
            )
            raise ContentError(f"Could not decode {model.__name__}: {exc}") from exc


class ContentPrivateClient(_ContentHttpClient, IContentPrivateClient):
    """Private client for the caller's own event.

    Parameters
    ----------
    http_client:
        Injected ``httpx.AsyncClient``.
    settings:
        Service location, origin and header names.
    session_token:
        Optional explicit call context.  Prefer :meth:`with_context`.
    """

    def with_context(self, session_token: SessionToken) -> ContentPrivateClient:
        return ContentPrivateClient(self._http, self._settings, session_token=session_token)

    def _event_from(self, response: httpx.Response) -> Event:
        envelope = self._decode(response, PrivateEventResponse).to_envelope()
        if isinstance(envelope, RemovedEvent):
            raise EventRemovedError()
        return envelope.event

    async def create_event(self, session: Session, plan: EventPlan | str) -> Event:
        request = CreateEventRequest(plan=plan)
        response = await self._send(
            "POST",
            _PRIVATE_EVENTS_PATH,
            session=session,
            body=request.to_wire(),
            conflict_error=EventAlreadyExistsForUserError,
        )
        event = self._event_from(response)
        self._logger.info("content_event_created", event_id=event.id, plan=request.plan.value)
        return event

    async def update_event(self, session: Session, update_options: UpdateEventOptions) -> Event:
        # Runs the field validators before anything is sent.
        request = UpdateEventRequest(
            title=update_options.title,
            picture_set=update_options.picture_set,
            sub_event_details=update_options.sub_event_details,
            sub_domain=update_options.sub_domain,
        )
        body = request.to_wire()
        response = await self._send(
            "PUT",
            _PRIVATE_EVENTS_PATH,
            session=session,
            body=body,
            conflict_error=SubDomainInUseError,
        )
        event = self._event_from(response)
        self._logger.info("content_event_updated", event_id=event.id, fields=sorted(body))
        return event

    async def delete_event(self, session: Session) -> None:
        await self._send("DELETE", _PRIVATE_EVENTS_PATH, session=session)
        self._logger.info("content_event_deleted")

    async def mark_setup_wizard_skipped(self, session: Session) -> Event:
        response = await self._send("PUT", _MARK_WIZARD_SKIPPED_PATH, session=session)
        return self._event_from(response)

    async def get_event(self) -> Event:
        response = await self._send("GET", _PRIVATE_EVENTS_PATH)
        return self._event_from(response)

    async def check_subdomain_available(self, sub_domain: str) -> bool:
        response = await self._send(
            "GET",
            _CHECK_SUBDOMAIN_PATH,
            params={"subdomain": sub_domain},
        )
        return self._decode(response, CheckSubDomainAvailableResponse).available

    async def get_billing_management_page_uri(self) -> str:
        response = await self._send("GET", _BILLING_PAGE_PATH)
        return self._decode(response, ChargebeeManagePageResponse).manage_account_uri


class ContentPublicClient(_ContentHttpClient, IContentPublicClient):
    """Public, read-only client used when a guest views an event."""

    def with_context(self, session_token: SessionToken) -> ContentPublicClient:
        return ContentPublicClient(self._http, self._settings, session_token=session_token)

    async def get_event_by_subdomain(self, sub_domain: str) -> Event:
        response = await self._send(
            "GET",
            _PUBLIC_EVENTS_PATH,
            params={"subdomain": sub_domain},
        )
        return self._decode(response, PublicEventResponse).event


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

def new_content_private_client(
    settings: Settings, http_client: httpx.AsyncClient
) -> ContentPrivateClient:
    """Build a private client with no explicit call context."""
    return ContentPrivateClient(http_client, settings)


def new_content_public_client(
    settings: Settings, http_client: httpx.AsyncClient
) -> ContentPublicClient:
    """Build a public client with no explicit call context."""
    return ContentPublicClient(http_client, settings)

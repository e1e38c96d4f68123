"""Custom exception hierarchy for the content SDK.

All client-side failures inherit from :class:`ContentError`, which carries an
optional ``status_code`` so error handlers can see which HTTP response (if
any) caused the failure.

    ContentError  (base -- transport, decoding, unexpected status)
    +-- UnauthorizedContentError        (HTTP 401)
    +-- EventNotFoundError              (HTTP 404)
    +-- EventAlreadyExistsForUserError  (HTTP 409 on create)
    +-- SubDomainInUseError             (HTTP 409 on update)
    +-- EventRemovedError               (envelope says the event was removed)

Field validation failures are *not* part of this family.  They are
``ValueError`` subclasses living in :mod:`content_sdk.utils.validators`,
so pydantic can fold them into a ``ValidationError``.
"""


class ContentError(Exception):
    """Base exception for all content service errors.

    Every subclass carries a human-readable ``message`` and an optional
    ``status_code``.  The ``__str__`` method prefixes the status code in
    brackets, e.g. ``[502] Service error``.
    """

    def __init__(
        self,
        message: str = "Content service error",
        status_code: int | None = None,
    ) -> None:
        self._message = message
        self._status_code = status_code
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def status_code(self) -> int | None:
        return self._status_code

    def __str__(self) -> str:
        if self._status_code is not None:
            return f"[{self._status_code}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Domain-state errors -- distinct types so callers never inspect strings.
# ---------------------------------------------------------------------------

class UnauthorizedContentError(ContentError):
    """Raised when the caller is not allowed to perform the operation."""

    def __init__(
        self,
        message: str = "User is not authorized",
        status_code: int | None = 401,
    ) -> None:
        super().__init__(message=message, status_code=status_code)


class EventNotFoundError(ContentError):
    """Raised when the user has no event, or no event has the subdomain."""

    def __init__(
        self,
        message: str = "Event does not exist",
        status_code: int | None = 404,
    ) -> None:
        super().__init__(message=message, status_code=status_code)


class EventAlreadyExistsForUserError(ContentError):
    """Raised when creating an event for a user who already owns one."""

    def __init__(
        self,
        message: str = "Event already exists for user",
        status_code: int | None = 409,
    ) -> None:
        super().__init__(message=message, status_code=status_code)


class SubDomainInUseError(ContentError):
    """Raised when an update asks for a subdomain another event holds."""

    def __init__(
        self,
        message: str = "Subdomain is already in use",
        status_code: int | None = 409,
    ) -> None:
        super().__init__(message=message, status_code=status_code)


class EventRemovedError(ContentError):
    """Raised when the service reports the user's event as removed.

    Removal is terminal, so there is nothing to retry here.
    """

    def __init__(
        self,
        message: str = "Event is removed",
        status_code: int | None = None,
    ) -> None:
        super().__init__(message=message, status_code=status_code)

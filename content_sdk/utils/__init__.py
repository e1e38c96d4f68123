"""Utility modules for the content SDK.

Available utility modules (all re-exported here for convenience):

- **errors** -- Client exception hierarchy rooted at ContentError; each
  HTTP/domain failure has its own subclass so callers can match on type
  instead of parsing messages.
- **logging** -- structlog setup with a dual-renderer pattern: coloured
  console output in development, structured JSON in production.
- **validators** -- Field rules for titles, addresses, subdomains, secure
  URIs, timestamps and picture ordering, plus the ``classify_*`` helpers
  UI code uses to show targeted messages.
"""

# -- Client exception hierarchy --------------------------------------------
from content_sdk.utils.errors import (
    ContentError,
    EventAlreadyExistsForUserError,
    EventNotFoundError,
    EventRemovedError,
    SubDomainInUseError,
    UnauthorizedContentError,
)

# -- Structured logging setup ----------------------------------------------
from content_sdk.utils.logging import configure_logging, get_logger

# -- Field validation rules ------------------------------------------------
from content_sdk.utils.validators import (
    AddressErrorReason,
    FieldValidationError,
    PictureSetError,
    SubDomainErrorReason,
    TitleErrorReason,
    classify_address,
    classify_subdomain,
    classify_title,
    validate_address,
    validate_picture_positions,
    validate_secure_web_uri,
    validate_subdomain,
    validate_title,
)

__all__ = [
    "AddressErrorReason",
    "ContentError",
    "EventAlreadyExistsForUserError",
    "EventNotFoundError",
    "EventRemovedError",
    "FieldValidationError",
    "PictureSetError",
    "SubDomainErrorReason",
    "SubDomainInUseError",
    "TitleErrorReason",
    "UnauthorizedContentError",
    "classify_address",
    "classify_subdomain",
    "classify_title",
    "configure_logging",
    "get_logger",
    "validate_address",
    "validate_picture_positions",
    "validate_secure_web_uri",
    "validate_subdomain",
    "validate_title",
]

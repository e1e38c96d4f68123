"""Field validation rules for content entities.

Every user-editable field with rules beyond its type gets two entry points:

1. ``validate_<field>(raw)`` -- returns the normalized value or raises
   :class:`FieldValidationError`.  Because that is a ``ValueError``,
   pydantic folds it into a ``ValidationError`` when the function runs
   inside a model (see the ``Annotated`` aliases at the bottom).
2. ``classify_<field>(raw)`` -- never raises.  Returns ``OK`` or the exact
   reason, so forms can show "too short" instead of a generic error.

Length checks always run before character checks: ``"A$"`` is TOO_SHORT,
not INVALID_CHARACTERS.

Title is the only field that is normalized: surrounding whitespace is
stripped, and a byte-order mark (U+FEFF) counts as whitespace there.  Title
length is counted in code points, so a title of four emoji is four
characters long.  Everything else is returned untouched.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Annotated, Any, Protocol
from urllib.parse import urlparse

from pydantic import BeforeValidator, PlainSerializer

TITLE_MIN_SIZE = 4
TITLE_MAX_SIZE = 128
ADDRESS_MIN_SIZE = 3
SUBDOMAIN_MIN_SIZE = 4
SUBDOMAIN_MAX_SIZE = 58
MAX_NUMBER_OF_PICTURES = 25

_SUBDOMAIN_RE = re.compile(r"[a-z]-?([a-z0-9]+-)*[a-z0-9]+")
_TRIM_RE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+\Z")
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)  # noqa: UP017


# ---------------------------------------------------------------------------
# Reason enums
# ---------------------------------------------------------------------------

class TitleErrorReason(str, Enum):  # noqa: UP042 — StrEnum requires Python 3.11+
    """Why a title was rejected."""

    OK = "OK"
    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    LOWER_LEVEL = "LOWER_LEVEL"  # not a string at all


class AddressErrorReason(str, Enum):  # noqa: UP042
    """Why an address was rejected."""

    OK = "OK"
    TOO_SHORT = "TOO_SHORT"
    LOWER_LEVEL = "LOWER_LEVEL"


class SubDomainErrorReason(str, Enum):  # noqa: UP042
    """Why a subdomain was rejected."""

    OK = "OK"
    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    INVALID_CHARACTERS = "INVALID_CHARACTERS"
    LOWER_LEVEL = "LOWER_LEVEL"


class FieldValidationError(ValueError):
    """A single field failed its rule.

    ``reason`` is one of the ``*ErrorReason`` enums above and never ``OK``.
    """

    def __init__(self, reason: Enum, message: str) -> None:
        self.reason = reason
        super().__init__(message)


class PictureSetError(ValueError):
    """A picture sequence is too long or out of order."""


# ---------------------------------------------------------------------------
# Classification -- pure, never raises
# ---------------------------------------------------------------------------

def _trim(value: str) -> str:
    return _TRIM_RE.sub("", value)


def classify_title(raw: Any) -> TitleErrorReason:
    """Classify *raw* as a title without raising."""
    if not isinstance(raw, str):
        return TitleErrorReason.LOWER_LEVEL

    trimmed = _trim(raw)
    if len(trimmed) < TITLE_MIN_SIZE:
        return TitleErrorReason.TOO_SHORT
    if len(trimmed) > TITLE_MAX_SIZE:
        return TitleErrorReason.TOO_LONG
    return TitleErrorReason.OK


def classify_address(raw: Any) -> AddressErrorReason:
    """Classify *raw* as an address without raising.

    Addresses have almost no structure we can check; this only rules out
    strings of 0, 1 or 2 characters.
    """
    if not isinstance(raw, str):
        return AddressErrorReason.LOWER_LEVEL
    if len(raw) < ADDRESS_MIN_SIZE:
        return AddressErrorReason.TOO_SHORT
    return AddressErrorReason.OK


def classify_subdomain(raw: Any) -> SubDomainErrorReason:
    """Classify *raw* as a subdomain without raising."""
    if not isinstance(raw, str):
        return SubDomainErrorReason.LOWER_LEVEL
    if len(raw) < SUBDOMAIN_MIN_SIZE:
        return SubDomainErrorReason.TOO_SHORT
    if len(raw) > SUBDOMAIN_MAX_SIZE:
        return SubDomainErrorReason.TOO_LONG
    if not _SUBDOMAIN_RE.fullmatch(raw):
        return SubDomainErrorReason.INVALID_CHARACTERS
    return SubDomainErrorReason.OK


# ---------------------------------------------------------------------------
# Validation -- returns the normalized value or raises FieldValidationError
# ---------------------------------------------------------------------------

_TITLE_MESSAGES = {
    TitleErrorReason.TOO_SHORT: f"Title must have at least {TITLE_MIN_SIZE} characters",
    TitleErrorReason.TOO_LONG: f"Title must have at most {TITLE_MAX_SIZE} characters",
    TitleErrorReason.LOWER_LEVEL: "Title must be a string",
}

_ADDRESS_MESSAGES = {
    AddressErrorReason.TOO_SHORT: "String is too short to be an address",
    AddressErrorReason.LOWER_LEVEL: "Address must be a string",
}

_SUBDOMAIN_MESSAGES = {
    SubDomainErrorReason.TOO_SHORT: f"Subdomain must have at least {SUBDOMAIN_MIN_SIZE} characters",
    SubDomainErrorReason.TOO_LONG: f"Subdomain must have at most {SUBDOMAIN_MAX_SIZE} characters",
    SubDomainErrorReason.INVALID_CHARACTERS: "Subdomain has invalid characters",
    SubDomainErrorReason.LOWER_LEVEL: "Subdomain must be a string",
}


def validate_title(raw: Any) -> str:
    """Return *raw* with surrounding whitespace stripped, if it is a valid title."""
    reason = classify_title(raw)
    if reason is not TitleErrorReason.OK:
        raise FieldValidationError(reason, _TITLE_MESSAGES[reason])
    return _trim(raw)


def validate_address(raw: Any) -> str:
    """Return *raw* unchanged if it is a valid address."""
    reason = classify_address(raw)
    if reason is not AddressErrorReason.OK:
        raise FieldValidationError(reason, _ADDRESS_MESSAGES[reason])
    return raw


def validate_subdomain(raw: Any) -> str:
    """Return *raw* unchanged if it is a valid subdomain."""
    reason = classify_subdomain(raw)
    if reason is not SubDomainErrorReason.OK:
        raise FieldValidationError(reason, _SUBDOMAIN_MESSAGES[reason])
    return raw


def validate_secure_web_uri(raw: Any) -> str:
    """Return *raw* unchanged if it is an ``https`` URI with a host."""
    if not isinstance(raw, str):
        raise ValueError("URI must be a string")
    parsed = urlparse(raw)
    if parsed.scheme != "https" or not parsed.netloc:
        raise ValueError(f"Expected a secure web URI, got {raw!r}")
    return raw


class _Positioned(Protocol):
    position: int


def validate_picture_positions(pictures: Sequence[_Positioned]) -> Sequence[_Positioned]:
    """Check a picture sequence is short enough and numbered 1, 2, 3, ...

    Invalid ordering is rejected, never repaired.

    Raises:
        PictureSetError: On too many pictures, or on the first picture whose
            position does not equal its 1-based index.
    """
    if len(pictures) > MAX_NUMBER_OF_PICTURES:
        raise PictureSetError(
            f"Expected at most {MAX_NUMBER_OF_PICTURES} pictures, got {len(pictures)}"
        )

    for index, picture in enumerate(pictures):
        if picture.position != index + 1:
            raise PictureSetError(
                f"Expected picture {index} to have position {index + 1}, "
                f"got {picture.position}"
            )

    return pictures


# ---------------------------------------------------------------------------
# Timestamps -- integer milliseconds since the Unix epoch on the wire
# ---------------------------------------------------------------------------

def timestamp_from_wire(raw: Any) -> datetime:
    """Decode epoch milliseconds into an aware UTC datetime.

    ``datetime`` values pass through; naive ones are taken to be UTC.
    """
    if isinstance(raw, datetime):
        return raw if raw.tzinfo is not None else raw.replace(tzinfo=timezone.utc)  # noqa: UP017
    # bool is an int subclass; True is not a timestamp.
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ValueError("Expected a timestamp in milliseconds")
    try:
        return _EPOCH + timedelta(milliseconds=raw)
    except (OverflowError, OSError) as exc:
        raise ValueError("Timestamp out of range") from exc


def timestamp_to_wire(value: datetime) -> int:
    """Encode a datetime as integer epoch milliseconds."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)  # noqa: UP017
    return (value - _EPOCH) // timedelta(milliseconds=1)


# ---------------------------------------------------------------------------
# Annotated field types consumed by the models
# ---------------------------------------------------------------------------

Title = Annotated[str, BeforeValidator(validate_title)]
Address = Annotated[str, BeforeValidator(validate_address)]
SubDomain = Annotated[str, BeforeValidator(validate_subdomain)]
SecureWebUri = Annotated[str, BeforeValidator(validate_secure_web_uri)]
Timestamp = Annotated[
    datetime,
    BeforeValidator(timestamp_from_wire),
    PlainSerializer(timestamp_to_wire, return_type=int, when_used="json"),
]

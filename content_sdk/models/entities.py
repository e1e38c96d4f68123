"""Core entities of the content service.

Defines enums and Pydantic v2 models for events, their picture sets and
their sub-events.  All models use frozen config to enforce immutability;
edited copies are produced with ``model_copy(update={...})``.

Python attributes are snake_case.  On the wire the service speaks camelCase
(``subEventDetails``, ``timeLastUpdated``), handled by the alias generator in
``WIRE_CONFIG``.  Both spellings are accepted when building a model.

Key relationships:
    - Event has one PictureSet and an ordered list of SubEventDetails
    - Picture holds a main Image and a thumbnail Image
    - Event.does_look_active is derived from pictures and sub-events on every
      access, never stored
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from content_sdk.utils.validators import (
    MAX_NUMBER_OF_PICTURES,
    Address,
    SecureWebUri,
    SubDomain,
    Timestamp,
    Title,
    validate_picture_positions,
)

# Shared by every model that crosses the wire.
WIRE_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class EventPlan(str, Enum):  # noqa: UP042 — StrEnum requires Python 3.11+
    """Billing plan an event is on.  Persisted as a lowercase-hyphenated string."""

    QUICK_STARTER = "quick-starter"
    LONG_TERM_THINKER = "long-term-thinker"


class EventState(IntEnum):
    """Lifecycle state of an event.

    CREATED -> ACTIVE once the content looks complete (decided server-side),
    and any state -> REMOVED on deletion.  REMOVED is terminal.
    """

    UNKNOWN = 0  # sentinel, never valid in persisted data
    CREATED = 1
    ACTIVE = 2
    REMOVED = 3


# ---------------------------------------------------------------------------
# Pictures
# ---------------------------------------------------------------------------

class Image(BaseModel):
    """One rendition of an uploaded picture, served from a secure URI."""

    model_config = WIRE_CONFIG

    uri: SecureWebUri
    format: str
    width: int = Field(gt=0)
    height: int = Field(gt=0)


class Picture(BaseModel):
    """An uploaded picture: a full-size image plus its thumbnail."""

    model_config = WIRE_CONFIG

    MAIN_WIDTH: ClassVar[int] = 1600
    MAIN_HEIGHT: ClassVar[int] = 900
    THUMBNAIL_WIDTH: ClassVar[int] = 300
    THUMBNAIL_HEIGHT: ClassVar[int] = 170
    FORMAT: ClassVar[str] = "jpg"

    # 1-based slot in the owning PictureSet.
    position: int = Field(gt=0)
    main_image: Image
    thumbnail_image: Image


class PictureSet(BaseModel):
    """The ordered pictures of an event.

    At most ``MAX_NUMBER_OF_PICTURES`` entries, and ``pictures[i].position``
    must equal ``i + 1``.  Bad ordering is a validation failure.
    """

    model_config = WIRE_CONFIG

    MAX_NUMBER_OF_PICTURES: ClassVar[int] = MAX_NUMBER_OF_PICTURES

    pictures: list[Picture] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_positions(self) -> PictureSet:
        validate_picture_positions(self.pictures)
        return self


# ---------------------------------------------------------------------------
# Sub-events
# ---------------------------------------------------------------------------

class SubEventDisplayInfo(BaseModel):
    """How a sub-event is drawn on the public page."""

    model_config = WIRE_CONFIG

    icon: str
    color: str


class SubEventDetails(BaseModel):
    """One occurrence within the event, e.g. a ceremony or a reception.

    ``title`` maps language codes to localized titles.  It may be empty while
    the user is still filling things in.
    """

    model_config = WIRE_CONFIG

    have_event: bool
    title: dict[str, str] = Field(default_factory=dict)
    slug: str
    address: Address
    coordinates: tuple[float, float]
    date_and_time: Timestamp
    display: SubEventDisplayInfo

    @property
    def looks_active(self) -> bool:
        """Whether the sub-event has enough text to be shown publicly.

        Only the title and slug are looked at.  Address, coordinates, date
        and ``have_event`` are not considered.
        """
        if not self.title:
            return False
        if any(not localized for localized in self.title.values()):
            return False
        if not self.slug:
            return False
        return True


# ---------------------------------------------------------------------------
# Event
# ---------------------------------------------------------------------------

class EventUiState(BaseModel):
    """UI flags persisted alongside the event."""

    model_config = WIRE_CONFIG

    show_setup_wizard: bool


class Event(BaseModel):
    """An event, the single piece of content each user account owns.

    The one-event-per-account rule is enforced by the service; this model
    only describes the shape.
    """

    model_config = WIRE_CONFIG

    id: int = Field(gt=0)
    state: EventState
    title: Title
    picture_set: PictureSet
    sub_event_details: list[SubEventDetails] = Field(default_factory=list)
    ui_state: EventUiState
    plan: EventPlan
    sub_domain: SubDomain
    time_created: Timestamp
    time_last_updated: Timestamp

    @field_validator("state")
    @classmethod
    def _reject_unknown_state(cls, value: EventState) -> EventState:
        if value is EventState.UNKNOWN:
            raise ValueError("Event state cannot be UNKNOWN")
        return value

    @property
    def does_look_active(self) -> bool:
        """Whether the event has enough content to be made public.

        Needs at least one picture and at least one held sub-event, and every
        held sub-event must itself look active.
        """
        if not self.picture_set.pictures:
            return False

        held = [details for details in self.sub_event_details if details.have_event]
        if not held:
            return False

        return all(details.looks_active for details in held)

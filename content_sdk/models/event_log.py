"""Audit log records for changes made to an :class:`~content_sdk.models.entities.Event`.

The service appends one ``EventEvent`` per create, update, activation,
deactivation and removal.  Create and update records keep the request body
that caused them, which is why ``data`` is a union of the two request DTOs.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Annotated

from pydantic import BaseModel, Field, field_validator

from content_sdk.models.dtos import CreateEventRequest, UpdateEventRequest
from content_sdk.models.entities import WIRE_CONFIG
from content_sdk.utils.validators import Timestamp


class EventEventType(IntEnum):
    """What happened to the event."""

    UNKNOWN = 0  # default value, not meant to be used
    CREATED = 1
    UPDATED = 2  # generic update, e.g. changing an address
    ACTIVATED = 3  # an update made the event complete enough to be public
    DEACTIVATED = 4  # an update made the event incomplete again
    REMOVED = 5


class EventEvent(BaseModel):
    """One entry in an event's change log."""

    model_config = WIRE_CONFIG

    id: int = Field(gt=0)
    type: EventEventType
    timestamp: Timestamp
    # left_to_right: a body with ``plan`` is a create; anything else an update.
    data: Annotated[
        CreateEventRequest | UpdateEventRequest, Field(union_mode="left_to_right")
    ] | None = None

    @field_validator("type")
    @classmethod
    def _reject_unknown_type(cls, value: EventEventType) -> EventEventType:
        if value is EventEventType.UNKNOWN:
            raise ValueError("Event event type cannot be UNKNOWN")
        return value

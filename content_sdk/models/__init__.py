"""Content SDK domain models — re-exports all public model classes.

Other parts of the code base (and SDK users) can import from
``content_sdk.models`` instead of the individual submodules.

The models are organized across four submodules by concern:
    - entities.py   — Event, pictures, sub-events, plan and state enums
    - dtos.py       — request/response bodies and the private envelope
    - event_log.py  — audit records of changes to an event
    - session.py    — identity-service session shapes the client forwards

If you add a new model class, remember to add it to ``__all__`` too.
"""

from __future__ import annotations

from content_sdk.models.dtos import (
    ChargebeeManagePageResponse,
    CheckSubDomainAvailableResponse,
    CreateEventRequest,
    EventEnvelope,
    PresentEvent,
    PrivateEventResponse,
    PublicEventResponse,
    RemovedEvent,
    UpdateEventRequest,
    decode_private_event_response,
)
from content_sdk.models.entities import (
    Event,
    EventPlan,
    EventState,
    EventUiState,
    Image,
    Picture,
    PictureSet,
    SubEventDetails,
    SubEventDisplayInfo,
)
from content_sdk.models.event_log import EventEvent, EventEventType
from content_sdk.models.session import Session, SessionToken

__all__ = [
    "ChargebeeManagePageResponse",
    "CheckSubDomainAvailableResponse",
    "CreateEventRequest",
    "Event",
    "EventEnvelope",
    "EventEvent",
    "EventEventType",
    "EventPlan",
    "EventState",
    "EventUiState",
    "Image",
    "Picture",
    "PictureSet",
    "PresentEvent",
    "PrivateEventResponse",
    "PublicEventResponse",
    "RemovedEvent",
    "Session",
    "SessionToken",
    "SubEventDetails",
    "SubEventDisplayInfo",
    "UpdateEventRequest",
    "decode_private_event_response",
]

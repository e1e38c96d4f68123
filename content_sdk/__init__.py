"""Client SDK for the content service: events, pictures, sub-events, subdomains.

The public surface is re-exported here so users can write
``from content_sdk import Event, ContentPrivateClient``.
"""

from content_sdk.interfaces.content_client import (
    IContentPrivateClient,
    IContentPublicClient,
    UpdateEventOptions,
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
from content_sdk.models.session import Session, SessionToken
from content_sdk.providers.content.http_client import (
    ContentPrivateClient,
    ContentPublicClient,
    new_content_private_client,
    new_content_public_client,
)
from content_sdk.utils.errors import (
    ContentError,
    EventAlreadyExistsForUserError,
    EventNotFoundError,
    EventRemovedError,
    SubDomainInUseError,
    UnauthorizedContentError,
)
from content_sdk.utils.validators import (
    AddressErrorReason,
    SubDomainErrorReason,
    TitleErrorReason,
    classify_address,
    classify_subdomain,
    classify_title,
)

__version__ = "0.1.0"

__all__ = [
    "AddressErrorReason",
    "ContentError",
    "ContentPrivateClient",
    "ContentPublicClient",
    "Event",
    "EventAlreadyExistsForUserError",
    "EventNotFoundError",
    "EventPlan",
    "EventRemovedError",
    "EventState",
    "EventUiState",
    "IContentPrivateClient",
    "IContentPublicClient",
    "Image",
    "Picture",
    "PictureSet",
    "Session",
    "SessionToken",
    "SubDomainErrorReason",
    "SubDomainInUseError",
    "SubEventDetails",
    "SubEventDisplayInfo",
    "TitleErrorReason",
    "UnauthorizedContentError",
    "UpdateEventOptions",
    "classify_address",
    "classify_subdomain",
    "classify_title",
    "new_content_private_client",
    "new_content_public_client",
]

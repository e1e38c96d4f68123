"""Client contracts for the content service.

Concrete implementations live in :mod:`content_sdk.providers.content`.
"""

from content_sdk.interfaces.content_client import (
    IContentPrivateClient,
    IContentPublicClient,
    UpdateEventOptions,
)

__all__ = [
    "IContentPrivateClient",
    "IContentPublicClient",
    "UpdateEventOptions",
]

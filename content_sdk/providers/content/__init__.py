"""httpx-backed content service clients."""

from content_sdk.providers.content.http_client import (
    ContentPrivateClient,
    ContentPublicClient,
    new_content_private_client,
    new_content_public_client,
)

__all__ = [
    "ContentPrivateClient",
    "ContentPublicClient",
    "new_content_private_client",
    "new_content_public_client",
]

"""HTTP client wrappers for the DeSo node API."""

from .client import DesoApiClient, DesoApiError, ValidationError, default_client
from .transport import (
    close_shared_transport,
    get_shared_transport,
    shared_transport_base_url,
    shared_transport_settings,
)

__all__ = [
    "DesoApiClient",
    "DesoApiError",
    "ValidationError",
    "default_client",
    "close_shared_transport",
    "get_shared_transport",
    "shared_transport_base_url",
    "shared_transport_settings",
]

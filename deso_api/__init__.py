"""
Typed async client for the DeSo node JSON API.

Each public method validates its required parameters, posts the documented
wire fields to the node and returns the parsed response body unchanged. See
DESIGN.md for the transport sharing policy.
"""

from deso_api.api import DesoApiClient, DesoApiError, ValidationError, default_client

__all__ = ["DesoApiClient", "DesoApiError", "ValidationError", "default_client", "config"]

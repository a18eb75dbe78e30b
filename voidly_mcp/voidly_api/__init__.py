"""HTTP client wrappers for the Voidly censorship API."""

from voidly_mcp.errors import UpstreamError, UpstreamUnreachableError

from .client import VoidlyApiClient, default_client

__all__ = [
    "VoidlyApiClient",
    "UpstreamError",
    "UpstreamUnreachableError",
    "default_client",
]

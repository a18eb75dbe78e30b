"""Exception types shared by the dispatch table, resource reader, and API client."""

from __future__ import annotations

from typing import Optional


class VoidlyMcpError(Exception):
    """Base exception for the Voidly MCP server."""


class UpstreamError(VoidlyMcpError):
    """Raised when the Voidly API returns a failure status or an unreadable body."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        status_text: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.status_text = status_text


class UpstreamUnreachableError(UpstreamError):
    """Raised when the Voidly API cannot be reached at all."""


class MissingArgumentError(VoidlyMcpError):
    """Raised when a required tool argument is absent or empty."""

    def __init__(self, names: tuple[str, ...]) -> None:
        verb = "is" if len(names) == 1 else "are"
        super().__init__(f"{' and '.join(names)} {verb} required")
        self.names = names


class UnknownToolError(VoidlyMcpError):
    """Raised when a tool name is not in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class UnknownResourceError(VoidlyMcpError):
    """Raised when a resource URI is not in the registry."""

    def __init__(self, uri: str) -> None:
        super().__init__(f"Unknown resource: {uri}")
        self.uri = uri


class HandlerError(VoidlyMcpError):
    """Wraps an unexpected exception raised by a tool handler."""

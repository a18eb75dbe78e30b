"""
Tool and resource registry for the MCP surface.

Maps tool names to the markdown report tools and resource URIs to raw Voidly
API documents. ``call_tool`` is the single recovery boundary for tools: every
failure comes back as an error ``ToolResult`` rather than an exception.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple

from voidly_mcp.config import default_config
from voidly_mcp.errors import (
    HandlerError,
    MissingArgumentError,
    UnknownResourceError,
    UnknownToolError,
    VoidlyMcpError,
)
from voidly_mcp.tools import (
    check_domain_blocked,
    get_active_incidents,
    get_censorship_index,
    get_country_status,
    get_most_censored,
)
from voidly_mcp.voidly_api import default_client

logger = logging.getLogger(__name__)

JSON_MIME_TYPE = "application/json"

COUNTRY_CODE_SCHEMA: Dict[str, Any] = {
    "type": "string",
    "description": "ISO 3166-1 alpha-2 country code (e.g., CN for China, IR for Iran, RU for Russia)",
}


def _object_schema(properties: Dict[str, Any], required: Tuple[str, ...] = ()) -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": properties,
        "required": list(required),
    }


ToolCallable = Callable[..., Awaitable[str]]


@dataclass(slots=True)
class ToolDefinition:
    name: str
    description: str
    input_schema: Dict[str, Any]
    callable: ToolCallable
    required: Tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class ToolResult:
    text: str
    is_error: bool = False

    @classmethod
    def from_error(cls, error: Exception) -> "ToolResult":
        return cls(text=f"Error: {error}", is_error=True)

    def to_content(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"content": [{"type": "text", "text": self.text}]}
        if self.is_error:
            payload["isError"] = True
        return payload


TOOL_REGISTRY: Dict[str, ToolDefinition] = {
    "get_censorship_index": ToolDefinition(
        name="get_censorship_index",
        description=(
            "Get the Voidly Global Censorship Index - a comprehensive overview of internet "
            "censorship across 50+ countries. Returns summary statistics and the most censored "
            "countries ranked by anomaly rate."
        ),
        input_schema=_object_schema({}),
        callable=get_censorship_index,
    ),
    "get_country_status": ToolDefinition(
        name="get_country_status",
        description=(
            "Get detailed censorship status for a specific country including anomaly rates, "
            "affected services, and active incidents."
        ),
        input_schema=_object_schema({"country_code": COUNTRY_CODE_SCHEMA}, ("country_code",)),
        callable=get_country_status,
        required=("country_code",),
    ),
    "check_domain_blocked": ToolDefinition(
        name="check_domain_blocked",
        description=(
            "Check if a specific domain is likely blocked in a country. Returns general "
            "censorship status for the country."
        ),
        input_schema=_object_schema(
            {
                "domain": {
                    "type": "string",
                    "description": "Domain to check (e.g., google.com, twitter.com)",
                },
                "country_code": {
                    "type": "string",
                    "description": "ISO 3166-1 alpha-2 country code",
                },
            },
            ("domain", "country_code"),
        ),
        callable=check_domain_blocked,
        required=("domain", "country_code"),
    ),
    "get_most_censored": ToolDefinition(
        name="get_most_censored",
        description="Get a ranked list of the most censored countries by anomaly rate.",
        input_schema=_object_schema(
            {
                "limit": {
                    "type": "number",
                    "description": (
                        f"Number of countries to return (default: {default_config.default_most_censored}, "
                        f"max: {default_config.max_most_censored})"
                    ),
                },
            }
        ),
        callable=get_most_censored,
    ),
    "get_active_incidents": ToolDefinition(
        name="get_active_incidents",
        description=(
            "Get currently active censorship incidents worldwide including internet shutdowns, "
            "social media blocks, and VPN restrictions."
        ),
        input_schema=_object_schema({}),
        callable=get_active_incidents,
    ),
}


@dataclass(slots=True)
class ResourceDefinition:
    uri: str
    name: str
    description: str
    fetch: Callable[[Any], Awaitable[Any]]
    mime_type: str = JSON_MIME_TYPE


RESOURCE_REGISTRY: Dict[str, ResourceDefinition] = {
    "voidly://censorship-index": ResourceDefinition(
        uri="voidly://censorship-index",
        name="Global Censorship Index",
        description="Complete censorship index data in JSON format",
        fetch=lambda client: client.fetch_censorship_index(),
    ),
    "voidly://methodology": ResourceDefinition(
        uri="voidly://methodology",
        name="Methodology",
        description="Data collection and scoring methodology",
        fetch=lambda client: client.fetch_methodology(),
    ),
}


def list_tools() -> List[Dict[str, Any]]:
    """Return the MCP descriptors of all tools."""
    return [
        {
            "name": tool.name,
            "description": tool.description,
            "inputSchema": tool.input_schema,
        }
        for tool in TOOL_REGISTRY.values()
    ]


def _resolve_tool(tool_name: str, arguments: Dict[str, Any]) -> Tuple[ToolDefinition, Dict[str, Any]]:
    tool = TOOL_REGISTRY.get(tool_name)
    if tool is None:
        raise UnknownToolError(tool_name)
    if any(not arguments.get(key) for key in tool.required):
        raise MissingArgumentError(tool.required)
    # Unknown argument keys are dropped rather than rejected.
    properties = tool.input_schema["properties"]
    return tool, {key: value for key, value in arguments.items() if key in properties}


async def call_tool(
    tool_name: str,
    arguments: Optional[Dict[str, Any]] = None,
    *,
    client=default_client,
) -> ToolResult:
    """Dispatch to a tool by name and wrap the outcome."""
    arguments = arguments or {}
    try:
        tool, kwargs = _resolve_tool(tool_name, arguments)
        text = await tool.callable(**kwargs, client=client)
    except VoidlyMcpError as exc:
        logger.info("tool=%s rejected: %s", tool_name, exc)
        return ToolResult.from_error(exc)
    except Exception as exc:
        logger.exception("Unexpected error while calling tool %s", tool_name)
        return ToolResult.from_error(HandlerError(str(exc) or "Unknown error"))
    return ToolResult(text=text)


def list_resources() -> List[Dict[str, Any]]:
    """Return the MCP descriptors of all resources."""
    return [
        {
            "uri": resource.uri,
            "name": resource.name,
            "description": resource.description,
            "mimeType": resource.mime_type,
        }
        for resource in RESOURCE_REGISTRY.values()
    ]


async def read_resource(uri: str, *, client=default_client) -> Dict[str, Any]:
    """
    Return a resource as pretty-printed JSON.

    Raises:
        UnknownResourceError: ``uri`` is not registered.
        UpstreamError: the Voidly API request failed.
    """
    resource = RESOURCE_REGISTRY.get(uri)
    if resource is None:
        raise UnknownResourceError(uri)
    data = await resource.fetch(client)
    return {
        "contents": [
            {
                "uri": uri,
                "mimeType": resource.mime_type,
                "text": json.dumps(data, indent=2, ensure_ascii=False),
            }
        ]
    }

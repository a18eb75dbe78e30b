"""
JSON-RPC message handling for MCP clients.

Both transports (stdio and the HTTP gateway) decode a message, hand it to
``handle_message``, and write back whatever payload it returns. Notifications
return ``None`` and get no reply.

Supported methods:
  - initialize, ping
  - tools/list (alias list_tools), tools/call (alias call_tool)
  - resources/list (alias list_resources), resources/read (alias read_resource)
  - notifications/*
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from voidly_mcp import mcp
from voidly_mcp.errors import UnknownResourceError, UpstreamError
from voidly_mcp.metrics import default_metrics
from voidly_mcp.voidly_api import default_client

logger = logging.getLogger(__name__)

MCP_SERVER_NAME = "voidly-censorship-index"
MCP_SERVER_VERSION = "1.0.0"

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
RESOURCE_NOT_FOUND = -32002


def jsonrpc_success_payload(rpc_id: Any, result: Any) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": rpc_id, "result": result}


def jsonrpc_error_payload(rpc_id: Any, code: int, message: str) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": rpc_id, "error": {"code": code, "message": message}}


def log_tool_result(tool_name: str, result: mcp.ToolResult, request_id: Optional[str] = None) -> None:
    if result.is_error:
        logger.warning(
            "tool=%s outcome=error error=%s request_id=%s",
            tool_name,
            result.text,
            request_id,
            extra={"tool": tool_name, "request_id": request_id, "error": result.text},
        )
        default_metrics.record_tool(tool_name, success=False)
    else:
        logger.info(
            "tool=%s outcome=success request_id=%s",
            tool_name,
            request_id,
            extra={"tool": tool_name, "request_id": request_id},
        )
        default_metrics.record_tool(tool_name, success=True)


async def _call_tool(rpc_id: Any, params: Dict[str, Any], client, request_id: Optional[str]) -> Dict[str, Any]:
    tool_name = params.get("name") or params.get("tool")
    arguments = params.get("arguments")
    if arguments is None:
        arguments = params.get("params") or {}
    if not isinstance(tool_name, str) or not tool_name.strip():
        return jsonrpc_error_payload(rpc_id, INVALID_PARAMS, "Invalid params")
    if not isinstance(arguments, dict):
        return jsonrpc_error_payload(rpc_id, INVALID_PARAMS, "Invalid params")

    result = await mcp.call_tool(tool_name, arguments, client=client)
    log_tool_result(tool_name, result, request_id)
    return jsonrpc_success_payload(rpc_id, result.to_content())


async def _read_resource(rpc_id: Any, params: Dict[str, Any], client, request_id: Optional[str]) -> Dict[str, Any]:
    uri = params.get("uri")
    if not isinstance(uri, str) or not uri:
        return jsonrpc_error_payload(rpc_id, INVALID_PARAMS, "Invalid params")

    try:
        result = await mcp.read_resource(uri, client=client)
    except UnknownResourceError as exc:
        return jsonrpc_error_payload(rpc_id, RESOURCE_NOT_FOUND, str(exc))
    except UpstreamError as exc:
        logger.warning(
            "resource=%s outcome=error error=%s request_id=%s",
            uri,
            exc,
            request_id,
            extra={"request_id": request_id, "error": str(exc)},
        )
        return jsonrpc_error_payload(rpc_id, INTERNAL_ERROR, str(exc))
    except Exception:
        logger.exception("Unexpected error while reading resource %s", uri)
        return jsonrpc_error_payload(rpc_id, INTERNAL_ERROR, "Internal error")

    default_metrics.record_resource(uri)
    return jsonrpc_success_payload(rpc_id, result)


async def handle_message(
    body: Any,
    *,
    client=default_client,
    request_id: Optional[str] = None,
) -> Optional[Dict[str, Any]]:
    """Process one decoded JSON-RPC message and return the reply payload."""
    if not isinstance(body, dict):
        return jsonrpc_error_payload(None, INVALID_REQUEST, "Invalid request")

    method = body.get("method")
    rpc_id = body.get("id")
    if not method or not isinstance(method, str):
        return jsonrpc_error_payload(rpc_id, INVALID_REQUEST, "Invalid request")

    # A message without an id is a notification, whatever its method.
    if "id" not in body or method.startswith("notifications/") or method == "initialized":
        logger.debug("mcp notification %s request_id=%s", method, request_id, extra={"request_id": request_id})
        return None

    raw_params = body.get("params")
    if raw_params is None:
        params: Dict[str, Any] = {}
    elif isinstance(raw_params, dict):
        params = raw_params
    else:
        return jsonrpc_error_payload(rpc_id, INVALID_PARAMS, "Invalid params")

    if method == "initialize":
        protocol_version = params.get("protocolVersion")
        if not isinstance(protocol_version, str) or not protocol_version:
            return jsonrpc_error_payload(rpc_id, INVALID_PARAMS, "Invalid params")
        logger.debug(
            "mcp initialize requested protocol=%s request_id=%s",
            protocol_version,
            request_id,
            extra={"request_id": request_id},
        )
        result = {
            "protocolVersion": protocol_version,
            "serverInfo": {"name": MCP_SERVER_NAME, "version": MCP_SERVER_VERSION},
            "capabilities": {"tools": {"listChanged": False}, "resources": {}},
        }
        return jsonrpc_success_payload(rpc_id, result)

    if method == "ping":
        return jsonrpc_success_payload(rpc_id, {})

    if method in ("list_tools", "tools/list"):
        return jsonrpc_success_payload(rpc_id, {"tools": mcp.list_tools()})

    if method in ("call_tool", "tools/call"):
        return await _call_tool(rpc_id, params, client, request_id)

    if method in ("list_resources", "resources/list"):
        return jsonrpc_success_payload(rpc_id, {"resources": mcp.list_resources()})

    if method in ("read_resource", "resources/read"):
        return await _read_resource(rpc_id, params, client, request_id)

    return jsonrpc_error_payload(rpc_id, METHOD_NOT_FOUND, "Method not found")

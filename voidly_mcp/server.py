"""FastAPI application exposing the Voidly MCP tools over HTTP."""

from __future__ import annotations

import logging
import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from voidly_mcp import protocol
from voidly_mcp.config import default_config
from voidly_mcp.logging_setup import configure_logging
from voidly_mcp.metrics import default_metrics
from voidly_mcp.voidly_api import default_client

logger = logging.getLogger(__name__)
configure_logging(default_config)

HEALTH_STATUS = {"status": "ok"}
APP_VERSION = protocol.MCP_SERVER_VERSION


@asynccontextmanager
async def lifespan(_app: FastAPI):
    # Startup
    yield
    # Shutdown
    await default_client.aclose()


app = FastAPI(
    title="Voidly MCP Server",
    description="Voidly Global Censorship Index tools for LLM agents.",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.middleware("http")
async def add_request_context(request: Request, call_next):
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    start = time.time()
    default_metrics.incr_request()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000
    default_metrics.record_duration(request_id, duration_ms)
    response.headers["X-Request-ID"] = request_id
    return response


@app.get("/health")
async def health() -> JSONResponse:
    """Lightweight health endpoint for monitoring."""
    return JSONResponse(content=HEALTH_STATUS)


@app.get("/metrics")
async def metrics() -> JSONResponse:
    """Return in-process metrics snapshot."""
    return JSONResponse(content=default_metrics.snapshot())


@app.post("/mcp")
async def mcp_gateway(request: Request) -> Response:
    """JSON-RPC gateway for MCP clients that speak HTTP instead of stdio."""
    request_id = getattr(request.state, "request_id", None)
    start_time = time.time()

    try:
        body = await request.json()
    except ValueError:
        payload = protocol.jsonrpc_error_payload(None, protocol.PARSE_ERROR, "Parse error")
        return JSONResponse(status_code=400, content=payload)
    if not isinstance(body, dict):
        payload = protocol.jsonrpc_error_payload(None, protocol.INVALID_REQUEST, "Invalid request")
        return JSONResponse(status_code=400, content=payload)

    payload = await protocol.handle_message(body, request_id=request_id)
    duration_ms = (time.time() - start_time) * 1000
    logger.debug(
        "mcp method=%s status=%s duration_ms=%.2f",
        body.get("method"),
        "notification" if payload is None else "reply",
        duration_ms,
        extra={"request_id": request_id},
    )
    if payload is None:
        # Notifications carry no JSON-RPC response body.
        return Response(status_code=204)
    return JSONResponse(content=payload)


# Run with: uvicorn voidly_mcp.server:app --reload

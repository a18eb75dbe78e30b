"""
Line-oriented stdio transport.

Each line on stdin is one JSON-RPC message; each reply is written to stdout
as one line. Messages are handled one at a time in arrival order. Diagnostics
go to stderr only.

Claude Desktop config:
{
  "mcpServers": {
    "voidly": {
      "command": "voidly-mcp"
    }
  }
}
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
import time
import uuid
from typing import Optional, TextIO

from voidly_mcp import protocol
from voidly_mcp.config import default_config
from voidly_mcp.logging_setup import configure_logging
from voidly_mcp.metrics import default_metrics
from voidly_mcp.voidly_api import default_client

logger = logging.getLogger(__name__)

STARTUP_MESSAGE = "Voidly MCP Server running on stdio"


async def serve(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    *,
    client=default_client,
) -> None:
    """Read messages until stdin closes."""
    reader = stdin or sys.stdin
    writer = stdout or sys.stdout
    loop = asyncio.get_running_loop()

    while True:
        line = await loop.run_in_executor(None, reader.readline)
        if not line:
            break
        line = line.strip()
        if not line:
            continue
        request_id = str(uuid.uuid4())
        start = time.time()
        default_metrics.incr_request()
        try:
            body = json.loads(line)
        except json.JSONDecodeError:
            logger.warning("Discarding unparseable message on stdin")
            payload = protocol.jsonrpc_error_payload(None, protocol.PARSE_ERROR, "Parse error")
        else:
            payload = await protocol.handle_message(body, client=client, request_id=request_id)
        default_metrics.record_duration(request_id, (time.time() - start) * 1000)

        if payload is None:
            continue
        writer.write(json.dumps(payload) + "\n")
        writer.flush()


async def _run() -> None:
    try:
        await serve()
    finally:
        await default_client.aclose()


def main() -> None:
    """Run the MCP server in stdio mode."""
    configure_logging(default_config)
    sys.stderr.write(STARTUP_MESSAGE + "\n")
    sys.stderr.flush()
    try:
        asyncio.run(_run())
    except KeyboardInterrupt:
        pass
    except Exception:
        logger.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    main()

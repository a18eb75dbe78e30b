"""Logging configuration shared by the stdio and HTTP entry points."""

from __future__ import annotations

import json
import logging
import sys

from voidly_mcp.config import VoidlyConfig, default_config


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
        }
        for key in ("tool", "request_id", "error"):
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def build_handler(config: VoidlyConfig = default_config) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    if config.log_format.lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(logging.BASIC_FORMAT))
    return handler


def configure_logging(config: VoidlyConfig = default_config) -> None:
    """
    Send logs to stderr in JSON or plain format.

    stdout is reserved for the stdio transport, so nothing may log there.
    """
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, handlers=[build_handler(config)])

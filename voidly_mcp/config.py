"""
Configuration helpers for the Voidly MCP server.

This module centralizes upstream URL selection, default timeouts, output
limits, and logging settings. The Voidly API is public, so there are no
credentials to load.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

# Upstream endpoints
DEFAULT_API_URL = os.getenv("VOIDLY_API_URL", "https://censorship.voidly.ai")
DEFAULT_DATA_API_URL = os.getenv("VOIDLY_DATA_API_URL", "https://voidly.ai/api/data")
USER_AGENT = "Voidly-MCP-Server/1.0"


def _load_timeout() -> float:
    raw_timeout = os.getenv("VOIDLY_HTTP_TIMEOUT")
    if raw_timeout:
        try:
            return float(raw_timeout)
        except ValueError:
            return 10.0
    return 10.0


DEFAULT_TIMEOUT = _load_timeout()

# Output limits
INDEX_TOP_COUNTRIES = 10
DEFAULT_MOST_CENSORED = 10
MAX_MOST_CENSORED = 50
MOST_CENSORED_MIN_MEASUREMENTS = 100
MAX_AFFECTED_SERVICES = 5
MAX_INCIDENTS = 20
MAX_DESCRIPTION_LENGTH = 200
LOG_LEVEL = os.getenv("VOIDLY_MCP_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("VOIDLY_MCP_LOG_FORMAT", "json")  # json or plain


def _strip_trailing_slash(url: str) -> str:
    return url.rstrip("/")


@dataclass(slots=True)
class VoidlyConfig:
    """Runtime configuration for Voidly API access and report rendering."""

    api_url: str = _strip_trailing_slash(DEFAULT_API_URL)
    data_api_url: str = _strip_trailing_slash(DEFAULT_DATA_API_URL)
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = USER_AGENT
    index_top_countries: int = INDEX_TOP_COUNTRIES
    default_most_censored: int = DEFAULT_MOST_CENSORED
    max_most_censored: int = MAX_MOST_CENSORED
    most_censored_min_measurements: int = MOST_CENSORED_MIN_MEASUREMENTS
    max_affected_services: int = MAX_AFFECTED_SERVICES
    max_incidents: int = MAX_INCIDENTS
    max_description_length: int = MAX_DESCRIPTION_LENGTH
    log_level: str = LOG_LEVEL
    log_format: str = LOG_FORMAT


default_config = VoidlyConfig()

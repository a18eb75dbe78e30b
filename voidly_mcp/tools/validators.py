"""Shared argument helpers for Voidly MCP tools."""

from __future__ import annotations

from typing import Any


def normalize_country_code(value: Any) -> str:
    """Upper-case a country code supplied by the caller."""
    return str(value).strip().upper()


def clamp_limit(value: Any, *, default: int, min_value: int = 1, max_value: int) -> int:
    """Clamp limit-style integers to ``[min_value, max_value]``."""
    if value is None or isinstance(value, bool):
        return default
    try:
        parsed = int(value)
    except OverflowError:
        # Infinite floats clamp to the nearer bound.
        return max_value if value > 0 else min_value
    except (TypeError, ValueError):
        return default
    return min(max(parsed, min_value), max_value)

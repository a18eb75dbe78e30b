"""Number and text formatting shared by the markdown reports."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable


def format_percent(rate: float, decimals: int = 1) -> str:
    """
    Render a fraction in ``[0, 1]`` as a percentage without the sign.

    Exact halves round away from zero, so 0.225 renders as "23" at 0 decimals.
    """
    value = Decimal(rate * 100).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    return f"{value:f}"


def format_count(value: int) -> str:
    """Group thousands with commas regardless of the process locale."""
    return f"{value:,}"


def truncate(text: str, max_length: int, marker: str = "...") -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length] + marker


def bullet_list(items: Iterable[str]) -> str:
    return "".join(f"- {item}\n" for item in items)

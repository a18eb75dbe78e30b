"""LLM-facing tool implementations."""

from .index import get_censorship_index, get_most_censored
from .country import check_domain_blocked, get_country_status
from .incidents import get_active_incidents
from . import formatting, validators

__all__ = [
    "get_censorship_index",
    "get_country_status",
    "check_domain_blocked",
    "get_most_censored",
    "get_active_incidents",
    "formatting",
    "validators",
]

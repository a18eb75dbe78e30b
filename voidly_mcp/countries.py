"""Display names for the countries monitored by the censorship index."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

COUNTRY_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "CN": "China",
        "IR": "Iran",
        "RU": "Russia",
        "VE": "Venezuela",
        "CU": "Cuba",
        "MM": "Myanmar",
        "BY": "Belarus",
        "SA": "Saudi Arabia",
        "AE": "UAE",
        "EG": "Egypt",
        "MX": "Mexico",
        "VN": "Vietnam",
        "PH": "Philippines",
        "IN": "India",
        "PK": "Pakistan",
        "BD": "Bangladesh",
        "CO": "Colombia",
        "BR": "Brazil",
        "HT": "Haiti",
        "TR": "Turkey",
        "TH": "Thailand",
        "ID": "Indonesia",
        "MY": "Malaysia",
        "KZ": "Kazakhstan",
        "UA": "Ukraine",
        "YE": "Yemen",
        "IQ": "Iraq",
        "DZ": "Algeria",
        "NG": "Nigeria",
        "KE": "Kenya",
        "GH": "Ghana",
        "ZA": "South Africa",
        "AR": "Argentina",
        "CL": "Chile",
        "PE": "Peru",
        "EC": "Ecuador",
        "US": "United States",
        "GB": "United Kingdom",
        "DE": "Germany",
        "FR": "France",
        "ES": "Spain",
        "IT": "Italy",
        "CA": "Canada",
        "AU": "Australia",
        "JP": "Japan",
        "KR": "South Korea",
        "NL": "Netherlands",
        "CH": "Switzerland",
        "NZ": "New Zealand",
        "HK": "Hong Kong",
        "TW": "Taiwan",
        "SG": "Singapore",
    }
)


def country_display_name(code: str) -> str:
    """Return the display name for an upper-case code, or the code itself."""
    return COUNTRY_NAMES.get(code, code)

"""Per-country tools."""

from __future__ import annotations

import logging
from typing import Optional

from voidly_mcp.countries import country_display_name
from voidly_mcp.models import CountryRecord, MeasurementMetrics
from voidly_mcp.tools.formatting import bullet_list, format_count, format_percent
from voidly_mcp.tools.validators import normalize_country_code
from voidly_mcp.voidly_api import default_client

logger = logging.getLogger(__name__)

SIGNIFICANT_THRESHOLD = 0.5
MODERATE_THRESHOLD = 0.2


def interpret_anomaly_rate(name: str, metrics: Optional[MeasurementMetrics]) -> str:
    """Plain-language reading of a country's anomaly rate; empty without metrics."""
    if metrics is None:
        return ""
    rate = metrics.anomaly_rate
    if rate > SIGNIFICANT_THRESHOLD:
        return (
            f"{name} shows significant internet censorship with over 50% of measurements "
            "detecting anomalies. This indicates widespread blocking of websites and services.\n"
        )
    if rate > MODERATE_THRESHOLD:
        return (
            f"{name} shows moderate internet censorship with {format_percent(rate, 0)}% of "
            "measurements detecting anomalies. Some websites and services may be blocked.\n"
        )
    return f"{name} shows relatively low censorship levels. Most internet services are accessible.\n"


async def get_country_status(country_code: str, *, client=default_client) -> str:
    """
    Report the current censorship status of one country.

    Args:
        country_code: ISO 3166-1 alpha-2 code, any case.
        client: Voidly API client (override for testing).
    """
    code = normalize_country_code(country_code)
    name = country_display_name(code)
    record = CountryRecord.from_dict(await client.fetch_country(code))
    metrics = record.metrics

    result = f"# Censorship Status: {name} ({code})\n\n"

    if metrics is not None:
        status = (metrics.status or record.status).upper()
        result += f"## Current Status: {status}\n\n"
        result += "### Metrics\n"
        result += f"- Anomaly Rate: {format_percent(metrics.anomaly_rate, 1)}%\n"
        result += f"- Confirmed Censorship Rate: {format_percent(metrics.confirmed_rate, 2)}%\n"
        result += f"- Total Measurements: {format_count(metrics.measurement_count)}\n"
        result += f"- Last Updated: {metrics.last_updated}\n\n"
        if metrics.affected_services:
            result += "### Affected Services\n"
            result += bullet_list(metrics.affected_services)
            result += "\n"
    else:
        result += "## Status: No recent data available\n\n"

    if record.incidents:
        result += "### Active Incidents\n"
        result += bullet_list(
            f"[{incident.severity.upper()}] {incident.title}" for incident in record.incidents
        )
        result += "\n"

    interpretation = interpret_anomaly_rate(name, metrics)
    if interpretation:
        result += "## Interpretation\n"
        result += interpretation
        result += "\n"

    result += "## Source\n"
    result += "Data: Voidly Research Global Censorship Index\n"
    result += f"URL: https://voidly.ai/censorship-index/{code.lower()}\n"
    return result


async def check_domain_blocked(domain: str, country_code: str, *, client=default_client) -> str:
    """
    Report what is known about a domain in a country.

    No public endpoint exposes per-domain blocking, so the report is the
    country status prefixed with a note saying so.
    """
    code = normalize_country_code(country_code)
    name = country_display_name(code)
    country_status = await get_country_status(code, client=client)

    result = f"# Domain Block Check: {domain} in {name}\n\n"
    result += "## Note\n"
    result += "Domain-specific blocking data requires the Voidly Hydra API.\n"
    result += f"Below is the general censorship status for {name}.\n\n"
    result += "---\n\n"
    result += country_status
    return result

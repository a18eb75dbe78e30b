"""Global index tools: the overview report and the most-censored ranking."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from voidly_mcp.config import VoidlyConfig, default_config
from voidly_mcp.models import CountryRecord, IndexSnapshot
from voidly_mcp.tools.formatting import format_count, format_percent
from voidly_mcp.tools.validators import clamp_limit
from voidly_mcp.voidly_api import default_client

logger = logging.getLogger(__name__)


def rank_by_anomaly_rate(
    countries: List[CountryRecord], *, min_measurements: int
) -> List[CountryRecord]:
    """
    Countries with more than ``min_measurements`` measurements, highest anomaly
    rate first. Equal rates keep their upstream order.
    """
    measured = [
        country
        for country in countries
        if country.metrics is not None and country.metrics.measurement_count > min_measurements
    ]
    return sorted(measured, key=lambda country: country.metrics.anomaly_rate, reverse=True)


async def get_censorship_index(
    *,
    client=default_client,
    config: VoidlyConfig = default_config,
) -> str:
    """
    Summarize the global censorship index.

    Returns:
        Markdown report with status counts and the top countries by anomaly rate.
    """
    snapshot = IndexSnapshot.from_dict(await client.fetch_censorship_index())
    summary = snapshot.summary

    result = "# Voidly Global Censorship Index\n"
    result += f"Updated: {snapshot.timestamp}\n\n"
    result += "## Summary\n"
    result += f"- Full Outage: {summary.full_outage} countries\n"
    result += f"- Partial Outage: {summary.partial_outage} countries\n"
    result += f"- Degraded: {summary.degraded} countries\n"
    result += f"- Normal: {summary.normal} countries\n"
    result += f"- Unknown: {summary.unknown} countries\n\n"

    ranked = rank_by_anomaly_rate(snapshot.countries, min_measurements=0)
    result += "## Most Censored Countries (by anomaly rate)\n"
    for rank, country in enumerate(ranked[: config.index_top_countries], start=1):
        metrics = country.metrics
        result += (
            f"{rank}. {country.name} ({country.code}): "
            f"{format_percent(metrics.anomaly_rate)}% anomaly rate, "
            f"{format_count(metrics.measurement_count)} measurements\n"
        )

    result += "\n## Data Source\n"
    result += "Source: Voidly Research Global Censorship Index\n"
    result += "Based on OONI (Open Observatory of Network Interference) measurements\n"
    result += "URL: https://voidly.ai/censorship-index\n"
    result += "License: CC BY 4.0\n"
    return result


async def get_most_censored(
    limit: Optional[Any] = None,
    *,
    client=default_client,
    config: VoidlyConfig = default_config,
) -> str:
    """
    Rank the most censored countries that have a meaningful sample size.
    """
    effective_limit = clamp_limit(
        limit, default=config.default_most_censored, max_value=config.max_most_censored
    )
    snapshot = IndexSnapshot.from_dict(await client.fetch_censorship_index())
    ranked = rank_by_anomaly_rate(
        snapshot.countries, min_measurements=config.most_censored_min_measurements
    )[:effective_limit]
    logger.debug("most censored ranking limit=%s returned=%s", effective_limit, len(ranked))

    result = f"# Most Censored Countries (Top {effective_limit})\n\n"
    result += "Based on OONI measurement anomaly rates from the past 7 days.\n\n"

    for rank, country in enumerate(ranked, start=1):
        metrics = country.metrics
        result += f"## {rank}. {country.name} ({country.code})\n"
        result += f"- Anomaly Rate: {format_percent(metrics.anomaly_rate)}%\n"
        result += f"- Measurements: {format_count(metrics.measurement_count)}\n"
        if metrics.affected_services:
            services = metrics.affected_services[: config.max_affected_services]
            result += f"- Affected: {', '.join(services)}\n"
        result += "\n"

    result += "## Source\n"
    result += "Data: Voidly Research Global Censorship Index\n"
    result += "Methodology: Based on OONI network interference measurements\n"
    result += "URL: https://voidly.ai/censorship-index\n"
    return result

"""Incident tracker tools."""

from __future__ import annotations

from voidly_mcp.config import VoidlyConfig, default_config
from voidly_mcp.models import IncidentFeed
from voidly_mcp.tools.formatting import truncate
from voidly_mcp.voidly_api import default_client


async def get_active_incidents(
    *,
    client=default_client,
    config: VoidlyConfig = default_config,
) -> str:
    """List currently active censorship incidents in upstream order."""
    feed = IncidentFeed.from_dict(await client.fetch_incidents())

    result = "# Active Censorship Incidents\n\n"
    result += f"Total: {feed.count} incidents\n\n"

    if not feed.incidents:
        result += "No active incidents currently reported.\n"
    else:
        for incident in feed.incidents[: config.max_incidents]:
            result += f"## {incident.country_name}: {incident.title}\n"
            result += f"- Severity: {incident.severity.upper()}\n"
            result += f"- Status: {incident.status}\n"
            result += f"- Started: {incident.start_time}\n"
            if incident.affected_services:
                result += f"- Affected Services: {', '.join(incident.affected_services)}\n"
            if incident.description:
                details = truncate(incident.description, config.max_description_length)
                result += f"- Details: {details}\n"
            result += "\n"

    result += "## Source\n"
    result += "Data: Voidly Research Incident Tracker\n"
    result += "URL: https://voidly.ai/censorship-index\n"
    return result

import pytest

from voidly_mcp.tools.incidents import get_active_incidents


def _incident(index, **overrides):
    incident = {
        "id": f"inc-{index}",
        "country": "IR",
        "countryName": "Iran",
        "title": f"Incident {index}",
        "description": "Mobile networks disrupted.",
        "severity": "high",
        "status": "active",
        "startTime": "2026-10-17T08:00:00Z",
        "affectedServices": ["whatsapp", "instagram"],
    }
    incident.update(overrides)
    return incident


class StubClient:
    def __init__(self, payload):
        self.payload = payload

    async def fetch_incidents(self):
        return self.payload


@pytest.mark.asyncio
async def test_active_incidents_rendering():
    result = await get_active_incidents(client=StubClient({"count": 1, "incidents": [_incident(1)]}))
    assert result.startswith("# Active Censorship Incidents\n\nTotal: 1 incidents\n\n")
    assert (
        "## Iran: Incident 1\n"
        "- Severity: HIGH\n"
        "- Status: active\n"
        "- Started: 2026-10-17T08:00:00Z\n"
        "- Affected Services: whatsapp, instagram\n"
        "- Details: Mobile networks disrupted.\n\n"
    ) in result
    assert result.endswith("## Source\nData: Voidly Research Incident Tracker\nURL: https://voidly.ai/censorship-index\n")


@pytest.mark.asyncio
async def test_active_incidents_empty():
    result = await get_active_incidents(client=StubClient({"count": 0, "incidents": []}))
    assert "Total: 0 incidents" in result
    assert "No active incidents currently reported.\n" in result


@pytest.mark.asyncio
async def test_active_incidents_caps_at_twenty():
    incidents = [_incident(i) for i in range(25)]
    result = await get_active_incidents(client=StubClient({"count": 25, "incidents": incidents}))
    assert "Total: 25 incidents" in result
    assert result.count("## Iran: Incident") == 20
    assert "Incident 19\n" in result
    assert "Incident 20\n" not in result


@pytest.mark.asyncio
async def test_long_description_is_truncated():
    description = "x" * 250
    result = await get_active_incidents(
        client=StubClient({"incidents": [_incident(1, description=description)]})
    )
    assert f"- Details: {'x' * 200}...\n" in result
    assert "x" * 201 not in result


@pytest.mark.asyncio
async def test_short_description_is_unmodified():
    description = "y" * 150
    result = await get_active_incidents(
        client=StubClient({"incidents": [_incident(1, description=description)]})
    )
    assert f"- Details: {description}\n" in result
    assert "..." not in result


@pytest.mark.asyncio
async def test_description_at_limit_is_not_truncated():
    description = "z" * 200
    result = await get_active_incidents(
        client=StubClient({"incidents": [_incident(1, description=description)]})
    )
    assert f"- Details: {description}\n" in result
    assert "..." not in result


@pytest.mark.asyncio
async def test_optional_lines_are_omitted():
    result = await get_active_incidents(
        client=StubClient({"incidents": [_incident(1, description="", affectedServices=[], severity="Low")]})
    )
    assert "- Severity: LOW\n" in result
    assert "- Details:" not in result
    assert "- Affected Services:" not in result
    # count falls back to the list length
    assert "Total: 1 incidents" in result

import json

import pytest

from voidly_mcp import mcp
from voidly_mcp.errors import UpstreamError
from voidly_mcp.mcp import ToolResult, call_tool, list_tools


class RecordingClient:
    """Answers every endpoint and records which ones were hit."""

    def __init__(self, index_payload=None):
        self.index_payload = index_payload or {"timestamp": "t", "summary": {}, "countries": []}
        self.calls = []

    async def fetch_censorship_index(self):
        self.calls.append("index")
        return self.index_payload

    async def fetch_country(self, code):
        self.calls.append(f"country:{code}")
        return {"country": code, "name": code, "ooni": {"anomalyRate": 0.3, "measurementCount": 10}}

    async def fetch_incidents(self):
        self.calls.append("incidents")
        return {"count": 0, "incidents": []}


class FailingClient:
    def __init__(self, exc):
        self.exc = exc

    async def fetch_censorship_index(self):
        raise self.exc

    async def fetch_country(self, code):
        raise self.exc


def test_list_tools_describes_five_tools():
    tools = {tool["name"]: tool for tool in list_tools()}
    assert set(tools) == {
        "get_censorship_index",
        "get_country_status",
        "check_domain_blocked",
        "get_most_censored",
        "get_active_incidents",
    }
    assert tools["get_country_status"]["inputSchema"]["required"] == ["country_code"]
    assert tools["check_domain_blocked"]["inputSchema"]["required"] == ["domain", "country_code"]
    assert tools["get_most_censored"]["inputSchema"]["properties"]["limit"]["type"] == "number"
    assert tools["get_censorship_index"]["inputSchema"] == {"type": "object", "properties": {}, "required": []}
    assert all(tool["description"] for tool in tools.values())


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "name, arguments",
    [
        ("get_censorship_index", {}),
        ("get_country_status", {"country_code": "cn"}),
        ("check_domain_blocked", {"domain": "google.com", "country_code": "CN"}),
        ("get_most_censored", {"limit": 5}),
        ("get_active_incidents", None),
    ],
)
async def test_valid_calls_succeed(name, arguments):
    result = await call_tool(name, arguments, client=RecordingClient())
    assert isinstance(result, ToolResult)
    assert result.is_error is False
    assert result.text.startswith("# ")


@pytest.mark.asyncio
async def test_unknown_tool_is_error():
    result = await call_tool("get_weather", {}, client=RecordingClient())
    assert result.is_error is True
    assert result.text == "Error: Unknown tool: get_weather"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "name, arguments, message",
    [
        ("get_country_status", {}, "Error: country_code is required"),
        ("get_country_status", {"country_code": ""}, "Error: country_code is required"),
        ("check_domain_blocked", {"domain": "x.com"}, "Error: domain and country_code are required"),
        ("check_domain_blocked", {"country_code": "IR"}, "Error: domain and country_code are required"),
    ],
)
async def test_missing_arguments_skip_network(name, arguments, message):
    client = RecordingClient()
    result = await call_tool(name, arguments, client=client)
    assert result.is_error is True
    assert result.text == message
    assert client.calls == []


@pytest.mark.asyncio
async def test_upstream_error_is_wrapped():
    error = UpstreamError("API request failed: 503 Service Unavailable", status_code=503)
    result = await call_tool("get_censorship_index", {}, client=FailingClient(error))
    assert result == ToolResult(text="Error: API request failed: 503 Service Unavailable", is_error=True)


@pytest.mark.asyncio
async def test_unexpected_handler_error_is_wrapped():
    result = await call_tool("get_country_status", {"country_code": "IR"}, client=FailingClient(RuntimeError("boom")))
    assert result.is_error is True
    assert result.text == "Error: boom"


@pytest.mark.asyncio
async def test_unexpected_error_without_message():
    result = await call_tool("get_censorship_index", {}, client=FailingClient(KeyError()))
    assert result.is_error is True
    assert result.text.startswith("Error: ")


@pytest.mark.asyncio
async def test_unknown_arguments_are_ignored():
    client = RecordingClient()
    result = await call_tool("get_censorship_index", {"verbose": True}, client=client)
    assert result.is_error is False
    assert client.calls == ["index"]


@pytest.mark.asyncio
async def test_limit_is_clamped_through_dispatch():
    client = RecordingClient()
    result = await call_tool("get_most_censored", {"limit": 1000}, client=client)
    assert result.text.startswith("# Most Censored Countries (Top 50)")
    result = await call_tool("get_most_censored", {"limit": 0}, client=client)
    assert result.text.startswith("# Most Censored Countries (Top 1)")


@pytest.mark.asyncio
async def test_infinite_limit_is_clamped_through_dispatch():
    client = RecordingClient()
    result = await call_tool("get_most_censored", json.loads('{"limit": 1e999}'), client=client)
    assert result.is_error is False
    assert result.text.startswith("# Most Censored Countries (Top 50)")
    result = await call_tool("get_most_censored", json.loads('{"limit": -1e999}'), client=client)
    assert result.is_error is False
    assert result.text.startswith("# Most Censored Countries (Top 1)")


@pytest.mark.asyncio
async def test_dispatch_is_idempotent():
    client = RecordingClient()
    first = await call_tool("check_domain_blocked", {"domain": "bbc.com", "country_code": "ru"}, client=client)
    second = await call_tool("check_domain_blocked", {"domain": "bbc.com", "country_code": "ru"}, client=client)
    assert first == second
    assert client.calls == ["country:RU", "country:RU"]


def test_tool_result_content_envelope():
    assert ToolResult(text="hi").to_content() == {"content": [{"type": "text", "text": "hi"}]}
    assert ToolResult(text="Error: x", is_error=True).to_content() == {
        "content": [{"type": "text", "text": "Error: x"}],
        "isError": True,
    }


def test_registry_names_match_keys():
    assert all(name == tool.name for name, tool in mcp.TOOL_REGISTRY.items())

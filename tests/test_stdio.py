import io
import json

import pytest

from voidly_mcp import stdio
from voidly_mcp.metrics import default_metrics


class StubClient:
    def __init__(self):
        self.calls = 0

    async def fetch_country(self, code):
        self.calls += 1
        return {"country": code, "name": code}


def _lines(*messages):
    return io.StringIO("".join((m if isinstance(m, str) else json.dumps(m)) + "\n" for m in messages))


@pytest.mark.asyncio
async def test_serve_replies_in_order():
    stdin = _lines(
        {"jsonrpc": "2.0", "id": 1, "method": "initialize", "params": {"protocolVersion": "2025-03-26"}},
        {"jsonrpc": "2.0", "method": "notifications/initialized"},
        "",
        {"jsonrpc": "2.0", "id": 2, "method": "tools/call", "params": {"name": "get_country_status", "arguments": {"country_code": "mm"}}},
        {"jsonrpc": "2.0", "id": 3, "method": "tools/list"},
    )
    stdout = io.StringIO()
    client = StubClient()
    await stdio.serve(stdin, stdout, client=client)

    replies = [json.loads(line) for line in stdout.getvalue().splitlines()]
    assert [reply["id"] for reply in replies] == [1, 2, 3]
    assert replies[1]["result"]["content"][0]["text"].startswith("# Censorship Status: Myanmar (MM)")
    assert client.calls == 1


@pytest.mark.asyncio
async def test_serve_reports_parse_errors_and_continues():
    stdin = _lines("{oops", {"jsonrpc": "2.0", "id": 4, "method": "ping"})
    stdout = io.StringIO()
    await stdio.serve(stdin, stdout, client=StubClient())
    replies = [json.loads(line) for line in stdout.getvalue().splitlines()]
    assert replies[0]["error"]["code"] == -32700
    assert replies[1] == {"jsonrpc": "2.0", "id": 4, "result": {}}


@pytest.mark.asyncio
async def test_serve_records_request_metrics():
    stdin = _lines(
        {"jsonrpc": "2.0", "id": 1, "method": "ping"},
        "",
        {"jsonrpc": "2.0", "method": "notifications/initialized"},
    )
    await stdio.serve(stdin, io.StringIO(), client=StubClient())
    snapshot = default_metrics.snapshot()
    assert snapshot["requests"] == 2
    assert len(snapshot["recent_request_durations_ms"]) == 2


def test_main_writes_startup_line(monkeypatch, capsys):
    async def fake_serve(*_args, **_kwargs):
        return None

    monkeypatch.setattr(stdio, "serve", fake_serve)
    stdio.main()
    captured = capsys.readouterr()
    assert captured.err.splitlines()[0] == stdio.STARTUP_MESSAGE
    assert captured.out == ""


def test_main_exits_non_zero_on_fatal_error(monkeypatch):
    async def broken_serve(*_args, **_kwargs):
        raise RuntimeError("stdin closed unexpectedly")

    monkeypatch.setattr(stdio, "serve", broken_serve)
    with pytest.raises(SystemExit) as excinfo:
        stdio.main()
    assert excinfo.value.code == 1

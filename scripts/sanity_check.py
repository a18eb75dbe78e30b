"""Minimal sanity checks for the Voidly MCP tools against the live API."""

from __future__ import annotations

import asyncio
import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from voidly_mcp import mcp  # noqa: E402
from voidly_mcp.voidly_api import default_client  # noqa: E402

# Country used for the per-country checks; override via env.
SAMPLE_COUNTRY = os.getenv("VOIDLY_SAMPLE_COUNTRY", "IR")
SAMPLE_DOMAIN = os.getenv("VOIDLY_SAMPLE_DOMAIN", "twitter.com")
# Opt-in to dumping the raw resources (large).
RUN_RESOURCES = os.getenv("RUN_RESOURCE_SANITY", "false").lower() in {"1", "true", "yes"}


async def main() -> None:
    calls = [
        ("get_censorship_index", {}),
        ("get_country_status", {"country_code": SAMPLE_COUNTRY}),
        ("check_domain_blocked", {"domain": SAMPLE_DOMAIN, "country_code": SAMPLE_COUNTRY}),
        ("get_most_censored", {"limit": 5}),
        ("get_active_incidents", {}),
    ]
    try:
        for name, arguments in calls:
            result = await mcp.call_tool(name, arguments)
            status = "ERROR" if result.is_error else "ok"
            print(f"== {name} [{status}]")
            print(result.text)

        if RUN_RESOURCES:
            for resource in mcp.list_resources():
                contents = await mcp.read_resource(resource["uri"])
                print(f"== {resource['uri']}: {len(contents['contents'][0]['text'])} chars")
    finally:
        await default_client.aclose()


if __name__ == "__main__":
    asyncio.run(main())

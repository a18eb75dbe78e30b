import os
import sys

import pytest

# Ensure repository root is on sys.path before importing project modules.
repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

from voidly_mcp.metrics import default_metrics  # noqa: E402


@pytest.fixture(autouse=True)
def reset_metrics():
    default_metrics.reset()
    yield
    default_metrics.reset()


@pytest.fixture
def index_payload():
    return {
        "timestamp": "2026-10-18T12:00:00Z",
        "summary": {
            "fullOutage": 1,
            "partialOutage": 3,
            "degraded": 7,
            "normal": 30,
            "unknown": 9,
        },
        "countries": [
            {
                "country": "CN",
                "name": "China",
                "status": "partial_outage",
                "ooni": {
                    "anomalyRate": 0.6234,
                    "measurementCount": 12345,
                    "affectedServices": ["google", "youtube", "twitter", "facebook", "wikipedia", "telegram", "signal"],
                },
            },
            {
                "country": "IR",
                "name": "Iran",
                "status": "partial_outage",
                "ooni": {"anomalyRate": 0.7, "measurementCount": 5000, "affectedServices": []},
            },
            {
                "country": "US",
                "name": "United States",
                "status": "normal",
                "ooni": {"anomalyRate": 0.05, "measurementCount": 0},
            },
            {"country": "XX", "name": "Nowhere", "status": "unknown"},
            {
                "country": "RU",
                "name": "Russia",
                "status": "degraded",
                "ooni": {"anomalyRate": 0.7, "measurementCount": 50},
            },
        ],
    }

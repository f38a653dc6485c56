from __future__ import annotations

import os

import pytest

# settings are read at import time; unit tests never open this database.
os.environ.setdefault("DATABASE_URL", "sqlite:///./clanboard-test.db")
os.environ["ALLOWED_HOSTS"] = "localhost,127.0.0.1"

from tests.testkit import ApiClient, RecordingSink


@pytest.fixture(scope="session")
def api() -> ApiClient:
    if os.getenv("RUN_API_INTEGRATION", "0") != "1":
        pytest.skip("Integration tests disabled. Use RUN_API_INTEGRATION=1.")

    base_url = os.getenv("TEST_API_BASE_URL", "http://localhost:8000")
    client = ApiClient(base_url)
    try:
        health = client.call("GET", "/health")
    except Exception as exc:  # pragma: no cover - guard rail
        pytest.fail(f"API not reachable at {base_url}: {exc}")
    if not isinstance(health, dict) or not health.get("ok"):
        pytest.fail(f"Invalid health check at {base_url}: {health}")
    return client


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()

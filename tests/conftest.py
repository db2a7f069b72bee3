"""Shared pytest configuration and fixtures."""

import pytest
import httpx

from check_graylog.collectors.graylog_client import (
    COLLECTORS_PATH,
    INDEXER_FAILURES_PATH,
    INPUTS_PATH,
    SYSTEM_PATH,
    THROUGHPUT_PATH,
    TOTAL_COUNT_PATH,
)
from check_graylog.config.models import TargetConfig, ThresholdsConfig
from check_graylog.utils.logger import setup_logger


BASE_URL = "http://graylog.test:12900"


def build_collector(active=True, status=0):
    """Build a collector registration as returned by the API."""
    collector = {"id": "c1", "node_id": "node-1", "active": active}
    if status is not None:
        collector["node_details"] = {
            "operating_system": "Linux",
            "status": {"status": status, "message": ""}
        }
    return collector


@pytest.fixture
def make_collector():
    """Factory for collector registrations."""
    return build_collector


@pytest.fixture
def logger():
    """Create logger for tests."""
    return setup_logger("test", "DEBUG")


@pytest.fixture
def target():
    """Target pointing at the fake API."""
    return TargetConfig(url=BASE_URL, username="admin", password="secret")


@pytest.fixture
def thresholds():
    """Default collector thresholds."""
    return ThresholdsConfig()


@pytest.fixture
def api_responses():
    """Healthy cluster with four running collectors, keyed by API path."""
    return {
        SYSTEM_PATH: (200, {
            "hostname": "graylog-1",
            "version": "2.1.1",
            "is_processing": True,
            "lifecycle": "running",
            "lb_status": "alive"
        }),
        INDEXER_FAILURES_PATH: (200, {"total": 0}),
        THROUGHPUT_PATH: (200, {"throughput": 42}),
        INPUTS_PATH: (200, {"inputs": [], "total": 3}),
        TOTAL_COUNT_PATH: (200, {"events": 123456}),
        COLLECTORS_PATH: (200, {
            "collectors": [build_collector() for _ in range(4)],
            "total": 4
        }),
    }


@pytest.fixture
def requests_seen():
    """Requests recorded by the fake API."""
    return []


@pytest.fixture
def transport(api_responses, requests_seen):
    """httpx transport serving api_responses."""
    def handler(request: httpx.Request) -> httpx.Response:
        requests_seen.append(request)
        status_code, body = api_responses[request.url.path]
        if isinstance(body, (bytes, str)):
            return httpx.Response(status_code, content=body)
        return httpx.Response(status_code, json=body)

    return httpx.MockTransport(handler)

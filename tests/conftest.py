"""Shared test fixtures for az-arm tests."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from az_arm.azure_api import RestGateway, Session
from az_arm.client import ArmClient

SUBSCRIPTION_ID = "sub-1"
BASE_URL = f"https://management.azure.com/subscriptions/{SUBSCRIPTION_ID}/"

LOCATIONS = {
    "value": [
        {"name": "westeurope", "displayName": "West Europe"},
        {"name": "northeurope", "displayName": "North Europe"},
    ]
}
RESOURCE_GROUPS = {
    "value": [
        {"name": "Default", "location": "westeurope"},
        {"name": "rg1", "location": "northeurope"},
    ]
}


def make_response(status_code: int, body: Any = None) -> MagicMock:
    """Build a ``requests.Response`` stand-in.

    *body* may be ``None`` (empty body), a ``str`` (sent verbatim) or any
    JSON-serializable object.
    """
    resp = MagicMock()
    resp.status_code = status_code
    if body is None:
        resp.text = ""
        resp.json.side_effect = ValueError("No JSON")
    elif isinstance(body, str):
        resp.text = body
        try:
            resp.json.return_value = json.loads(body)
        except ValueError:
            resp.json.side_effect = ValueError("Malformed JSON")
    else:
        resp.text = json.dumps(body)
        resp.json.return_value = body
    return resp


class FakeHttp:
    """Routes requests by verb and path prefix (relative to the subscription URL)."""

    def __init__(self) -> None:
        self.headers: dict[str, str] = {}
        self.calls: list[tuple[str, str, dict]] = []
        self._routes: list[tuple[str, str, MagicMock]] = []
        self.closed = False

    def add(self, method: str, path_prefix: str, status_code: int, body: Any = None) -> None:
        self._routes.append((method, path_prefix, make_response(status_code, body)))

    def request(self, method: str, url: str, **kwargs: Any) -> MagicMock:
        self.calls.append((method, url, kwargs))
        relative = url[len(BASE_URL) :] if url.startswith(BASE_URL) else url
        for route_method, prefix, resp in self._routes:
            if route_method == method and relative.startswith(prefix):
                return resp
        raise AssertionError(f"Unexpected request: {method} {url}")

    def calls_for(self, method: str) -> list[tuple[str, str, dict]]:
        return [c for c in self.calls if c[0] == method]

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def _no_real_network():
    """Fail any test that would reach a real endpoint."""
    with patch(
        "requests.sessions.Session.request",
        side_effect=AssertionError("real HTTP request attempted"),
    ):
        yield


@pytest.fixture()
def session() -> Session:
    return Session.for_subscription(SUBSCRIPTION_ID, "fake-token")


@pytest.fixture()
def http() -> FakeHttp:
    fake = FakeHttp()
    fake.add("GET", "locations?", 200, LOCATIONS)
    fake.add("GET", "resourcegroups?", 200, RESOURCE_GROUPS)
    return fake


@pytest.fixture()
def gateway(session: Session, http: FakeHttp) -> RestGateway:
    return RestGateway(session, http=http)  # type: ignore[arg-type]


@pytest.fixture()
def arm(session: Session, http: FakeHttp) -> ArmClient:
    return ArmClient(session, http=http)  # type: ignore[arg-type]


@pytest.fixture()
def respond():
    """Factory fixture building fake ``requests.Response`` objects."""
    return make_response

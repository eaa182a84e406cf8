"""
Shared fixtures: every upstream call goes through httpx.MockTransport, so no
test touches the network.
"""
from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from trade_radar.main import app
from trade_radar.providers.http import get_http_client


class FakeUpstream:
    """Records requests and answers them with a swappable handler."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda req: httpx.Response(404)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def http_client(upstream):
    with upstream.client() as client:
        yield client


@pytest.fixture
def api(http_client):
    app.dependency_overrides[get_http_client] = lambda: http_client
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()

from __future__ import annotations

from typing import Callable, List

import httpx
import pytest

from restclient import RestClient

BASE_URL = "https://api.example.test/v1"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it handled."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            request.read()
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def make_client(tmp_path):
    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> RestClient:
        transport = RecordingTransport(handler)
        client = RestClient(
            cookie_file=str(tmp_path / "cookies.txt"),
            transport=transport,
        )
        return client.set_base_url(BASE_URL)

    return _make


@pytest.fixture
def echo_handler():
    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=request.content or b"{}")

    return _handler

"""Shared fixtures for the hnapi test suite."""

import json
from typing import Callable, Dict, List, Optional, Tuple, Union

import httpx
import pytest

from hnapi import ClientConfig, HNClient, Transport

BASE_URL = "https://hn.test/v0"

Route = Union[Tuple[int, object], Callable[[httpx.Request], httpx.Response]]


class FakeAPI:
    """Routes requests by path to canned JSON answers and records them."""

    def __init__(self) -> None:
        self.routes: Dict[str, Route] = {}
        self.requests: List[httpx.Request] = []

    def add(self, path: str, body: object, status: int = 200) -> None:
        self.routes[path] = (status, body)

    def add_raw(self, path: str, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.routes[path] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path[len("/v0"):]
        route = self.routes.get(path)
        if route is None:
            return httpx.Response(404, text="not routed")
        if callable(route):
            return route(request)
        status, body = route
        content = body if isinstance(body, bytes) else json.dumps(body).encode()
        return httpx.Response(status, content=content)


@pytest.fixture
def fake_api() -> FakeAPI:
    return FakeAPI()


@pytest.fixture
def client_factory(fake_api: FakeAPI) -> Callable[..., HNClient]:
    """Build HNClients whose HTTP traffic goes to ``fake_api``."""

    def make(config: Optional[ClientConfig] = None) -> HNClient:
        config = config or ClientConfig(base_url=BASE_URL)
        http_client = httpx.Client(transport=httpx.MockTransport(fake_api))
        return HNClient(config, transport=Transport(http_client=http_client))

    return make


@pytest.fixture
def client(client_factory) -> HNClient:
    hn = client_factory()
    yield hn
    hn.close()

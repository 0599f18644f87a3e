"""Pytest configuration and fixtures."""

import json
from typing import Any, Callable, Dict, List

import httpx
import pytest

from codegpt_mcp.backend import BackendService
from codegpt_mcp.config import BackendConfig, Config, ToolSet
from codegpt_mcp.tools import ToolGateway, tools_for


API_BASE = "http://backend.test/api/v1"


class StubBackend:
    """Records requests and answers them with a fixed handler."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.handler = handler
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def body(self, index: int = -1) -> Dict[str, Any]:
        return json.loads(self.requests[index].content)


def json_response(payload: Any, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    return lambda request: httpx.Response(status_code, json=payload)


@pytest.fixture
def backend_config() -> BackendConfig:
    return BackendConfig(
        api_key="test-key",
        org_id="org-123",
        graph_id="graph-abc",
        api_base=API_BASE,
    )


@pytest.fixture
def config(backend_config: BackendConfig) -> Config:
    return Config(backend=backend_config, toolset=ToolSet.ALL)


@pytest.fixture
def make_gateway(backend_config: BackendConfig):
    """Build an initialized gateway whose backend is a StubBackend."""

    async def factory(handler: Callable[[httpx.Request], httpx.Response]):
        stub = StubBackend(handler)
        backend = BackendService(backend_config, transport=stub.transport)
        await backend.initialize()
        gateway = ToolGateway(backend_config, backend, tools_for(ToolSet.ALL))
        return gateway, stub

    return factory

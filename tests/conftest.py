"""Shared fixtures for JSON-RPC client tests."""
import pytest

from jsonrpc_client.client import set_default_client
from jsonrpc_client.registry import ServerRegistry
from jsonrpc_client.transport import HTTPResponse


class FakeTransport:
    """Transport that records requests and replays a canned response."""

    def __init__(self, response: HTTPResponse):
        self.response = response
        self.requests = []

    async def post(self, url, headers, body):
        self.requests.append({"url": url, "headers": headers, "body": body})
        return self.response


@pytest.fixture
def make_transport():
    """Build a FakeTransport answering with the given status and body."""
    def factory(status=200, body=None):
        return FakeTransport(HTTPResponse(status=status, body=body))
    return factory


@pytest.fixture
def registry():
    """Registry with the default server configured."""
    registry = ServerRegistry()
    registry.configure({"url": "http://localhost:8080/rpc"})
    return registry


@pytest.fixture(autouse=True)
def reset_default_client():
    """Drop the process-wide client between tests."""
    set_default_client(None)
    yield
    set_default_client(None)

"""JSON-RPC client combining the registry, dispatcher and transport."""
import threading
from typing import Any, Mapping, Optional

from .dispatcher import RequestIdCounter, RPCDispatcher
from .registry import DEFAULT_SERVER_NAME, ServerRegistry
from .transport import Transport


class JSONRPCClient:
    """Client for calling JSON-RPC 2.0 methods on named servers over HTTP."""

    def __init__(
        self,
        registry: Optional[ServerRegistry] = None,
        transport: Optional[Transport] = None,
        counter: Optional[RequestIdCounter] = None,
    ):
        self.registry = registry or ServerRegistry()
        self.dispatcher = RPCDispatcher(self.registry, transport=transport, counter=counter)

    @classmethod
    def from_yaml(cls, config_path: str, **kwargs: Any) -> "JSONRPCClient":
        """Create a client configured from a YAML file."""
        return cls(registry=ServerRegistry.from_yaml(config_path), **kwargs)

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()

    async def aclose(self):
        """Close the transport if it holds resources."""
        close = getattr(self.dispatcher.transport, "aclose", None)
        if close is not None:
            await close()

    def configure(self, options: Mapping[str, Any]) -> None:
        self.registry.configure(options)

    async def call(self, *args: Any) -> Any:
        """Call ``(method, params)`` on "main" or ``(server, method, params)``."""
        return await self.dispatcher.call(*args)

    async def request(
        self, method: str, params: Any = None, server: str = DEFAULT_SERVER_NAME
    ) -> Any:
        """Keyword form of ``call``.

        Example:
            >>> async with JSONRPCClient() as client:
            ...     client.configure({"url": "http://localhost:8080/rpc"})
            ...     total = await client.request("add", [1, 2])
        """
        return await self.dispatcher.call(server, method, params)


_default_client: Optional[JSONRPCClient] = None
_default_client_lock = threading.Lock()


def get_default_client() -> JSONRPCClient:
    """Return the process-wide client, creating it on first use."""
    global _default_client
    if _default_client is None:
        with _default_client_lock:
            if _default_client is None:
                _default_client = JSONRPCClient()
    return _default_client


def set_default_client(client: Optional[JSONRPCClient]) -> None:
    """Replace the process-wide client (``None`` drops it)."""
    global _default_client
    with _default_client_lock:
        _default_client = client


def configure(options: Mapping[str, Any]) -> None:
    """Configure the process-wide client."""
    get_default_client().configure(options)


async def call(*args: Any) -> Any:
    """Call a method through the process-wide client."""
    return await get_default_client().call(*args)

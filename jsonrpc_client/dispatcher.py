"""Dispatch of JSON-RPC calls to configured servers."""
import itertools
import logging
import threading
from typing import Any, Dict, Optional, Tuple

from .classifier import RPCSuccess, classify_response
from .jsonrpc.models import JSONRPCRequest
from .registry import DEFAULT_SERVER_NAME, ServerEndpoint, ServerRegistry
from .transport import HTTPTransport, Transport
from .utils.errors import ConfigError

logger = logging.getLogger(__name__)

FORCED_HEADERS = {"Content-Type": "application/json"}


class RequestIdCounter:
    """Thread-safe source of request ids, starting at 1."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)
        self._current = start - 1
        self._lock = threading.Lock()

    @property
    def current(self) -> int:
        """Last id handed out (0 before the first call)."""
        return self._current

    def next(self) -> int:
        with self._lock:
            self._current = next(self._counter)
            return self._current


def determine_arguments(args: Tuple[Any, ...]) -> Tuple[str, str, Any]:
    """Split ``call`` arguments into (server name, method, params).

    Two arguments mean (method, params) on the default server, three mean
    (server, method, params).
    """
    if len(args) == 2:
        return DEFAULT_SERVER_NAME, args[0], args[1]
    if len(args) == 3:
        return args[0], args[1], args[2]
    raise TypeError(
        f"call() takes (method, params) or (server, method, params), got {len(args)} arguments"
    )


def build_headers(server: ServerEndpoint) -> Dict[str, str]:
    """Merge server headers with the forced JSON content type."""
    headers = dict(server.headers)
    for forced in FORCED_HEADERS:
        # Header names are case-insensitive on the wire.
        for key in [k for k in headers if k.lower() == forced.lower()]:
            del headers[key]
    headers.update(FORCED_HEADERS)
    return headers


class RPCDispatcher:
    """Sends JSON-RPC calls and classifies their outcome."""

    def __init__(
        self,
        registry: ServerRegistry,
        transport: Optional[Transport] = None,
        counter: Optional[RequestIdCounter] = None,
    ):
        """Initialize the dispatcher.

        Args:
            registry: Configured servers
            transport: HTTP POST primitive (an ``HTTPTransport`` by default)
            counter: Request id source; each dispatcher owns one unless
                a shared counter is passed in
        """
        self.registry = registry
        self.transport = transport or HTTPTransport()
        self.counter = counter or RequestIdCounter()

    def resolve_server(self, server_name: str) -> ServerEndpoint:
        """Find the target server or raise ``ConfigError``."""
        if self.registry.is_empty():
            raise ConfigError("Please configure the jsonrpc client first.")

        server = self.registry.find_by_name(server_name)
        if server is None:
            raise ConfigError(f'Server "{server_name}" has not been configured.')
        return server

    def build_request(self, method: str, params: Any) -> JSONRPCRequest:
        return JSONRPCRequest(id=self.counter.next(), method=method, params=params)

    async def call(self, *args: Any) -> Any:
        """Call a remote method.

        Example:
            >>> await dispatcher.call("add", [1, 2])
            >>> await dispatcher.call("billing", "invoice.get", {"id": 7})

        Returns:
            The JSON-RPC ``result``, or the raw ``HTTPResponse`` when the
            registry has ``returnHttpPromise`` set

        Raises:
            ConfigError: Nothing was sent because the client is misconfigured
            TransportError: The call did not reach a JSON-RPC server
            ServerError: The server reported a JSON-RPC error
        """
        server_name, method, params = determine_arguments(args)
        server = self.resolve_server(server_name)

        request = self.build_request(method, params)
        logger.debug(f"Calling {method} (id={request.id}) on server '{server.name}' at {server.url}")

        response = await self.transport.post(
            server.url, build_headers(server), request.model_dump()
        )

        if self.registry.return_http_promise:
            return response

        outcome = classify_response(response.status, response.body, server.url)
        if isinstance(outcome, RPCSuccess):
            return outcome.result

        logger.debug(f"Call {method} (id={request.id}) failed: {outcome.kind.value}: {outcome.message}")
        raise outcome.to_exception()

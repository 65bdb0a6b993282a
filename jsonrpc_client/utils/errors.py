"""Exception classes raised by the JSON-RPC client."""
from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Discriminator shared by every client error."""

    CONFIG = "JsonRpcConfigError"
    TRANSPORT = "JsonRpcTransportError"
    SERVER = "JsonRpcServerError"


ERROR_TYPE_CONFIG = ErrorKind.CONFIG.value
ERROR_TYPE_TRANSPORT = ErrorKind.TRANSPORT.value
ERROR_TYPE_SERVER = ErrorKind.SERVER.value


class JSONRPCClientError(Exception):
    """Base exception for JSON-RPC client errors.

    Only the three variants below are ever raised. Callers can match on
    ``kind`` instead of walking the class hierarchy.
    """

    kind: ErrorKind

    def __init__(self, message: Any):
        super().__init__(message)
        self.message = message

    @property
    def name(self) -> str:
        return self.kind.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class ConfigError(JSONRPCClientError):
    """Client misconfiguration. No network I/O was attempted."""

    kind = ErrorKind.CONFIG


class TransportError(JSONRPCClientError):
    """The call never reached a JSON-RPC server."""

    kind = ErrorKind.TRANSPORT


class ServerError(JSONRPCClientError):
    """The server received the call and reported a JSON-RPC error."""

    kind = ErrorKind.SERVER

    def __init__(self, message: Any, error: Optional[Any] = None, data: Optional[Any] = None):
        super().__init__(message)
        self.error = error
        self.data = data

    @property
    def code(self) -> Optional[int]:
        if isinstance(self.error, dict):
            return self.error.get("code")
        return None

    def __repr__(self) -> str:
        return f"ServerError({self.message!r}, error={self.error!r}, data={self.data!r})"

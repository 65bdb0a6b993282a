"""JSON-RPC 2.0 client over HTTP with named servers."""
from .classifier import RPCFailure, RPCSuccess, classify_response
from .client import JSONRPCClient, call, configure, get_default_client, set_default_client
from .config import config_from_env, load_config
from .dispatcher import RequestIdCounter, RPCDispatcher
from .registry import DEFAULT_SERVER_NAME, ServerEndpoint, ServerRegistry
from .transport import HTTPResponse, HTTPTransport
from .utils.errors import (
    ERROR_TYPE_CONFIG,
    ERROR_TYPE_SERVER,
    ERROR_TYPE_TRANSPORT,
    ConfigError,
    ErrorKind,
    JSONRPCClientError,
    ServerError,
    TransportError,
)

__version__ = "1.0.0"

__all__ = [
    "JSONRPCClient",
    "RPCDispatcher",
    "RequestIdCounter",
    "ServerRegistry",
    "ServerEndpoint",
    "DEFAULT_SERVER_NAME",
    "HTTPTransport",
    "HTTPResponse",
    "RPCSuccess",
    "RPCFailure",
    "classify_response",
    "configure",
    "call",
    "get_default_client",
    "set_default_client",
    "load_config",
    "config_from_env",
    "ErrorKind",
    "ERROR_TYPE_CONFIG",
    "ERROR_TYPE_SERVER",
    "ERROR_TYPE_TRANSPORT",
    "JSONRPCClientError",
    "ConfigError",
    "TransportError",
    "ServerError",
]

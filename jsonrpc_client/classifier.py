"""Classification of HTTP responses into JSON-RPC outcomes.

Every response falls into one of three situations:

1. The call succeeded.
2. The call reached the server and the server reported an error.
3. The call never reached a JSON-RPC server.

Situation 2 becomes a ``ServerError``, situation 3 a ``TransportError``.
Servers may use either 200 or 500 for situation 2; JSON-RPC does not pin the
HTTP status, so a 500 is told apart by looking for the envelope marker in the
body. A proxy returning a conformant-looking 500 body is misclassified as a
server error.
"""
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from .utils.errors import ErrorKind, ServerError, TransportError


@dataclass(frozen=True)
class RPCSuccess:
    result: Any


@dataclass(frozen=True)
class RPCFailure:
    kind: ErrorKind
    message: Any
    error: Optional[Any] = None
    data: Optional[Any] = None

    def to_exception(self) -> Union[ServerError, TransportError]:
        if self.kind is ErrorKind.SERVER:
            return ServerError(self.message, error=self.error, data=self.data)
        return TransportError(self.message)


Outcome = Union[RPCSuccess, RPCFailure]


def is_success_status(status: int) -> bool:
    return 200 <= status < 300


def server_failure(error: Any) -> RPCFailure:
    """Build a server failure from the ``error`` member of a response."""
    if isinstance(error, Mapping):
        return RPCFailure(
            ErrorKind.SERVER,
            message=error.get("message"),
            error=error,
            data=error.get("data"),
        )
    if error is None:
        return RPCFailure(
            ErrorKind.SERVER, message="JSON-RPC response contains neither result nor error"
        )
    return RPCFailure(ErrorKind.SERVER, message=error, error=error)


def classify_transport_failure(status: int, body: Any, url: str) -> RPCFailure:
    """Classify a response whose HTTP status signals failure."""
    if status == 0:
        return RPCFailure(ErrorKind.TRANSPORT, f"Connection refused at {url}")

    if status == 404:
        return RPCFailure(ErrorKind.TRANSPORT, f"404 not found at {url}")

    if status == 500:
        if isinstance(body, Mapping) and body.get("jsonrpc") == "2.0":
            return server_failure(body.get("error"))
        return RPCFailure(
            ErrorKind.TRANSPORT, f"500 internal server error at {url}: {body}"
        )

    return RPCFailure(
        ErrorKind.TRANSPORT, f"Unknown error. HTTP status: {status}, data: {body}"
    )


def classify_response(status: int, body: Any, url: str) -> Outcome:
    """Turn an observed HTTP response into a success or a typed failure.

    Args:
        status: HTTP status code, 0 when no response was received
        body: Decoded response body (JSON value, text or None)
        url: Server URL, used in error messages

    Returns:
        RPCSuccess carrying the result, or RPCFailure
    """
    if not is_success_status(status):
        return classify_transport_failure(status, body, url)

    if not isinstance(body, Mapping):
        return RPCFailure(
            ErrorKind.TRANSPORT, f"Invalid JSON-RPC response from {url}: {body}"
        )

    # A present result is a success even when falsy (0, false, null).
    if "result" in body and body.get("error") is None:
        return RPCSuccess(body["result"])

    return server_failure(body.get("error"))

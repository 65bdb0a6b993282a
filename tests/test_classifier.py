"""Unit tests for response classification."""
import pytest

from jsonrpc_client.classifier import (
    RPCFailure,
    RPCSuccess,
    classify_response,
    classify_transport_failure,
)
from jsonrpc_client.utils.errors import ErrorKind, ServerError, TransportError

URL = "http://localhost:8080/rpc"


class TestSuccessStatus:
    """Responses with a 2xx status."""

    def test_result_is_returned(self):
        outcome = classify_response(200, {"jsonrpc": "2.0", "id": 1, "result": 42}, URL)
        assert outcome == RPCSuccess(42)

    @pytest.mark.parametrize("result", [0, False, None, "", [], {}])
    def test_falsy_result_is_still_a_success(self, result):
        outcome = classify_response(200, {"jsonrpc": "2.0", "id": 1, "result": result}, URL)
        assert outcome == RPCSuccess(result)

    def test_error_body_is_a_server_error(self):
        error = {"code": -32601, "message": "Method not found", "data": {"method": "nope"}}
        outcome = classify_response(200, {"jsonrpc": "2.0", "id": 1, "error": error}, URL)

        assert outcome == RPCFailure(
            ErrorKind.SERVER, "Method not found", error=error, data={"method": "nope"}
        )

    def test_result_with_error_is_a_server_error(self):
        error = {"code": -32000, "message": "partial failure"}
        body = {"jsonrpc": "2.0", "id": 1, "result": 42, "error": error}

        outcome = classify_response(200, body, URL)

        assert outcome == RPCFailure(ErrorKind.SERVER, "partial failure", error=error)

    def test_result_with_null_error_is_a_success(self):
        body = {"jsonrpc": "2.0", "id": 1, "result": 42, "error": None}
        assert classify_response(200, body, URL) == RPCSuccess(42)

    def test_body_without_result_or_error(self):
        outcome = classify_response(200, {"jsonrpc": "2.0", "id": 1}, URL)

        assert outcome.kind is ErrorKind.SERVER
        assert "neither result nor error" in outcome.message

    def test_non_json_body_is_a_transport_error(self):
        outcome = classify_response(200, "<html>hello</html>", URL)

        assert outcome.kind is ErrorKind.TRANSPORT
        assert URL in outcome.message


class TestFailureStatus:
    """Responses with a failing status."""

    def test_connection_refused(self):
        outcome = classify_response(0, None, URL)
        assert outcome == RPCFailure(ErrorKind.TRANSPORT, f"Connection refused at {URL}")

    def test_not_found(self):
        outcome = classify_response(404, None, URL)
        assert outcome == RPCFailure(ErrorKind.TRANSPORT, f"404 not found at {URL}")

    def test_500_with_envelope_is_a_server_error(self):
        body = {"jsonrpc": "2.0", "id": 3, "error": {"code": -32603, "message": "bad"}}
        outcome = classify_transport_failure(500, body, URL)

        assert outcome.kind is ErrorKind.SERVER
        assert outcome.message == "bad"
        assert outcome.error == {"code": -32603, "message": "bad"}

    def test_500_with_string_error(self):
        outcome = classify_response(500, {"jsonrpc": "2.0", "id": 3, "error": "bad"}, URL)

        assert outcome == RPCFailure(ErrorKind.SERVER, "bad", error="bad")

    def test_500_envelope_without_error(self):
        outcome = classify_response(500, {"jsonrpc": "2.0", "id": 3}, URL)

        assert outcome.kind is ErrorKind.SERVER
        assert outcome.error is None
        assert "neither result nor error" in outcome.message

    def test_500_without_envelope_is_a_transport_error(self):
        outcome = classify_response(500, "Internal Server Error", URL)
        assert outcome == RPCFailure(
            ErrorKind.TRANSPORT,
            f"500 internal server error at {URL}: Internal Server Error",
        )

    def test_500_with_other_json_is_a_transport_error(self):
        outcome = classify_response(500, {"detail": "boom"}, URL)
        assert outcome.kind is ErrorKind.TRANSPORT

    def test_unknown_status(self):
        outcome = classify_response(502, "Bad Gateway", URL)
        assert outcome == RPCFailure(
            ErrorKind.TRANSPORT, "Unknown error. HTTP status: 502, data: Bad Gateway"
        )


class TestToException:
    """Conversion of failures into exceptions."""

    def test_server_failure_becomes_server_error(self):
        error = {"code": 1, "message": "bad", "data": [1]}
        exc = RPCFailure(ErrorKind.SERVER, "bad", error=error, data=[1]).to_exception()

        assert isinstance(exc, ServerError)
        assert exc.message == "bad"
        assert exc.error == error
        assert exc.data == [1]
        assert exc.code == 1

    def test_transport_failure_becomes_transport_error(self):
        exc = RPCFailure(ErrorKind.TRANSPORT, "down").to_exception()

        assert isinstance(exc, TransportError)
        assert exc.kind is ErrorKind.TRANSPORT
        assert exc.name == "JsonRpcTransportError"

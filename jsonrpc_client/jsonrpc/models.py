"""JSON-RPC 2.0 request model."""
from pydantic import BaseModel
from typing import Any, Literal


class JSONRPCRequest(BaseModel):
    """JSON-RPC 2.0 request model (the outbound envelope)."""

    jsonrpc: Literal["2.0"] = "2.0"
    id: int
    method: str
    params: Any = None

"""JSON-RPC 2.0 wire models."""
from .models import JSONRPCRequest

__all__ = ["JSONRPCRequest"]

"""Non-blocking HTTP POST transport built on httpx."""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HTTPResponse:
    """What the transport observed: status 0 means no response at all."""
    status: int
    body: Any = None
    headers: Dict[str, str] = field(default_factory=dict)


class Transport(Protocol):
    """Anything that can POST a JSON body and report the HTTP outcome."""

    async def post(self, url: str, headers: Dict[str, str], body: Any) -> HTTPResponse:
        ...


def decode_body(response: httpx.Response) -> Any:
    """Decode a response body as JSON, falling back to text."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class HTTPTransport:
    """Posts JSON-RPC envelopes with an ``httpx.AsyncClient``."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        """Initialize the transport.

        Args:
            client: Long-lived client to send requests with. The caller owns
                it and closes it. When omitted every request opens its own
                client, so no connection outlives the event loop it was
                made on.
        """
        self.client = client

    async def post(self, url: str, headers: Dict[str, str], body: Any) -> HTTPResponse:
        try:
            if self.client is not None:
                response = await self.client.post(url, headers=headers, json=body)
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.post(url, headers=headers, json=body)
        except httpx.TransportError as e:
            logger.debug(f"No response from {url}: {e!r}")
            return HTTPResponse(status=0)

        return HTTPResponse(
            status=response.status_code,
            body=decode_body(response),
            headers=dict(response.headers),
        )

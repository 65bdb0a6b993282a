"""Named JSON-RPC server endpoints."""
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

import httpx
from pydantic import BaseModel, Field, ValidationError

from .config import load_config
from .utils.errors import ConfigError
from .utils.validation import validate_config_key, validate_servers, validate_url

logger = logging.getLogger(__name__)

DEFAULT_SERVER_NAME = "main"


class ServerEndpoint(BaseModel):
    """A named, addressable JSON-RPC server."""

    name: str = Field(min_length=1)
    url: str = Field(min_length=1)
    headers: Dict[str, str] = Field(default_factory=dict)


class ServerRegistry:
    """Holds the configured servers and the raw-result flag.

    Built once at startup and consulted on every call.
    """

    def __init__(self):
        self._servers: List[ServerEndpoint] = []
        self._return_http_promise = False

    @classmethod
    def from_yaml(cls, path: str) -> "ServerRegistry":
        """Create a registry configured from a YAML file."""
        registry = cls()
        registry.configure(load_config(path))
        return registry

    @property
    def servers(self) -> Tuple[ServerEndpoint, ...]:
        return tuple(self._servers)

    @property
    def return_http_promise(self) -> bool:
        return self._return_http_promise

    def configure(self, options: Mapping[str, Any]) -> None:
        """Apply configuration options in the order given.

        Args:
            options: Mapping with any of ``url``, ``servers`` and
                ``returnHttpPromise``. ``url`` and ``servers`` each replace
                the whole endpoint set.

        Raises:
            ConfigError: On an unknown key or an invalid server entry
        """
        if not isinstance(options, Mapping):
            raise ConfigError('Argument of "configure" must be a mapping.')

        for key, value in options.items():
            validate_config_key(key)

            if key == "url":
                if not value:
                    raise ConfigError('Argument "url" must not be empty.')
                endpoint = _build_endpoint(name=DEFAULT_SERVER_NAME, url=value)
                self._servers = [endpoint]
                logger.info(
                    f"Configured JSON-RPC server '{endpoint.name}' on host {httpx.URL(endpoint.url).host}"
                )
            elif key == "servers":
                self._servers = [_build_endpoint(**entry) for entry in validate_servers(value)]
                names = ", ".join(server.name for server in self._servers)
                logger.info(f"Configured {len(self._servers)} JSON-RPC server(s): {names}")
            else:
                self._return_http_promise = bool(value)

    def find_by_name(self, name: str) -> Optional[ServerEndpoint]:
        """Return the first server whose name matches exactly, if any."""
        for server in self._servers:
            if server.name == name:
                return server
        return None

    def is_empty(self) -> bool:
        return not self._servers

    def reset(self) -> None:
        """Forget all servers and restore the default flags."""
        self._servers = []
        self._return_http_promise = False


def _build_endpoint(**fields: Any) -> ServerEndpoint:
    validate_url(fields.get("url"))
    try:
        return ServerEndpoint(**fields)
    except ValidationError as e:
        raise ConfigError(f'Invalid server "{fields.get("name")}": {e}') from e

"""Validation of client configuration input."""
import re
from typing import Any, Dict, Iterable, Mapping

import httpx

from .errors import ConfigError

ALLOWED_CONFIG_KEYS = ("url", "servers", "returnHttpPromise")
ALLOWED_URL_SCHEMES = ("http", "https")

# Registered names after IDNA encoding, or bare IP addresses.
VALID_HOST = re.compile(r"^[a-zA-Z0-9._-]+$|^[0-9a-fA-F:.]+$")


def validate_url(url: Any) -> httpx.URL:
    """Parse a server URL, raising ``ConfigError`` if no request could use it."""
    if not isinstance(url, str) or not url:
        raise ConfigError(f"Server URL must be a non-empty string, got {url!r}.")
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise ConfigError(f'Invalid server URL "{url}": {e}') from e

    if parsed.scheme not in ALLOWED_URL_SCHEMES:
        raise ConfigError(f'Invalid server URL "{url}": scheme must be http or https.')
    if not parsed.host or not VALID_HOST.match(parsed.raw_host.decode("ascii")):
        raise ConfigError(f'Invalid server URL "{url}": bad host.')
    return parsed


def validate_headers(server_name: Any, headers: Mapping[Any, Any]) -> Dict[str, str]:
    """Return headers as strings; numbers are converted, anything else rejected."""
    result = {}
    for key, value in headers.items():
        if not isinstance(key, str):
            raise ConfigError(f'Header names of server "{server_name}" must be strings.')
        if not isinstance(value, (str, int, float)):
            raise ConfigError(
                f'Header "{key}" of server "{server_name}" must be a string or a number.'
            )
        result[key] = str(value)
    return result


def validate_config_key(key: Any) -> None:
    """Reject an option key outside the allow-list."""
    if key not in ALLOWED_CONFIG_KEYS:
        raise ConfigError(
            f'Invalid configuration key "{key}". Allowed keys are: '
            + ", ".join(ALLOWED_CONFIG_KEYS)
        )


def validate_server_entry(entry: Any) -> Dict[str, Any]:
    """Validate one item of the ``servers`` option.

    Returns a dict with ``name``, ``url`` and ``headers`` (defaulting to an
    empty dict when the item has none).
    """
    if not isinstance(entry, Mapping):
        raise ConfigError('Item in "servers" argument must be a mapping.')
    if not entry.get("name"):
        raise ConfigError('Item in "servers" argument must contain "name" field.')
    if not entry.get("url"):
        raise ConfigError('Item in "servers" argument must contain "url" field.')

    headers = entry.get("headers")
    if headers is None:
        headers = {}
    elif not isinstance(headers, Mapping):
        raise ConfigError(f'Headers of server "{entry["name"]}" must be a mapping.')

    return {
        "name": entry["name"],
        "url": entry["url"],
        "headers": validate_headers(entry["name"], headers),
    }


def validate_servers(servers: Any) -> Iterable[Dict[str, Any]]:
    """Validate the ``servers`` option as a whole."""
    if not isinstance(servers, (list, tuple)):
        raise ConfigError('Argument "servers" must be a list.')
    entries = [validate_server_entry(entry) for entry in servers]

    seen = set()
    for entry in entries:
        if entry["name"] in seen:
            raise ConfigError(f'Server name "{entry["name"]}" is used more than once.')
        seen.add(entry["name"])

    return entries

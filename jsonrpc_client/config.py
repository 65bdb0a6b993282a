"""Loading client configuration from YAML files and the environment."""
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .utils.errors import ConfigError

logger = logging.getLogger(__name__)

TRUE_VALUES = {"1", "true", "yes", "on"}


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration options from a YAML file.

    The document must be a mapping using the same keys as
    ``ServerRegistry.configure``, for example::

        servers:
          - name: main
            url: http://localhost:8080/rpc
          - name: billing
            url: http://billing.internal/rpc
            headers:
              Authorization: Bearer secret
        returnHttpPromise: false

    Args:
        config_path: Path to config file

    Returns:
        Configuration options
    """
    path = Path(config_path)
    if not path.is_file():
        raise ConfigError(f"Configuration file not found: {path}")

    with open(path, "r") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration in {path} must be a mapping.")

    logger.info(f"Loaded JSON-RPC client configuration from {path}")
    return data


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Build configuration options from environment variables.

    ``JSONRPC_URL`` sets the default server and ``JSONRPC_RETURN_HTTP_PROMISE``
    turns on raw HTTP results.
    """
    if environ is None:
        environ = os.environ

    options: Dict[str, Any] = {}
    url = environ.get("JSONRPC_URL")
    if url:
        options["url"] = url

    raw = environ.get("JSONRPC_RETURN_HTTP_PROMISE")
    if raw is not None:
        options["returnHttpPromise"] = raw.strip().lower() in TRUE_VALUES

    return options

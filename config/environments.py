"""
Environment configuration management.
"""

import os
from typing import Any, Dict, Mapping, Optional


# Raw config key -> environment variable
ENV_VARS = {
    "url": "ES_URL",
    "api_key": "ES_API_KEY",
    "username": "ES_USERNAME",
    "password": "ES_PASSWORD",
    "ca_cert": "ES_CA_CERT",
    "version": "ES_VERSION",
    "path_prefix": "ES_PATH_PREFIX",
}

TRUTHY_FLAGS = ("1", "true")


def _get(environ: Mapping[str, str], name: str) -> Optional[str]:
    # An exported-but-empty variable counts as unset
    value = environ.get(name)
    if value is None or value == "":
        return None
    return value


def read_environment(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Read Elasticsearch connection settings from the environment.

    The result is raw, unvalidated input for
    ``utils.validation.validate_config``.

    Args:
        environ: Mapping to read from (defaults to ``os.environ``)

    Returns:
        Dictionary of raw configuration values
    """
    if environ is None:
        environ = os.environ

    raw: Dict[str, Any] = {key: _get(environ, var) for key, var in ENV_VARS.items()}
    raw["url"] = raw["url"] or ""
    raw["ssl_skip_verify"] = environ.get("ES_SSL_SKIP_VERIFY") in TRUTHY_FLAGS
    return raw


def is_running_in_container(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Whether the process was started from the container image."""
    if environ is None:
        environ = os.environ
    return environ.get("RUNNING_IN_CONTAINER") == "true"


def get_log_level(environ: Optional[Mapping[str, str]] = None) -> str:
    """Log level name from LOG_LEVEL, defaulting to INFO."""
    if environ is None:
        environ = os.environ
    return (environ.get("LOG_LEVEL") or "INFO").upper()

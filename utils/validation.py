"""
Input validation utilities.
"""

from typing import Any, Mapping, Optional
from urllib.parse import urlparse

from mcp_types.primitives import ElasticsearchConfig, ElasticsearchVersion


AUTH_ERROR = (
    "Either ES_API_KEY or both ES_USERNAME and ES_PASSWORD must be provided, "
    "or no auth for local development"
)


class ConfigValidationError(ValueError):
    """Raised when connection settings are missing or inconsistent."""


def validate_url(url: Optional[str]) -> str:
    """
    Validate the Elasticsearch URL.

    Args:
        url: Raw URL value

    Returns:
        The trimmed URL

    Raises:
        ConfigValidationError: If the URL is empty or malformed
    """
    url = (url or "").strip()
    if not url:
        raise ConfigValidationError("Elasticsearch URL cannot be empty")

    try:
        parsed = urlparse(url)
        # Accessing .port validates it
        parsed.port
    except ValueError as e:
        raise ConfigValidationError("Invalid Elasticsearch URL format") from e

    if not parsed.scheme or not parsed.netloc:
        raise ConfigValidationError("Invalid Elasticsearch URL format")

    return url


def validate_auth(
    api_key: Optional[str],
    username: Optional[str],
    password: Optional[str],
) -> None:
    """
    Check that the auth fields form a usable combination.

    An API key on its own, a username with a password, or nothing at all
    are accepted. A username without a password is not.

    Raises:
        ConfigValidationError: If a username is given without a password
    """
    if api_key is not None:
        return
    if username is not None and password is None:
        raise ConfigValidationError(AUTH_ERROR)


def normalize_version(version: Any) -> str:
    """Coerce a version value to "8" or "9" (default)."""
    if version in ElasticsearchVersion.ALL:
        return version
    return ElasticsearchVersion.DEFAULT


def validate_config(raw: Mapping[str, Any]) -> ElasticsearchConfig:
    """
    Validate raw connection settings.

    Args:
        raw: Settings as produced by ``config.read_environment``

    Returns:
        Immutable ElasticsearchConfig

    Raises:
        ConfigValidationError: If the settings are invalid
    """
    url = validate_url(raw.get("url"))

    api_key = raw.get("api_key")
    username = raw.get("username")
    password = raw.get("password")
    validate_auth(api_key, username, password)

    return ElasticsearchConfig(
        url=url,
        api_key=api_key,
        username=username,
        password=password,
        ca_cert=raw.get("ca_cert"),
        path_prefix=raw.get("path_prefix"),
        version=normalize_version(raw.get("version")),
        ssl_skip_verify=bool(raw.get("ssl_skip_verify", False)),
    )


def validate_index_name(name: Optional[str], label: str = "Index name") -> str:
    """
    Validate an index name or pattern passed to a tool.

    Args:
        name: Index name or pattern
        label: Name used in the error message

    Returns:
        The trimmed name

    Raises:
        ValueError: If the name is blank
    """
    name = (name or "").strip()
    if not name:
        raise ValueError(f"{label} is required")
    return name

"""
Elasticsearch connection management.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Tuple

from elasticsearch import AsyncElasticsearch

from config import PRODUCT_NAME, PRODUCT_VERSION
from mcp_types.primitives import ClientOptions, ElasticsearchConfig, ElasticsearchVersion
from utils.transport import request_rewriting_transport_factory


logger = logging.getLogger(__name__)

COMPATIBILITY_MEDIA_TYPE = "application/vnd.elasticsearch+json;compatible-with=8"

# Applied for Elasticsearch 8 only; 9 keeps the client defaults
V8_MAX_RETRIES = 5
V8_REQUEST_TIMEOUT = 30.0


class ConfigurationError(Exception):
    """Raised when TLS material referenced by the configuration is unusable."""


def read_ca_certificate(path: str) -> str:
    """
    Check that a CA certificate bundle can be read.

    Args:
        path: Filesystem path to a PEM bundle

    Returns:
        The path, once the file has been read successfully

    Raises:
        ConfigurationError: If the file cannot be read
    """
    try:
        Path(path).read_bytes()
    except OSError as e:
        raise ConfigurationError(f"Failed to read certificate file: {e}") from e
    return path


def _resolve_ca_certs(ca_cert: Optional[str]) -> Optional[str]:
    if not ca_cert:
        return None
    try:
        return read_ca_certificate(ca_cert)
    except ConfigurationError as e:
        # Non-fatal: the client falls back to its default trust store
        logger.warning("%s", e)
        return None


def _resolve_auth(config: ElasticsearchConfig) -> Tuple[Optional[str], Optional[Tuple[str, str]]]:
    if config.api_key is not None:
        return config.api_key, None
    if config.username is not None and config.password is not None:
        return None, (config.username, config.password)
    return None, None


def build_client_options(config: ElasticsearchConfig) -> ClientOptions:
    """
    Translate validated settings into client options.

    Args:
        config: Validated connection settings

    Returns:
        Immutable ClientOptions snapshot
    """
    headers: Dict[str, str] = {"user-agent": f"{PRODUCT_NAME}/{PRODUCT_VERSION}"}
    request_headers: Dict[str, str] = {}
    max_retries = None
    request_timeout = None

    if config.version == ElasticsearchVersion.V8:
        request_headers["accept"] = COMPATIBILITY_MEDIA_TYPE
        request_headers["content-type"] = COMPATIBILITY_MEDIA_TYPE
        max_retries = V8_MAX_RETRIES
        request_timeout = V8_REQUEST_TIMEOUT

    api_key, basic_auth = _resolve_auth(config)

    return ClientOptions(
        url=config.url,
        headers=headers,
        request_headers=request_headers,
        api_key=api_key,
        basic_auth=basic_auth,
        ca_certs=_resolve_ca_certs(config.ca_cert),
        verify_certs=not config.ssl_skip_verify,
        max_retries=max_retries,
        request_timeout=request_timeout,
        path_prefix=config.path_prefix or None,
    )


def create_elasticsearch_client(config: ElasticsearchConfig) -> AsyncElasticsearch:
    """
    Create the Elasticsearch client shared by all tools.

    Args:
        config: Validated connection settings

    Returns:
        Configured AsyncElasticsearch client
    """
    options = build_client_options(config)
    params = options.to_client_kwargs()

    if options.path_prefix or options.request_headers:
        params["transport_class"] = request_rewriting_transport_factory(
            path_prefix=options.path_prefix or "",
            header_overrides=options.request_headers,
        )

    logger.info(
        "Creating Elasticsearch client for %s (version %s, auth: %s)",
        options.url,
        config.version,
        "api_key" if options.api_key else "basic" if options.basic_auth else "none",
    )
    return AsyncElasticsearch(**params)

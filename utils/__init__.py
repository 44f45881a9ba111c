"""
Utility functions for the MCP Elasticsearch server.
"""

from .connection import (
    ConfigurationError,
    build_client_options,
    create_elasticsearch_client,
)
from .validation import (
    ConfigValidationError,
    validate_config,
    validate_index_name,
)
from .transport import RequestRewritingTransport, request_rewriting_transport_factory
from .response_parser import (
    response_body,
    extract_index_mappings,
    format_hit,
    text_fragment,
    to_json,
    to_pretty_json,
)
from .logger import configure_logging

__all__ = [
    # Connection
    "ConfigurationError",
    "build_client_options",
    "create_elasticsearch_client",
    # Validation
    "ConfigValidationError",
    "validate_config",
    "validate_index_name",
    # Transport
    "RequestRewritingTransport",
    "request_rewriting_transport_factory",
    # Response parsing
    "response_body",
    "extract_index_mappings",
    "format_hit",
    "text_fragment",
    "to_json",
    "to_pretty_json",
    # Logging
    "configure_logging",
]

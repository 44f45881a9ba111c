"""
Configuration management for the Elasticsearch MCP server.
"""

from .environments import (
    read_environment,
    is_running_in_container,
    get_log_level,
)

# Product metadata, sent as the User-Agent and used as the MCP server name
PRODUCT_NAME = "elasticsearch-mcp"
PRODUCT_VERSION = "0.3.1"

__all__ = [
    "PRODUCT_NAME",
    "PRODUCT_VERSION",
    "read_environment",
    "is_running_in_container",
    "get_log_level",
]

"""
Type definitions for the Elasticsearch MCP server.
"""

from .primitives import (
    ElasticsearchVersion,
    ElasticsearchConfig,
    ClientOptions,
    IndexInfo,
    ShardInfo,
    SearchResult,
)

__all__ = [
    "ElasticsearchVersion",
    "ElasticsearchConfig",
    "ClientOptions",
    "IndexInfo",
    "ShardInfo",
    "SearchResult",
]

"""
Primitive tools for low-level Elasticsearch operations.
"""

from .indices import list_indices, get_mappings, fetch_index_mappings
from .search import search, build_highlight, build_search_body, format_search_result
from .shards import get_shards

__all__ = [
    # Index operations
    "list_indices",
    "get_mappings",
    "fetch_index_mappings",
    # Search operations
    "search",
    "build_highlight",
    "build_search_body",
    "format_search_result",
    # Shard operations
    "get_shards",
]

"""
Primitive index operations for Elasticsearch.
"""

import logging
from typing import Any, Dict, List

from elasticsearch import AsyncElasticsearch, NotFoundError
from mcp.types import TextContent

from mcp_types.primitives import IndexInfo
from utils.response_parser import (
    extract_index_mappings,
    response_body,
    text_fragment,
    to_pretty_json,
)
from utils.validation import validate_index_name


logger = logging.getLogger(__name__)


async def list_indices(es: AsyncElasticsearch, index_pattern: str) -> List[TextContent]:
    """
    List indices matching a pattern.

    Args:
        es: Elasticsearch client
        index_pattern: Index pattern (e.g. "logs-*")

    Returns:
        A count fragment followed by a JSON fragment with index,
        health, status and docsCount per index
    """
    index_pattern = validate_index_name(index_pattern, "Index pattern")

    response = await es.cat.indices(index=index_pattern, format="json")
    indices = [IndexInfo.from_cat_row(row).to_dict() for row in response_body(response)]

    return [
        text_fragment(f"Found {len(indices)} indices"),
        text_fragment(to_pretty_json(indices)),
    ]


async def fetch_index_mappings(es: AsyncElasticsearch, index: str) -> Dict[str, Any]:
    """
    Get the mappings of a single index.

    Returns:
        The index mappings, or {} if the index does not exist
    """
    try:
        response = await es.indices.get_mapping(index=index)
    except NotFoundError:
        logger.debug("No mappings found for index %s", index)
        return {}
    return extract_index_mappings(response, index)


async def get_mappings(es: AsyncElasticsearch, index: str) -> List[TextContent]:
    """
    Get field mappings for an index.

    Args:
        es: Elasticsearch client
        index: Index name

    Returns:
        A header fragment and a fragment with the mapping JSON
    """
    index = validate_index_name(index)
    mappings = await fetch_index_mappings(es, index)

    return [
        text_fragment(f"Mappings for index: {index}"),
        text_fragment(f"Mappings for index {index}: {to_pretty_json(mappings)}"),
    ]

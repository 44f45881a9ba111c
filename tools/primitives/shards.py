"""
Primitive shard operations for Elasticsearch.
"""

from typing import List, Optional

from elasticsearch import AsyncElasticsearch
from mcp.types import TextContent

from mcp_types.primitives import ShardInfo
from utils.response_parser import response_body, text_fragment, to_pretty_json


async def get_shards(es: AsyncElasticsearch, index: Optional[str] = None) -> List[TextContent]:
    """
    Get shard placement and state.

    Args:
        es: Elasticsearch client
        index: Limit to one index (whole cluster when omitted)

    Returns:
        A count fragment and a JSON fragment with one entry per shard
    """
    response = await es.cat.shards(index=index, format="json")
    shards = [ShardInfo.from_cat_row(row).to_dict() for row in response_body(response)]

    scope = f" for index {index}" if index is not None else ""
    return [
        text_fragment(f"Found {len(shards)} shards{scope}"),
        text_fragment(to_pretty_json(shards)),
    ]

"""
Registration of the Elasticsearch tools with a FastMCP server.
"""

import functools
import logging
from typing import Annotated, Any, Awaitable, Callable, Dict, List, Optional

from elasticsearch import AsyncElasticsearch
from fastmcp import FastMCP
from mcp.types import TextContent
from pydantic import Field, StringConstraints

from tools import primitives
from utils.response_parser import text_fragment


logger = logging.getLogger(__name__)

IndexName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def tool_error_result(action: str):
    """
    Turn any exception raised by a tool into an error result.

    The failure is logged and the caller gets a single "Error: ..."
    text fragment, so one failing call never breaks the session.

    Args:
        action: Log message prefix, e.g. "Search failed"
    """
    def decorator(
        func: Callable[..., Awaitable[List[TextContent]]]
    ) -> Callable[..., Awaitable[List[TextContent]]]:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> List[TextContent]:
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                logger.error("%s: %s", action, e)
                return [text_fragment(f"Error: {e}")]

        return wrapper

    return decorator


class ElasticsearchTools:
    """
    The four Elasticsearch tools, bound to one shared client.

    Argument names are part of the MCP tool schema, hence camelCase.
    """

    def __init__(self, es: AsyncElasticsearch):
        self.es = es

    @tool_error_result("Failed to list indices")
    async def list_indices(
        self,
        indexPattern: Annotated[
            IndexName,
            Field(description="Index pattern of Elasticsearch indices to list"),
        ],
    ) -> List[TextContent]:
        return await primitives.list_indices(self.es, indexPattern)

    @tool_error_result("Failed to get mappings")
    async def get_mappings(
        self,
        index: Annotated[
            IndexName,
            Field(description="Name of the Elasticsearch index to get mappings for"),
        ],
    ) -> List[TextContent]:
        return await primitives.get_mappings(self.es, index)

    @tool_error_result("Search failed")
    async def search(
        self,
        index: Annotated[
            IndexName,
            Field(description="Name of the Elasticsearch index to search"),
        ],
        queryBody: Annotated[
            Dict[str, Any],
            Field(
                description="Complete Elasticsearch query DSL object that can include "
                "query, size, from, sort, etc."
            ),
        ],
        profile: Annotated[
            bool,
            Field(description="Whether to include query profiling information"),
        ] = False,
        explain: Annotated[
            bool,
            Field(description="Whether to include explanation of how the query was executed"),
        ] = False,
    ) -> List[TextContent]:
        return await primitives.search(self.es, index, queryBody, profile=profile, explain=explain)

    @tool_error_result("Failed to get shard information")
    async def get_shards(
        self,
        index: Annotated[
            Optional[str],
            Field(description="Optional index name to get shard information for"),
        ] = None,
    ) -> List[TextContent]:
        return await primitives.get_shards(self.es, index)

    def register(self, mcp: FastMCP) -> None:
        """Register all tools with the server."""
        # Results are text content only, without structured output
        mcp.tool(
            name="list_indices",
            description="List all available Elasticsearch indices",
            output_schema=None,
        )(self.list_indices)
        mcp.tool(
            name="get_mappings",
            description="Get field mappings for a specific Elasticsearch index",
            output_schema=None,
        )(self.get_mappings)
        mcp.tool(
            name="search",
            description="Perform an Elasticsearch search with the provided query DSL. "
            "Highlights are always enabled.",
            output_schema=None,
        )(self.search)
        mcp.tool(
            name="get_shards",
            description="Get shard information for all or specific indices",
            output_schema=None,
        )(self.get_shards)
        logger.debug("Registered Elasticsearch tools")


def register_tools(mcp: FastMCP, es: AsyncElasticsearch) -> ElasticsearchTools:
    """
    Register the Elasticsearch tools on a server.

    Args:
        mcp: Server to register with
        es: Client shared by every tool call

    Returns:
        The tool set, bound to ``es``
    """
    tools = ElasticsearchTools(es)
    tools.register(mcp)
    return tools

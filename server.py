"""
Elasticsearch MCP Server.

Exposes a read-only view of an Elasticsearch cluster over MCP (stdio):
- list_indices: Indices matching a pattern, with health and doc counts
- get_mappings: Field mappings of an index
- search: Query DSL search with highlighting on text fields
- get_shards: Shard placement and state

Connection settings come from ES_* environment variables (or a .env file).
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP

from config import PRODUCT_NAME, get_log_level, is_running_in_container, read_environment
from mcp_types.primitives import ElasticsearchConfig
from tools.registry import register_tools
from utils.connection import create_elasticsearch_client
from utils.logger import configure_logging
from utils.validation import validate_config


logger = logging.getLogger(__name__)

USAGE = f"Usage: {PRODUCT_NAME} stdio"


def create_elasticsearch_mcp_server(config: ElasticsearchConfig) -> FastMCP:
    """
    Build the MCP server and the Elasticsearch client behind it.

    The client is created once and shared by every tool call; it is
    closed when the server shuts down.

    Args:
        config: Validated connection settings

    Returns:
        FastMCP server with all tools registered
    """
    es = create_elasticsearch_client(config)

    @asynccontextmanager
    async def lifespan(server: FastMCP) -> AsyncIterator[dict]:
        try:
            yield {}
        finally:
            await es.close()
            logger.info("Elasticsearch client closed")

    mcp = FastMCP(PRODUCT_NAME, lifespan=lifespan)
    register_tools(mcp, es)
    return mcp


def check_protocol_argument(argv: List[str]) -> bool:
    """
    In the container image the protocol must be given explicitly.

    Returns:
        True if the command line is acceptable
    """
    if not is_running_in_container():
        return True
    return argv == ["stdio"]


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point.

    Returns:
        Process exit code: 0 on clean shutdown, 1 on usage or startup error
    """
    if argv is None:
        argv = sys.argv[1:]

    if not check_protocol_argument(argv):
        print("Missing protocol argument.")
        print(USAGE)
        return 1

    load_dotenv()
    configure_logging(get_log_level())

    try:
        config = validate_config(read_environment())
        mcp = create_elasticsearch_mcp_server(config)
        logger.info("Starting %s on stdio", PRODUCT_NAME)
        mcp.run(transport="stdio")
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
        return 0
    except Exception as e:
        logger.error("Server error: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
Debug script for checking the tools against a live cluster.

Reads the same ES_* variables as the server (or a .env file) and runs
each tool once. Usage:

    ES_URL=http://localhost:9200 python debug/check_cluster.py [index]
"""
import asyncio
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

from config import read_environment
from tools.registry import ElasticsearchTools
from utils.connection import create_elasticsearch_client
from utils.validation import validate_config
from debug.utils.test_helpers import (
    print_header, print_test, print_success, print_error, print_info,
    print_fragments, is_error_result, safe_call, exit_with_summary
)


class ClusterChecker:
    def __init__(self, tools: ElasticsearchTools, index: str):
        self.tools = tools
        self.index = index
        self.passed = 0
        self.failed = 0

    def record(self, name: str, success: bool, result) -> bool:
        if success and not is_error_result(result):
            print_success(f"{name} returned {len(result)} fragment(s)")
            print_fragments(result)
            self.passed += 1
            return True
        print_error(f"{name} failed: {result if not success else result[0].text}")
        self.failed += 1
        return False

    async def check_list_indices(self) -> bool:
        print_test("List Indices")
        success, result = await safe_call(self.tools.list_indices, indexPattern=self.index)
        return self.record("list_indices", success, result)

    async def check_get_mappings(self) -> bool:
        print_test("Get Mappings")
        success, result = await safe_call(self.tools.get_mappings, index=self.index)
        return self.record("get_mappings", success, result)

    async def check_search(self) -> bool:
        print_test("Match All Search")
        success, result = await safe_call(
            self.tools.search,
            index=self.index,
            queryBody={"query": {"match_all": {}}, "size": 3},
        )
        return self.record("search", success, result)

    async def check_get_shards(self) -> bool:
        print_test("Get Shards")
        success, result = await safe_call(self.tools.get_shards, index=self.index)
        return self.record("get_shards", success, result)

    async def run(self) -> None:
        await self.check_list_indices()
        await self.check_get_mappings()
        await self.check_search()
        await self.check_get_shards()


async def main(index: str) -> None:
    load_dotenv()
    print_header("ELASTICSEARCH MCP CLUSTER CHECK")

    config = validate_config(read_environment())
    print_info(f"Cluster: {config.url} (version {config.version})")
    print_info(f"Index: {index}")

    es = create_elasticsearch_client(config)
    checker = ClusterChecker(ElasticsearchTools(es), index)
    try:
        await checker.run()
    finally:
        await es.close()

    exit_with_summary(checker.passed, checker.failed)


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "*"))

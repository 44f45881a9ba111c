"""
Pytest configuration and fixtures for MCP Elasticsearch tests.
"""

import pytest
import os
import sys
from unittest.mock import AsyncMock, Mock

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(__file__))
sys.path.insert(0, project_root)


ES_ENV_VARS = [
    "ES_URL",
    "ES_API_KEY",
    "ES_USERNAME",
    "ES_PASSWORD",
    "ES_CA_CERT",
    "ES_VERSION",
    "ES_SSL_SKIP_VERIFY",
    "ES_PATH_PREFIX",
    "RUNNING_IN_CONTAINER",
]


@pytest.fixture
def sample_mappings():
    """Mappings of a small articles index."""
    return {
        "properties": {
            "title": {"type": "text"},
            "body": {"type": "text", "analyzer": "english"},
            "year": {"type": "integer"},
            "tag": {"type": "keyword"},
            "embedding": {"dense_vector": {"dims": 3}},
        }
    }


@pytest.fixture
def sample_search_response():
    """Search response with highlighting on one hit."""
    return {
        "took": 4,
        "timed_out": False,
        "hits": {
            "total": {"value": 2, "relation": "eq"},
            "hits": [
                {
                    "_index": "articles",
                    "_id": "1",
                    "_source": {"title": "a full title", "year": 2020},
                    "highlight": {"title": ["a", "b"]},
                },
                {
                    "_index": "articles",
                    "_id": "2",
                    "_source": {"title": "another", "year": 2021},
                },
            ],
        },
    }


@pytest.fixture
def mock_elasticsearch(sample_mappings, sample_search_response):
    """Mock AsyncElasticsearch client for testing."""
    mock_es = Mock()

    mock_es.cat.indices = AsyncMock(return_value=[
        {
            "health": "green",
            "status": "open",
            "index": "articles",
            "uuid": "a1b2c3",
            "pri": "1",
            "rep": "1",
            "docs.count": "1200",
            "docs.deleted": "0",
            "store.size": "1.2mb",
        },
        {
            "health": "yellow",
            "status": "open",
            "index": "articles-archive",
            "docs.count": "87",
        },
    ])

    mock_es.cat.shards = AsyncMock(return_value=[
        {
            "index": "articles",
            "shard": "0",
            "prirep": "p",
            "state": "STARTED",
            "docs": "1200",
            "store": "1.2mb",
            "ip": "10.0.0.1",
            "node": "node-1",
        },
        {
            "index": "articles",
            "shard": "0",
            "prirep": "r",
            "state": "UNASSIGNED",
            "docs": None,
            "store": None,
            "ip": None,
            "node": None,
        },
    ])

    mock_es.indices.get_mapping = AsyncMock(
        return_value={"articles": {"mappings": sample_mappings}}
    )
    mock_es.search = AsyncMock(return_value=sample_search_response)
    mock_es.close = AsyncMock()

    return mock_es


@pytest.fixture
def clean_environment(monkeypatch):
    """Remove any ES_* settings inherited from the shell."""
    for name in ES_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch

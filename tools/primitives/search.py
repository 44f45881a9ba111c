"""
Primitive search operations for Elasticsearch.
"""

from typing import Any, Dict, List, Optional

from elasticsearch import AsyncElasticsearch
from mcp.types import TextContent

from mcp_types.primitives import SearchResult
from tools.primitives.indices import fetch_index_mappings
from utils.response_parser import format_hit, response_body, text_fragment, to_pretty_json
from utils.validation import validate_index_name


HIGHLIGHT_PRE_TAG = "<em>"
HIGHLIGHT_POST_TAG = "</em>"


def get_highlightable_fields(mappings: Dict[str, Any]) -> List[str]:
    """
    Find the top-level fields worth highlighting.

    A field qualifies if it is mapped as ``text`` or carries a
    ``dense_vector`` sub-property.

    Args:
        mappings: Mappings of one index

    Returns:
        Field names, in mapping order
    """
    properties = mappings.get("properties") or {}
    return [
        name
        for name, field_mapping in properties.items()
        if field_mapping.get("type") == "text" or "dense_vector" in field_mapping
    ]


def build_highlight(mappings: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Build the highlight section of a search request.

    Returns:
        Highlight config, or None when the index has no text fields
    """
    fields = get_highlightable_fields(mappings)
    if not fields:
        return None

    return {
        "fields": {name: {} for name in fields},
        "pre_tags": [HIGHLIGHT_PRE_TAG],
        "post_tags": [HIGHLIGHT_POST_TAG],
    }


def build_search_body(
    query_body: Dict[str, Any],
    profile: bool = False,
    explain: bool = False,
    highlight: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Merge the caller's query DSL with the options this tool controls.

    Keys from ``query_body`` are kept as-is, except ``profile``,
    ``explain`` and ``highlight`` which are set here. A caller-supplied
    highlight survives only when the index has no text fields.
    """
    body = dict(query_body)
    body["profile"] = profile
    body["explain"] = explain
    if highlight is not None:
        body["highlight"] = highlight
    return body


def format_search_result(
    result: SearchResult,
    from_: Any = 0,
    profile: bool = False,
    explain: bool = False,
) -> List[TextContent]:
    """
    Turn a search response into content fragments.

    Order: metadata, aggregations (if any), one fragment per hit,
    query profile (if requested and returned).
    """
    fragments = [
        text_fragment(
            f"Total results: {result.total}, showing {len(result.hits)} from position {from_}"
        )
    ]

    if result.aggregations is not None:
        fragments.append(text_fragment(f"Aggregations: {to_pretty_json(result.aggregations)}"))

    fragments.extend(text_fragment(format_hit(hit, explain=explain)) for hit in result.hits)

    if profile and result.profile:
        fragments.append(text_fragment(f"Query Profile: {to_pretty_json(result.profile)}"))

    return fragments


async def search(
    es: AsyncElasticsearch,
    index: str,
    query_body: Dict[str, Any],
    profile: bool = False,
    explain: bool = False,
) -> List[TextContent]:
    """
    Run a query DSL search with highlighting on text fields.

    The index mappings are fetched first so that every text (or vector)
    field can be highlighted.

    Args:
        es: Elasticsearch client
        index: Index to search
        query_body: Full query DSL document (query, size, from, sort, aggs...)
        profile: Whether to include query profiling information
        explain: Whether to include per-hit score explanations

    Returns:
        Content fragments describing the results
    """
    index = validate_index_name(index)
    query_body = query_body or {}

    mappings = await fetch_index_mappings(es, index)
    body = build_search_body(
        query_body,
        profile=profile,
        explain=explain,
        highlight=build_highlight(mappings),
    )
    target_index = body.pop("index", index)

    response = await es.search(index=target_index, body=body)
    result = SearchResult.from_dict(response_body(response))

    from_ = query_body.get("from")
    if from_ is None:
        from_ = 0

    return format_search_result(
        result,
        from_=from_,
        profile=profile,
        explain=explain,
    )

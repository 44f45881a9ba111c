"""
Response parsing and formatting utilities for Elasticsearch.
"""

import json
from typing import Any, Dict, List, Optional

from mcp.types import TextContent


def response_body(response: Any) -> Any:
    """
    Unwrap a client API response into plain JSON data.

    The client returns ObjectApiResponse / ListApiResponse objects;
    their ``body`` is the decoded JSON.
    """
    return getattr(response, "body", response)


def to_json(value: Any) -> str:
    """Compact JSON, as used for inline field values."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


def to_pretty_json(value: Any) -> str:
    """Indented JSON, as used for whole-document fragments."""
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


def text_fragment(text: str) -> TextContent:
    """Wrap a string as an MCP text content block."""
    return TextContent(type="text", text=text)


def extract_index_mappings(response: Any, index: str) -> Dict[str, Any]:
    """
    Pull one index's mappings out of a get-mapping response.

    Args:
        response: Response of ``indices.get_mapping``
        index: Index name used for the request

    Returns:
        The mappings object, or {} when the index is absent
    """
    body = response_body(response) or {}
    return (body.get(index) or {}).get("mappings") or {}


def format_hit(hit: Dict[str, Any], explain: bool = False) -> str:
    """
    Render a search hit as text.

    Highlighted fields come first, joined with " ... ". Source fields
    that were highlighted are not repeated.

    Args:
        hit: A single entry of ``hits.hits``
        explain: Whether to append the hit's scoring explanation

    Returns:
        Text for one content fragment
    """
    highlighted: Dict[str, List[str]] = hit.get("highlight") or {}
    source: Dict[str, Any] = hit.get("_source") or {}

    lines = []
    for field, snippets in highlighted.items():
        if snippets:
            lines.append(f"{field} (highlighted): {' ... '.join(snippets)}")

    for field, value in source.items():
        if field not in highlighted:
            lines.append(f"{field}: {to_json(value)}")

    content = "\n".join(lines)
    explanation: Optional[Dict[str, Any]] = hit.get("_explanation")
    if explain and explanation:
        content += f"\n\nExplanation:\n{to_pretty_json(explanation)}"

    return content.strip()

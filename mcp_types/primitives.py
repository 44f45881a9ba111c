"""
Primitive layer type definitions.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union


class ElasticsearchVersion:
    """Supported Elasticsearch major versions."""
    V8 = "8"
    V9 = "9"

    ALL = (V8, V9)
    DEFAULT = V9


@dataclass(frozen=True)
class ElasticsearchConfig:
    """Validated connection settings, read once at startup."""
    url: str
    api_key: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    ca_cert: Optional[str] = None
    path_prefix: Optional[str] = None
    version: str = ElasticsearchVersion.DEFAULT
    ssl_skip_verify: bool = False


@dataclass(frozen=True)
class ClientOptions:
    """
    Transport-level settings derived from an ElasticsearchConfig.

    Fields left as None are not passed to the client, so the library
    defaults apply. ``request_headers`` are forced onto every request by
    the transport wrapper instead of being passed as client defaults.
    """
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    request_headers: Dict[str, str] = field(default_factory=dict)
    api_key: Optional[str] = None
    basic_auth: Optional[Tuple[str, str]] = None
    ca_certs: Optional[str] = None
    verify_certs: bool = True
    max_retries: Optional[int] = None
    request_timeout: Optional[float] = None
    path_prefix: Optional[str] = None

    def to_client_kwargs(self) -> Dict[str, Any]:
        """Convert to keyword arguments for the Elasticsearch client."""
        params: Dict[str, Any] = {
            "hosts": [self.url],
            "headers": dict(self.headers),
        }

        if self.api_key is not None:
            params["api_key"] = self.api_key
        elif self.basic_auth is not None:
            params["basic_auth"] = self.basic_auth
        if self.ca_certs is not None:
            params["ca_certs"] = self.ca_certs
        if not self.verify_certs:
            params["verify_certs"] = False
        if self.max_retries is not None:
            params["max_retries"] = self.max_retries
        if self.request_timeout is not None:
            params["request_timeout"] = self.request_timeout

        return params


@dataclass
class IndexInfo:
    """One row of the _cat/indices listing."""
    index: Optional[str]
    health: Optional[str]
    status: Optional[str]
    docs_count: Optional[str]

    @classmethod
    def from_cat_row(cls, row: Dict[str, Any]) -> "IndexInfo":
        """Create from a _cat/indices JSON row."""
        return cls(
            index=row.get("index"),
            health=row.get("health"),
            status=row.get("status"),
            docs_count=row.get("docs.count"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "health": self.health,
            "status": self.status,
            "docsCount": self.docs_count,
        }


@dataclass
class ShardInfo:
    """One row of the _cat/shards listing."""
    index: Optional[str]
    shard: Optional[str]
    prirep: Optional[str]
    state: Optional[str]
    docs: Optional[str]
    store: Optional[str]
    ip: Optional[str]
    node: Optional[str]

    @classmethod
    def from_cat_row(cls, row: Dict[str, Any]) -> "ShardInfo":
        """Create from a _cat/shards JSON row."""
        return cls(
            index=row.get("index"),
            shard=row.get("shard"),
            prirep=row.get("prirep"),
            state=row.get("state"),
            docs=row.get("docs"),
            store=row.get("store"),
            ip=row.get("ip"),
            node=row.get("node"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "shard": self.shard,
            "prirep": self.prirep,
            "state": self.state,
            "docs": self.docs,
            "store": self.store,
            "ip": self.ip,
            "node": self.node,
        }


@dataclass
class SearchResult:
    """Elasticsearch search response."""
    total: int
    hits: List[Dict[str, Any]]
    aggregations: Optional[Dict[str, Any]] = None
    profile: Optional[Dict[str, Any]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchResult":
        """Create from Elasticsearch response dict."""
        hits_data = data.get("hits") or {}
        total: Union[int, Dict[str, Any], None] = hits_data.get("total")
        if isinstance(total, dict):
            total = total.get("value", 0)
        elif total is None:
            total = 0

        return cls(
            total=total,
            hits=list(hits_data.get("hits") or []),
            aggregations=data.get("aggregations"),
            profile=data.get("profile"),
        )

"""
Transport wrapper that rewrites every request before it is sent.

Used when Elasticsearch sits behind a reverse proxy under a sub-path
(e.g. ``https://proxy.example.com/elastic``), and to pin the
``accept``/``content-type`` headers for Elasticsearch 8 compatibility.
The client sets those two headers on each request itself, so client-level
defaults are not enough to change them.
"""

from typing import Any, Callable, Dict, Mapping, Optional

from elastic_transport import AsyncTransport, HttpHeaders


class RequestRewritingTransport:
    """
    Wraps a transport and rewrites the request target and headers.

    Only ``perform_request`` is intercepted; everything else (``close``,
    ``node_pool``, sniffing...) goes straight to the wrapped transport.
    """

    def __init__(
        self,
        transport: Any,
        path_prefix: str = "",
        header_overrides: Optional[Dict[str, str]] = None,
    ):
        self._transport = transport
        self.path_prefix = path_prefix
        self.header_overrides = dict(header_overrides or {})

    def _rewrite_headers(self, headers: Any) -> HttpHeaders:
        # Anything that is not a mapping is the client's "unset" sentinel
        rewritten = HttpHeaders(headers) if isinstance(headers, Mapping) else HttpHeaders()
        for name, value in self.header_overrides.items():
            rewritten[name] = value
        return rewritten

    async def perform_request(self, method: str, target: str, **kwargs: Any) -> Any:
        if self.header_overrides:
            kwargs["headers"] = self._rewrite_headers(kwargs.get("headers"))
        return await self._transport.perform_request(
            method, self.path_prefix + target, **kwargs
        )

    def __getattr__(self, name: str) -> Any:
        return getattr(self._transport, name)


def request_rewriting_transport_factory(
    path_prefix: str = "",
    header_overrides: Optional[Dict[str, str]] = None,
    transport_class: Callable[..., Any] = AsyncTransport,
) -> Callable[..., RequestRewritingTransport]:
    """
    Build a ``transport_class`` replacement for the Elasticsearch client.

    The client calls it with its node configs and transport options; the
    real transport is created from those and wrapped.

    Args:
        path_prefix: Prefix to prepend, e.g. "/elastic"
        header_overrides: Headers forced onto every request
        transport_class: Transport to wrap

    Returns:
        Callable with the same signature as the transport constructor
    """
    def factory(*args: Any, **kwargs: Any) -> RequestRewritingTransport:
        return RequestRewritingTransport(
            transport_class(*args, **kwargs),
            path_prefix=path_prefix,
            header_overrides=header_overrides,
        )

    return factory

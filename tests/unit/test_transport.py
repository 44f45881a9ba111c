"""
Unit tests for the request rewriting transport.
"""

from unittest.mock import AsyncMock, Mock

import pytest
from elastic_transport import HttpHeaders

from utils.connection import COMPATIBILITY_MEDIA_TYPE
from utils.transport import RequestRewritingTransport, request_rewriting_transport_factory


COMPAT_HEADERS = {
    "accept": COMPATIBILITY_MEDIA_TYPE,
    "content-type": COMPATIBILITY_MEDIA_TYPE,
}


@pytest.fixture
def base_transport():
    transport = Mock()
    transport.perform_request = AsyncMock(return_value=("meta", {"acknowledged": True}))
    transport.close = AsyncMock()
    return transport


class TestRequestRewritingTransport:
    """Test cases for RequestRewritingTransport."""

    @pytest.mark.asyncio
    async def test_prefix_prepended(self, base_transport):
        transport = RequestRewritingTransport(base_transport, "/elastic")

        result = await transport.perform_request(
            "GET", "/_cat/indices?format=json", headers={"accept": "application/json"}
        )

        assert result == ("meta", {"acknowledged": True})
        base_transport.perform_request.assert_awaited_once_with(
            "GET", "/elastic/_cat/indices?format=json", headers={"accept": "application/json"}
        )

    @pytest.mark.asyncio
    async def test_per_request_headers_replaced(self, base_transport):
        transport = RequestRewritingTransport(base_transport, header_overrides=COMPAT_HEADERS)
        request_headers = HttpHeaders({
            "accept": "application/vnd.elasticsearch+json; compatible-with=9",
            "content-type": "application/vnd.elasticsearch+json; compatible-with=9",
            "x-opaque-id": "abc",
        })

        await transport.perform_request(
            "POST", "/articles/_search", body={"size": 1}, headers=request_headers
        )

        args, kwargs = base_transport.perform_request.call_args
        assert args == ("POST", "/articles/_search")
        assert kwargs["body"] == {"size": 1}
        sent = kwargs["headers"]
        assert sent["accept"] == COMPATIBILITY_MEDIA_TYPE
        assert sent["content-type"] == COMPATIBILITY_MEDIA_TYPE
        assert sent["x-opaque-id"] == "abc"
        # The caller's headers are not mutated
        assert request_headers["accept"].endswith("compatible-with=9")

    @pytest.mark.asyncio
    async def test_headers_added_when_none_given(self, base_transport):
        transport = RequestRewritingTransport(base_transport, header_overrides=COMPAT_HEADERS)

        await transport.perform_request("GET", "/_cat/shards")

        sent = base_transport.perform_request.call_args[1]["headers"]
        assert dict(sent) == COMPAT_HEADERS

    @pytest.mark.asyncio
    async def test_headers_untouched_without_overrides(self, base_transport):
        transport = RequestRewritingTransport(base_transport, "/elastic")

        await transport.perform_request("GET", "/")

        assert "headers" not in base_transport.perform_request.call_args[1]

    @pytest.mark.asyncio
    async def test_errors_pass_through(self, base_transport):
        base_transport.perform_request.side_effect = ConnectionError("refused")
        transport = RequestRewritingTransport(base_transport, "/elastic")

        with pytest.raises(ConnectionError, match="refused"):
            await transport.perform_request("GET", "/")

    @pytest.mark.asyncio
    async def test_other_attributes_delegated(self, base_transport):
        base_transport.node_pool = "pool"
        transport = RequestRewritingTransport(base_transport, "/elastic")

        await transport.close()

        base_transport.close.assert_awaited_once()
        assert transport.node_pool == "pool"

    def test_factory(self):
        transport_class = Mock(return_value="inner")
        factory = request_rewriting_transport_factory(
            "/elastic", COMPAT_HEADERS, transport_class=transport_class
        )

        transport = factory(["node"], client_meta_service=("es", "9"))

        transport_class.assert_called_once_with(["node"], client_meta_service=("es", "9"))
        assert isinstance(transport, RequestRewritingTransport)
        assert transport.path_prefix == "/elastic"
        assert transport.header_overrides == COMPAT_HEADERS

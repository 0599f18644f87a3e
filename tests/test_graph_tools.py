"""Tests for the graph tools served by the gateway."""

import json

import httpx
import pytest

from codegpt_mcp.core import NO_DATA_PLACEHOLDER, NO_TEXT_PLACEHOLDER

from conftest import API_BASE, json_response


class TestGetCode:
    """Tests for get-code."""

    @pytest.mark.asyncio
    async def test_returns_content_field(self, make_gateway):
        """Test the content field is relayed as a single text block."""
        gateway, stub = await make_gateway(json_response({"content": "def bar(): pass"}))

        result = await gateway.invoke("get-code", {"name": "Foo.bar"})

        assert result.to_dict() == {"content": [{"type": "text", "text": "def bar(): pass"}]}
        assert not result.is_error

    @pytest.mark.asyncio
    async def test_request_shape(self, make_gateway):
        """Test URL, method, headers and body sent to the backend."""
        gateway, stub = await make_gateway(json_response({"content": "x"}))

        await gateway.invoke("get-code", {"name": "Foo.bar", "path": "src/foo.py"})

        assert len(stub.requests) == 1
        request = stub.requests[0]
        assert request.method == "POST"
        assert str(request.url) == f"{API_BASE}/mcp/graphs/get-code"
        assert request.headers["authorization"] == "Bearer test-key"
        assert request.headers["CodeGPT-Org-Id"] == "org-123"
        assert request.headers["accept"] == "application/json"
        assert request.headers["content-type"] == "application/json"
        assert stub.body() == {"graphId": "graph-abc", "name": "Foo.bar", "path": "src/foo.py"}

    @pytest.mark.asyncio
    async def test_empty_content_uses_placeholder(self, make_gateway):
        """Test an empty content field yields the fixed placeholder."""
        gateway, _ = await make_gateway(json_response({"content": ""}))

        result = await gateway.invoke("get-code", {"name": "X"})

        assert result.text == NO_TEXT_PLACEHOLDER

    @pytest.mark.asyncio
    async def test_missing_content_uses_placeholder(self, make_gateway):
        gateway, _ = await make_gateway(json_response({"detail": "not found"}, status_code=404))

        result = await gateway.invoke("get-code", {"name": "X"})

        assert result.text == NO_TEXT_PLACEHOLDER
        assert not result.is_error

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "tool_name",
        ["get-code", "find-direct-connections", "get-usage-dependency-links"],
    )
    async def test_empty_name_rejected_without_request(self, make_gateway, tool_name):
        """Test an empty required name never reaches the backend."""
        gateway, stub = await make_gateway(json_response({"content": "x"}))

        result = await gateway.invoke(tool_name, {"name": ""})

        assert result.is_error
        assert "name is required" in result.text
        assert stub.requests == []

    @pytest.mark.asyncio
    async def test_caller_cannot_override_graph_id(self, make_gateway):
        gateway, stub = await make_gateway(json_response({"content": "x"}))

        await gateway.invoke("get-code", {"name": "X", "graphId": "other-graph"})

        assert stub.body()["graphId"] == "graph-abc"

    @pytest.mark.asyncio
    async def test_identical_calls_give_identical_results(self, make_gateway):
        """Test repeated invocations do not accumulate state."""
        gateway, stub = await make_gateway(json_response({"content": "def bar(): pass"}))

        first = await gateway.invoke("get-code", {"name": "Foo.bar"})
        second = await gateway.invoke("get-code", {"name": "Foo.bar"})

        assert first == second
        assert stub.body(0) == stub.body(1)


class TestOptionalPath:
    """The optional path is omitted from the body, never sent empty."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "tool_name",
        ["get-code", "find-direct-connections", "get-usage-dependency-links"],
    )
    @pytest.mark.parametrize("arguments", [{"name": "X"}, {"name": "X", "path": ""}, {"name": "X", "path": None}])
    async def test_path_key_absent(self, make_gateway, tool_name, arguments):
        gateway, stub = await make_gateway(json_response({"content": "ok"}))

        await gateway.invoke(tool_name, arguments)

        assert stub.body() == {"graphId": "graph-abc", "name": "X"}


class TestConnectionsAndLinks:
    """Tests for find-direct-connections and get-usage-dependency-links."""

    @pytest.mark.asyncio
    async def test_find_direct_connections(self, make_gateway):
        gateway, stub = await make_gateway(json_response({"content": "parents: a\nchildren: b"}))

        result = await gateway.invoke("find-direct-connections", {"name": "Foo"})

        assert result.text == "parents: a\nchildren: b"
        assert stub.requests[0].url.path == "/api/v1/mcp/graphs/find-direct-connections"

    @pytest.mark.asyncio
    async def test_usage_links_placeholder(self, make_gateway):
        gateway, _ = await make_gateway(json_response({"content": None}))

        result = await gateway.invoke("get-usage-dependency-links", {"name": "Foo"})

        assert result.text == NO_DATA_PLACEHOLDER

    @pytest.mark.asyncio
    async def test_structured_content_rendered_as_json(self, make_gateway):
        links = {"src/a.py::Foo": ["src/b.py::bar"]}
        gateway, _ = await make_gateway(json_response({"content": links}))

        result = await gateway.invoke("get-usage-dependency-links", {"name": "Foo"})

        assert json.loads(result.text) == links


class TestSemanticSearch:
    """Tests for nodes-semantic-search and docs-semantic-search."""

    @pytest.mark.asyncio
    async def test_nodes_search_body(self, make_gateway):
        gateway, stub = await make_gateway(json_response({"content": "Foo.bar (0.91)"}))

        result = await gateway.invoke("nodes-semantic-search", {"query": "parse config"})

        assert result.text == "Foo.bar (0.91)"
        assert stub.body() == {"graphId": "graph-abc", "query": "parse config"}

    @pytest.mark.asyncio
    async def test_docs_search_returns_full_body(self, make_gateway):
        """Test docs search echoes the whole JSON body, pretty-printed."""
        payload = {"content": "ignored as a sub-field", "results": [{"doc": "README.md", "score": 0.8}]}
        gateway, _ = await make_gateway(json_response(payload))

        result = await gateway.invoke("docs-semantic-search", {"query": "install"})

        assert result.text == json.dumps(payload, indent=2)

    @pytest.mark.asyncio
    async def test_empty_query_rejected(self, make_gateway):
        gateway, stub = await make_gateway(json_response({}))

        for tool_name in ("nodes-semantic-search", "docs-semantic-search"):
            result = await gateway.invoke(tool_name, {"query": ""})
            assert "query is required" in result.text

        assert stub.requests == []


class TestErrors:
    """Failures become error text, never exceptions."""

    @pytest.mark.asyncio
    async def test_invalid_json_body(self, make_gateway):
        gateway, _ = await make_gateway(lambda request: httpx.Response(502, text="<html>Bad gateway</html>"))

        result = await gateway.invoke("get-code", {"name": "X"})

        assert result.is_error
        assert result.text.startswith("BackendError: Invalid JSON in response (status 502)")

    @pytest.mark.asyncio
    async def test_null_body_is_an_error(self, make_gateway):
        gateway, _ = await make_gateway(lambda request: httpx.Response(200, text="null"))

        result = await gateway.invoke("find-direct-connections", {"name": "X"})

        assert result.is_error
        assert result.text == "BackendError: Empty JSON body (status 200)"

    @pytest.mark.asyncio
    async def test_network_failure(self, make_gateway):
        def refuse(request):
            raise httpx.ConnectError("Connection refused", request=request)

        gateway, _ = await make_gateway(refuse)

        result = await gateway.invoke("nodes-semantic-search", {"query": "q"})

        assert result.is_error
        assert result.text == "NetworkError: Connection refused"

    @pytest.mark.asyncio
    async def test_unknown_tool(self, make_gateway):
        gateway, stub = await make_gateway(json_response({}))

        result = await gateway.invoke("delete-graph", {})

        assert result.text == "ValidationError: Unknown tool: delete-graph"
        assert stub.requests == []

"""Tests for the MCP server dispatch."""

import json

import pytest

from mdsect_mcp.server import call_tool, list_tools


class TestServer:
    @pytest.mark.asyncio
    async def test_list_tools(self):
        tools = await list_tools()
        names = {tool.name for tool in tools}
        assert names == {"get_outline", "dump_tree", "query_files", "query_local", "query_remote"}

    @pytest.mark.asyncio
    async def test_query_files(self, tmp_path, nested_markdown):
        path = tmp_path / "abc.md"
        path.write_text(nested_markdown)
        content = await call_tool("query_files", {"file_paths": [str(path)], "patterns": ["C"]})
        result = json.loads(content[0].text)
        assert result["matched_files"] == [str(path)]
        assert result["result"].endswith("# C")

    @pytest.mark.asyncio
    async def test_unknown_tool(self):
        content = await call_tool("nope", {})
        assert json.loads(content[0].text) == {"error": "Unknown tool: nope"}

    @pytest.mark.asyncio
    async def test_missing_argument_reported(self):
        content = await call_tool("get_outline", {})
        assert "error" in json.loads(content[0].text)

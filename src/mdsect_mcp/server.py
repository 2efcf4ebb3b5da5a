"""MCP server for pulling heading-addressed sections out of markdown documents."""

import asyncio
import json
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from .tools.get_outline import get_outline as do_get_outline, dump_tree as do_dump_tree
from .tools.query_files import query_files as do_query_files
from .tools.query_local import query_local as do_query_local
from .tools.query_remote import query_remote as do_query_remote


PATTERNS_SCHEMA = {
    "type": "array",
    "items": {"type": "string"},
    "description": "Heading title patterns, one per level from the top (regex; '*' matches anything)",
}

# Create MCP server
server = Server("mdsect-mcp")


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="get_outline",
            description="""Get the heading outline of a markdown file.

Returns every heading as a nested tree (level, title, children).
Use it to find the heading path before querying a section.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "file_path": {
                        "type": "string",
                        "description": "Path to the markdown file",
                    },
                },
                "required": ["file_path"],
            },
        ),
        Tool(
            name="dump_tree",
            description="""Dump a markdown file's full heading tree as text.

Each heading is printed with its nesting depth followed by its content tokens.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "file_path": {
                        "type": "string",
                        "description": "Path to the markdown file",
                    },
                },
                "required": ["file_path"],
            },
        ),
        Tool(
            name="query_files",
            description="""Extract the section at a heading path from one or more files.

The first pattern matches top-level headings, the next one their
sub-headings, and so on. The matched section is returned with all of its
sub-sections. Files without a match are left out of the result.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "file_paths": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "Paths of markdown files",
                    },
                    "patterns": PATTERNS_SCHEMA,
                },
                "required": ["file_paths", "patterns"],
            },
        ),
        Tool(
            name="query_local",
            description="""Extract the section at a heading path from every document in a directory.

Crawls .md, .markdown, .mdx and .txt files, respecting .gitignore and
skipping sensitive files and symlinks.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "path": {
                        "type": "string",
                        "description": "Directory to search",
                    },
                    "patterns": PATTERNS_SCHEMA,
                    "max_depth": {
                        "type": "integer",
                        "description": "Maximum directory depth to crawl (default: 5)",
                        "default": 5,
                    },
                    "include_hidden": {
                        "type": "boolean",
                        "description": "Whether to include hidden directories (starting with .)",
                        "default": False,
                    },
                    "follow_symlinks": {
                        "type": "boolean",
                        "description": "Whether to follow symbolic links (default: false for safety)",
                        "default": False,
                    },
                },
                "required": ["path", "patterns"],
            },
        ),
        Tool(
            name="query_remote",
            description="""Extract the section at a heading path from a file in a GitHub repository.

- Public repositories need no token
- Private repositories use the GITHUB_TOKEN environment variable
- Blocked in local-only mode (MDSECT_LOCAL_ONLY=true)""",
            inputSchema={
                "type": "object",
                "properties": {
                    "url": {
                        "type": "string",
                        "description": "GitHub repository URL or owner/repo string",
                    },
                    "file_path": {
                        "type": "string",
                        "description": "Path of the file within the repository",
                    },
                    "patterns": PATTERNS_SCHEMA,
                },
                "required": ["url", "file_path", "patterns"],
            },
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "get_outline":
            result = do_get_outline(file_path=arguments["file_path"])
        elif name == "dump_tree":
            result = do_dump_tree(file_path=arguments["file_path"])
        elif name == "query_files":
            result = do_query_files(
                file_paths=arguments["file_paths"],
                patterns=arguments["patterns"],
            )
        elif name == "query_local":
            result = do_query_local(
                path=arguments["path"],
                patterns=arguments["patterns"],
                max_depth=arguments.get("max_depth", 5),
                include_hidden=arguments.get("include_hidden", False),
                follow_symlinks=arguments.get("follow_symlinks", False),
            )
        elif name == "query_remote":
            result = await do_query_remote(
                url=arguments["url"],
                file_path=arguments["file_path"],
                patterns=arguments["patterns"],
            )
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except Exception as e:
        error_result = {"error": str(e)}
        return [TextContent(type="text", text=json.dumps(error_result, indent=2))]


async def run_server():
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def main():
    """Entry point for the MCP server."""
    asyncio.run(run_server())


if __name__ == "__main__":
    main()

"""MCP tool implementations.

Each tool lives in its own module; import the function from there.
"""

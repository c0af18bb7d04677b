"""MCP server — exposes the named operations as tools (``rosterctl[mcp]`` extra)."""

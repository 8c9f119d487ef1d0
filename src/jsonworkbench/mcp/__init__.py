"""MCP server for JSON Workbench."""

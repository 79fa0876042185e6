"""Output and settings helpers shared by the CLI and the MCP server."""

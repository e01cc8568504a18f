"""Domain modules exposing ``register() -> (tools, handlers)`` for the MCP server."""

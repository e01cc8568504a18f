"""sentry-selfhosted-mcp: MCP tools for self-hosted Sentry instances."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("sentry-selfhosted-mcp")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

from sentry_selfhosted_mcp.config import ConfigError, SentryConfig, load_config

__all__ = ["ConfigError", "SentryConfig", "__version__", "load_config"]

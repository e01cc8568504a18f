"""Command-line entry point for the Sentry MCP server.

Usage:
    sentry-selfhosted-mcp                                   # configuration from the environment
    sentry-selfhosted-mcp --url https://sentry.example.com --token sntrys_... --org acme
    sentry-selfhosted-mcp --log-file /tmp/sentry-mcp.log --log-level DEBUG
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import click

from sentry_selfhosted_mcp import __version__
from sentry_selfhosted_mcp.config import ConfigError, load_config
from sentry_selfhosted_mcp.logging import setup_logging


@click.command()
@click.version_option(version=__version__, prog_name="sentry-selfhosted-mcp")
@click.option("--url", envvar="SENTRY_URL", default=None, help="Base URL of the Sentry instance [env: SENTRY_URL]")
@click.option("--token", envvar="SENTRY_AUTH_TOKEN", default=None, help="Sentry auth token [env: SENTRY_AUTH_TOKEN]")
@click.option(
    "--org",
    envvar="SENTRY_ORG_SLUG",
    default=None,
    help="Organization slug; inferred from an org auth token if omitted [env: SENTRY_ORG_SLUG]",
)
@click.option(
    "--log-level",
    envvar="SENTRY_MCP_LOG_LEVEL",
    default="INFO",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level for stderr/file logs",
)
@click.option(
    "--log-file",
    envvar="SENTRY_MCP_LOG_FILE",
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write JSONL logs to this file (rotated at 5MB)",
)
def main(url: str | None, token: str | None, org: str | None, log_level: str, log_file: Path | None) -> None:
    """Serve self-hosted Sentry tools over MCP (stdio)."""
    logger = setup_logging(log_file, level=log_level.upper())
    try:
        config = load_config(url, token, org)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    from sentry_selfhosted_mcp.mcp_server import run

    try:
        asyncio.run(run(config))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")


if __name__ == "__main__":
    main()

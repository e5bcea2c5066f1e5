#!/usr/bin/env python3
"""
Main CLI entry point for the Subtrack mock endpoint.
"""

import asyncio
import os
import sys

import click
import httpx
import uvicorn

from subtrack import __version__
from subtrack.config import settings
from subtrack.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="subtrack")
def cli() -> None:
    """Subtrack CLI - run the mock GraphQL endpoint and talk to it."""
    pass


@cli.command()
@click.option("--host", default=settings.api_host, help="Host to bind to")
@click.option("--port", default=settings.api_port, type=int, help="Port to bind to")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Subtrack API server."""
    # The app module configures logging from settings when it is imported:
    # in-process via the shared settings object, under --reload via the env
    settings.log_level = log_level
    os.environ["SUBTRACK_LOG_LEVEL"] = log_level
    if log_level == "debug":
        settings.debug = True
        os.environ["SUBTRACK_DEBUG"] = "true"

    configure_logging(debug=settings.debug, level=log_level)

    logger.info("Starting Subtrack API server", host=host, port=port, reload=reload)

    try:
        if reload:
            uvicorn.run(
                "subtrack.api.app:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
            )
        else:
            from subtrack.api.app import app

            uvicorn.run(app, host=host, port=port, log_level=log_level)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("print-schema")
def print_schema_command() -> None:
    """Print the GraphQL schema in SDL form."""
    from subtrack.graphql.schema import print_schema

    click.echo(print_schema())


endpoint_option = click.option(
    "--endpoint",
    default=None,
    help=f"GraphQL endpoint (default: {settings.client_endpoint})",
)


@cli.command("list")
@endpoint_option
def list_command(endpoint: str | None) -> None:
    """List subscriptions from a running server."""
    from subtrack.client import SubscriptionClient

    async def fetch() -> list[dict]:
        async with SubscriptionClient(endpoint) as client:
            return await client.subscriptions()

    for sub in _run_client(fetch):
        click.echo(
            f"{sub['id']}\t{sub['name']}\t{sub['price']:.2f}\t{sub['category']}\t{sub['renewalDate']}"
        )


@cli.command()
@endpoint_option
def categories(endpoint: str | None) -> None:
    """List distinct categories from a running server."""
    from subtrack.client import SubscriptionClient

    async def fetch() -> list[str]:
        async with SubscriptionClient(endpoint) as client:
            return await client.categories()

    for category in _run_client(fetch):
        click.echo(category)


def _run_client(fetch):
    from subtrack.client import GraphQLClientError

    try:
        return asyncio.run(fetch())
    except (GraphQLClientError, httpx.HTTPError) as e:
        raise click.ClickException(str(e)) from e


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()

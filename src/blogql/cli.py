#!/usr/bin/env python3
"""
Main CLI entry point for the BlogQL server.
"""

import os
import sys

import click
import uvicorn

from blogql import __version__
from blogql.config import Settings
from blogql.errors import DataLoadError
from blogql.logging import configure_logging, get_logger

logger = get_logger(__name__)

LOG_LEVELS = ["debug", "info", "warning", "error"]


@click.group()
@click.version_option(version=__version__, prog_name="blogql")
def cli() -> None:
    """BlogQL CLI - serve the blog graph and check data sets."""
    pass


@cli.command()
@click.option(
    "--host",
    default=None,
    help="Host to bind to (default: BLOGQL_API_HOST, 0.0.0.0)",
)
@click.option(
    "--port",
    default=None,
    type=int,
    envvar="PORT",
    help="Port to bind to (default: $PORT, then BLOGQL_API_PORT, 3000)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development (default: BLOGQL_API_RELOAD)",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Log level (default: BLOGQL_LOG_LEVEL, info)",
)
@click.option(
    "--data-dir",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory holding posts.json, users.json and comments.json",
)
def serve(
    host: str | None,
    port: int | None,
    reload: bool,
    log_level: str | None,
    data_dir: str | None,
) -> None:
    """Start the BlogQL API server."""
    # Read the environment now rather than at import time
    app_settings = Settings()

    host = host or app_settings.api_host
    port = port if port is not None else app_settings.api_port
    reload = reload or app_settings.api_reload
    log_level = (log_level or app_settings.log_level).lower()
    # Console output only for debug level or an explicit BLOGQL_DEBUG
    debug = log_level == "debug" or (
        "debug" in app_settings.model_fields_set and app_settings.debug
    )

    configure_logging(debug=debug, log_level=log_level)

    logger.info(
        "Starting BlogQL API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
        environment=app_settings.environment,
    )

    # The app factory builds its own Settings, also under reload
    os.environ["BLOGQL_LOG_LEVEL"] = log_level
    os.environ["BLOGQL_DEBUG"] = "true" if debug else "false"
    if data_dir is not None:
        os.environ["BLOGQL_DATA_DIR"] = data_dir

    try:
        uvicorn.run(
            "blogql.api.app:build_default_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=False,
        )
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as e:
        logger.error("Server failed to start", error=str(e))
        sys.exit(1)


@cli.command("check-data")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory to check (default: bundled sample data)",
)
def check_data(data_dir: str | None) -> None:
    """Load a data set and report collection sizes."""
    from blogql.store.loader import load_store

    try:
        store = load_store(data_dir)
    except DataLoadError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"posts: {store.post_count()}")
    click.echo(f"users: {store.user_count()}")
    click.echo(f"comments: {len(store.comments())}")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()

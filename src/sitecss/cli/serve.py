"""CLI command: sitecss serve -- run the export web app."""

from __future__ import annotations

from dataclasses import replace

import click

from sitecss.cli.options import config_from_options, engine_options


@click.command()
@engine_options
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=5000, type=int, help="Port to bind to")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(
    root: str,
    primary_engine: str,
    secondary_engine: str,
    tiers: tuple[str, ...],
    allow_download: bool,
    timeout: float,
    no_reset: bool,
    host: str,
    port: int,
    debug: bool,
) -> None:
    """Start the stylesheet export web server."""
    from sitecss.sources import DirectorySiteSource
    from sitecss.web.app import create_app

    config = replace(
        config_from_options(primary_engine, secondary_engine, tiers, allow_download, timeout, no_reset),
        host=host,
        port=port,
    )
    app = create_app(DirectorySiteSource(root), config)
    click.echo(f"Starting sitecss on {config.host}:{config.port}")
    app.run(host=config.host, port=config.port, debug=debug)

"""CLI command: sitecss build -- write one site's stylesheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from sitecss.cli.options import config_from_options, engine_options
from sitecss.errors import CompilationError, SiteNotFoundError
from sitecss.pipeline import CSSExportPipeline
from sitecss.sources import DirectorySiteSource


@click.command()
@click.argument("site_id")
@engine_options
@click.option("-o", "--output", default=None, type=click.Path(dir_okay=False), help="Output file (default: stdout)")
def build(
    site_id: str,
    root: str,
    primary_engine: str,
    secondary_engine: str,
    tiers: tuple[str, ...],
    allow_download: bool,
    timeout: float,
    no_reset: bool,
    output: str | None,
) -> None:
    """Compile the stylesheet for SITE_ID."""
    config = config_from_options(primary_engine, secondary_engine, tiers, allow_download, timeout, no_reset)
    pipeline = CSSExportPipeline(DirectorySiteSource(root), config)

    try:
        css = pipeline.export(site_id)
    except SiteNotFoundError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    except CompilationError as exc:
        click.echo(f"Compilation failed: {exc}", err=True)
        for failure in exc.failures:
            click.echo(f"  {failure.tier}: {failure.error}", err=True)
        sys.exit(1)

    if output is None:
        click.echo(css, nl=False)
        return
    Path(output).write_text(css, encoding="utf-8")
    click.echo(f"Wrote {len(css)} bytes to {output}", err=True)

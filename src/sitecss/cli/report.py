"""CLI command: sitecss report -- JSON coverage report for one site."""

from __future__ import annotations

import json
import sys
from datetime import datetime, timezone

import click

from sitecss.errors import SiteNotFoundError
from sitecss.extract import extract_classes
from sitecss.pipeline import CSSExportPipeline
from sitecss.report import build_report
from sitecss.sources import DirectorySiteSource
from sitecss.tiers import FallbackCompiler


@click.command()
@click.argument("site_id")
@click.option(
    "--root",
    required=True,
    type=click.Path(exists=True, file_okay=False),
    help="Directory holding one sub-directory per site",
)
def report(site_id: str, root: str) -> None:
    """Categorize every class used by SITE_ID and list likely gaps."""
    pipeline = CSSExportPipeline(DirectorySiteSource(root), tiers=[FallbackCompiler()])
    try:
        content = pipeline.gather(site_id)
    except SiteNotFoundError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    extraction = extract_classes(content.markup_blobs())
    coverage = build_report(
        extraction.classes,
        site_id=site_id,
        generated_at=datetime.now(timezone.utc),
    )
    click.echo(json.dumps(coverage.to_dict(), indent=2))

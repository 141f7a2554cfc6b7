"""CLI command: sitecss classes -- list class tokens found in files."""

from __future__ import annotations

from pathlib import Path

import click

from sitecss.extract import extract_classes


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
def classes(files: tuple[str, ...]) -> None:
    """Print the class tokens extracted from FILES, one per line."""
    result = extract_classes([Path(f).read_text(encoding="utf-8") for f in files])
    for token in result.classes:
        click.echo(token)

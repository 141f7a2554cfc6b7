"""sitecss CLI entry point: Click group with subcommands."""

import logging

import click

from sitecss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="sitecss")
@click.option("-v", "--verbose", is_flag=True, help="Log tier attempts and failures")
def cli(verbose: bool) -> None:
    """sitecss - compile site utility classes into a standalone stylesheet."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from sitecss.cli.build import build  # noqa: E402
from sitecss.cli.classes import classes  # noqa: E402
from sitecss.cli.report import report  # noqa: E402
from sitecss.cli.serve import serve  # noqa: E402

cli.add_command(build)
cli.add_command(classes)
cli.add_command(report)
cli.add_command(serve)

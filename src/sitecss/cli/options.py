"""Options shared by the commands that compile a site."""

from __future__ import annotations

from typing import Callable

import click

from sitecss.config import SiteCSSConfig

TIER_NAMES = ("primary", "secondary", "fallback")


def engine_options(func: Callable) -> Callable:
    """Attach the engine/tier options to a command."""
    options = [
        click.option(
            "--root",
            required=True,
            type=click.Path(exists=True, file_okay=False),
            help="Directory holding one sub-directory per site",
        ),
        click.option("--primary-engine", default="", help="Path to the v3 engine binary"),
        click.option("--secondary-engine", default="", help="Path to the v4 engine binary"),
        click.option(
            "--tier",
            "tiers",
            multiple=True,
            type=click.Choice(TIER_NAMES),
            help="Enable a tier (repeatable, tried in the given order)",
        ),
        click.option("--allow-download", is_flag=True, help="Download missing engine binaries"),
        click.option("--timeout", default=60.0, type=float, help="Engine timeout in seconds"),
        click.option("--no-reset", is_flag=True, help="Omit the layered base reset"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def config_from_options(
    primary_engine: str,
    secondary_engine: str,
    tiers: tuple[str, ...],
    allow_download: bool,
    timeout: float,
    no_reset: bool,
) -> SiteCSSConfig:
    return SiteCSSConfig(
        primary_engine=primary_engine,
        secondary_engine=secondary_engine,
        tiers=tiers or TIER_NAMES,
        allow_download=allow_download,
        engine_timeout=timeout,
        include_reset=not no_reset,
    )

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


def _default_cache_dir() -> str:
    return str(Path.home() / ".cache" / "sitecss")


@dataclass(frozen=True)
class SiteCSSConfig:
    primary_engine: str = ""  # explicit path to the Tailwind v3 CLI
    secondary_engine: str = ""  # explicit path to the Tailwind v4 CLI
    primary_version: str = "3.4.17"
    secondary_version: str = "4.1.11"
    allow_download: bool = False
    cache_dir: str = field(default_factory=_default_cache_dir)
    engine_timeout: float = 60.0  # seconds, per engine run
    base_source_paths: tuple[str, ...] = (
        "node_modules/tailwindcss/index.css",
    )
    tiers: tuple[str, ...] = ("primary", "secondary", "fallback")
    include_reset: bool = True
    host: str = "127.0.0.1"
    port: int = 5000

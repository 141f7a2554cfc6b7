"""Compilation tiers and the first-success-wins chain."""

from __future__ import annotations

from sitecss.config import SiteCSSConfig
from sitecss.tiers.base import CompileRequest, Tier
from sitecss.tiers.binary import EngineBinary
from sitecss.tiers.chain import TierChain
from sitecss.tiers.fallback import FallbackCompiler
from sitecss.tiers.primary import PrimaryEngine
from sitecss.tiers.secondary import BaseSourceCache, SecondaryEngine

__all__ = [
    "BaseSourceCache",
    "CompileRequest",
    "EngineBinary",
    "FallbackCompiler",
    "PrimaryEngine",
    "SecondaryEngine",
    "Tier",
    "TierChain",
    "build_tiers",
]

# One cache per process; the base source never changes once read.
_BASE_SOURCE_CACHES: dict[tuple[str, ...], BaseSourceCache] = {}


def build_tiers(config: SiteCSSConfig) -> list[Tier]:
    """Instantiate the tiers named in ``config.tiers``, in that order."""
    tiers: list[Tier] = []
    for name in config.tiers:
        if name == "primary":
            tiers.append(PrimaryEngine.from_config(config))
        elif name == "secondary":
            cache = _BASE_SOURCE_CACHES.setdefault(
                config.base_source_paths, BaseSourceCache(config.base_source_paths)
            )
            tiers.append(SecondaryEngine.from_config(config, cache))
        elif name == "fallback":
            tiers.append(FallbackCompiler())
        else:
            raise ValueError(f"Unknown tier: {name!r}")
    return tiers

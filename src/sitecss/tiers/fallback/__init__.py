"""Tier 3 fallback rule compiler."""

from sitecss.tiers.fallback.arbitrary import match_arbitrary, resolve_arbitrary
from sitecss.tiers.fallback.compiler import DEFAULT_MATCHERS, FallbackCompiler
from sitecss.tiers.fallback.static import STATIC_UTILITIES

__all__ = [
    "DEFAULT_MATCHERS",
    "FallbackCompiler",
    "STATIC_UTILITIES",
    "match_arbitrary",
    "resolve_arbitrary",
]

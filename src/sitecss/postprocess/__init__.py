"""Post-processing chain applied to secondary-engine output."""

from __future__ import annotations

from typing import Callable

from sitecss.postprocess.layers import remove_layers
from sitecss.postprocess.media import normalize_media_ranges
from sitecss.postprocess.nesting import flatten_nesting, resolve_selector
from sitecss.postprocess.specificity import strip_specificity_hack

__all__ = [
    "POSTPROCESS_CHAIN",
    "flatten_nesting",
    "normalize_media_ranges",
    "postprocess",
    "remove_layers",
    "resolve_selector",
    "strip_specificity_hack",
]

POSTPROCESS_CHAIN: tuple[Callable[[str], str], ...] = (
    flatten_nesting,
    remove_layers,
    normalize_media_ranges,
    strip_specificity_hack,
)


def postprocess(css: str) -> str:
    """Run every pass in order. Raises PostProcessError on unparseable input."""
    for step in POSTPROCESS_CHAIN:
        css = step(css)
    return css

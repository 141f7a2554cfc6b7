"""Inline ``<style>`` block extraction and design-token filtering.

Design-token custom properties (brand/neutral/semantic/custom colors and the
heading/body/mono fonts) are owned by the design-token section, so they are
removed from any ``:root`` block found in page markup.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable

__all__ = [
    "StyleExtraction",
    "collect_style_css",
    "combine_css",
    "extract_and_filter",
    "filter_design_tokens",
    "is_design_token",
]

_STYLE_RE = re.compile(r"<style[^>]*>(?P<body>[\s\S]*?)</style>", re.IGNORECASE)
_ROOT_RE = re.compile(r":root\s*\{(?P<body>[\s\S]*?)\}")
_VAR_DECL_RE = re.compile(r"^(?P<name>--[\w-]+)\s*:")

_DESIGN_TOKEN_RES = tuple(
    re.compile(pattern)
    for pattern in (
        r"--color-brand-\w+",
        r"--color-neutral-\w+",
        r"--color-semantic-\w+",
        r"--color-custom-\w+",
        r"--font-heading",
        r"--font-body",
        r"--font-mono",
    )
)


@dataclass(frozen=True)
class StyleExtraction:
    custom_css: str
    cleaned_html: str
    filtered_tokens: tuple[str, ...] = field(default_factory=tuple)


def is_design_token(name: str) -> bool:
    return any(pattern.search(name) for pattern in _DESIGN_TOKEN_RES)


def _filter_root_body(body: str, removed: list[str]) -> str:
    kept: list[str] = []
    for line in body.split("\n"):
        match = _VAR_DECL_RE.match(line.strip())
        if match and is_design_token(match.group("name")):
            removed.append(match.group("name"))
            continue
        kept.append(line)
    filtered = "\n".join(kept).strip()
    if not re.sub(r"[\s{}]", "", filtered):
        return ""
    return filtered


def filter_design_tokens(css: str) -> tuple[str, list[str]]:
    """Strip design-token variables from ``:root`` blocks.

    ``:root`` blocks left empty are dropped entirely. Returns the filtered
    CSS and the names of the removed variables.
    """
    removed: list[str] = []

    def _replace(match: re.Match[str]) -> str:
        filtered = _filter_root_body(match.group("body"), removed)
        return f":root {{\n{filtered}\n}}" if filtered else ""

    processed = _ROOT_RE.sub(_replace, css)
    processed = re.sub(r"\n{3,}", "\n\n", processed).strip()
    return processed, removed


def extract_and_filter(html: str) -> StyleExtraction:
    """Pull every ``<style>`` body out of ``html`` and filter design tokens."""
    blocks: list[str] = []

    def _collect(match: re.Match[str]) -> str:
        blocks.append(match.group("body").strip())
        return ""

    cleaned = _STYLE_RE.sub(_collect, html).strip()
    css = "\n\n".join(block for block in blocks if block)
    if not css:
        return StyleExtraction(custom_css="", cleaned_html=cleaned)
    processed, removed = filter_design_tokens(css)
    return StyleExtraction(custom_css=processed, cleaned_html=cleaned, filtered_tokens=tuple(removed))


def _is_handled_elsewhere(block: str) -> bool:
    """Theme-config scripts and engine directives are not page CSS."""
    stripped = block.lstrip()
    return (
        "tailwind.config" in block
        or stripped.startswith("@import")
        or stripped.startswith("@tailwind")
    )


def collect_style_css(markups: Iterable[str]) -> str:
    """Collect filtered ``<style>`` CSS from many markup strings.

    Blocks are deduplicated, keeping first-seen order.
    """
    seen: dict[str, None] = {}
    for markup in markups:
        if "<style" not in markup.lower():
            continue
        for match in _STYLE_RE.finditer(markup):
            body = match.group("body").strip()
            if not body or _is_handled_elsewhere(body):
                continue
            filtered, _ = filter_design_tokens(body)
            if filtered:
                seen.setdefault(filtered, None)
    return "\n\n".join(seen)


def combine_css(*blocks: str | None) -> str:
    """Join non-empty CSS strings with blank lines, dropping exact duplicates."""
    seen: dict[str, None] = {}
    for block in blocks:
        if block and block.strip():
            seen.setdefault(block.strip(), None)
    return "\n\n".join(seen)

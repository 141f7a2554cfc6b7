"""Arbitrary-value matcher: ``property-[value]`` tokens, with or without a state prefix."""

from __future__ import annotations

import re

from sitecss.grammar.utility import ParsedUtility
from sitecss.grammar.values import (
    is_color_value,
    is_image_value,
    is_size_value,
    split_type_hint,
    unescape_arbitrary,
)
from sitecss.model.css import CSSRule
from sitecss.tiers.fallback.matchers import (
    BORDER_SIDES,
    INSET_PROPERTIES,
    RADIUS_CORNERS,
    SIZE_PROPERTIES,
    SPACING_SIDES,
    Pairs,
    build_rule,
    negate,
)

# Properties that take a single declaration of the value as-is.
_DIRECT = {
    "z": "z-index",
    "grid-cols": "grid-template-columns",
    "grid-rows": "grid-template-rows",
    "aspect": "aspect-ratio",
    "leading": "line-height",
    "tracking": "letter-spacing",
    "shadow": "box-shadow",
    "duration": "transition-duration",
    "content": "content",
}

_SPACING_RE = re.compile(r"^(?P<kind>[mp])(?P<side>[trblxyse]?)$")
_ROUNDED_RE = re.compile(r"^rounded(?:-(?P<corner>tl|tr|br|bl|ss|se|es|ee|t|r|b|l|s|e))?$")
_BORDER_RE = re.compile(r"^border(?:-(?P<side>[trblxy]))?$")

_NEGATABLE = frozenset({"m", "inset", "top", "right", "bottom", "left", "z"})

# Shorthand used when an arbitrary value has more than one component.
_SHORTHANDS = {
    "m": "margin",
    "mx": "margin-inline",
    "my": "margin-block",
    "p": "padding",
    "px": "padding-inline",
    "py": "padding-block",
    "inset": "inset",
    "inset-x": "inset-inline",
    "inset-y": "inset-block",
}


def split_components(value: str) -> list[str]:
    """Split on spaces outside parentheses: ``0 calc(1px + 2px)`` is two parts."""
    parts: list[str] = []
    current: list[str] = []
    depth = 0
    for ch in value:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(depth - 1, 0)
        elif ch == " " and depth == 0:
            if current:
                parts.append("".join(current))
                current = []
            continue
        current.append(ch)
    if current:
        parts.append("".join(current))
    return parts


def _background(value: str, hint: str | None) -> Pairs:
    if hint in ("image", "url") or (hint is None and is_image_value(value)):
        return [("background-image", value)]
    if hint in ("length", "percentage"):
        return [("background-size", value)]
    return [("background-color", value)]


def _text(value: str, hint: str | None) -> Pairs:
    if hint == "color":
        return [("color", value)]
    if hint in ("length", "percentage") or (hint is None and not is_color_value(value) and is_size_value(value)):
        return [("font-size", value)]
    return [("color", value)]


def _border(side: str, value: str, hint: str | None) -> Pairs:
    is_width = hint == "length" or (hint is None and value[:1].isdigit())
    suffix = "width" if is_width else "color"
    return [(f"border{edge}-{suffix}", value) for edge in BORDER_SIDES[side]]


def _font(value: str, hint: str | None) -> Pairs:
    if hint == "number" or (hint is None and value.isdigit()):
        return [("font-weight", value)]
    return [("font-family", value)]


def _opacity(value: str) -> Pairs:
    if value.endswith("%"):
        try:
            return [("opacity", f"{float(value[:-1]) / 100:g}")]
        except ValueError:
            return []
    return [("opacity", value)]


def resolve_arbitrary(prop: str, value: str, hint: str | None = None) -> Pairs:
    """Map an arbitrary ``prop-[value]`` pair to declarations; empty if unknown."""
    if prop in _SHORTHANDS and len(split_components(value)) > 1:
        return [(_SHORTHANDS[prop], value)]
    if prop in SIZE_PROPERTIES:
        return [(css_prop, value) for css_prop in SIZE_PROPERTIES[prop]]
    if prop in INSET_PROPERTIES:
        return [(css_prop, value) for css_prop in INSET_PROPERTIES[prop]]
    if prop in _DIRECT:
        return [(_DIRECT[prop], value)]
    match = _SPACING_RE.match(prop)
    if match:
        kind = "margin" if match.group("kind") == "m" else "padding"
        return [(f"{kind}-{side}", value) for side in SPACING_SIDES[match.group("side")]]
    if prop in ("gap", "gap-x", "gap-y"):
        return [({"gap": "gap", "gap-x": "column-gap", "gap-y": "row-gap"}[prop], value)]
    match = _ROUNDED_RE.match(prop)
    if match:
        return [(css_prop, value) for css_prop in RADIUS_CORNERS[match.group("corner") or ""]]
    match = _BORDER_RE.match(prop)
    if match:
        return _border(match.group("side") or "", value, hint)
    if prop == "bg":
        return _background(value, hint)
    if prop == "text":
        return _text(value, hint)
    if prop == "font":
        return _font(value, hint)
    if prop == "opacity":
        return _opacity(value)
    return []


def match_arbitrary(parsed: ParsedUtility) -> CSSRule | None:
    """Compile ``w-[320px]``, ``hover:bg-[#ff0000]``, ``-mt-[3px]`` and friends."""
    if not parsed.arbitrary:
        return None
    hint, raw = split_type_hint(parsed.value)
    value = unescape_arbitrary(raw).strip()
    if not value:
        return None
    prop = parsed.property
    if parsed.negative:
        key = "m" if _SPACING_RE.match(prop) and prop.startswith("m") else prop
        if key not in _NEGATABLE and prop not in INSET_PROPERTIES:
            return None
        if len(split_components(value)) > 1:
            return None
        value = negate(value)
    pairs = resolve_arbitrary(prop, value, hint)
    if not pairs:
        return None
    return build_rule(parsed, pairs)

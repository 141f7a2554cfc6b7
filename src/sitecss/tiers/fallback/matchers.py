"""Shape matchers for scaled utilities.

Each matcher tests one structural shape of ``ParsedUtility.base`` and either
returns a rule or None. Matchers test distinct property prefixes, so at most
one of them can match a given token; the compiler still stops at the first.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from sitecss.grammar.tables import (
    BORDER_RADIUS,
    COLOR_PALETTE,
    COLOR_PROPERTIES,
    FONT_SIZES,
    FONT_WEIGHTS,
    LETTER_SPACING,
    LINE_HEIGHTS,
    MAX_WIDTHS,
    NAMED_COLORS,
    SHADOWS,
    SPACING,
)
from sitecss.grammar.utility import ParsedUtility, state_selector
from sitecss.grammar.values import format_alpha, rgba
from sitecss.model.css import CSSRule, format_declarations
from sitecss.tiers.fallback.static import STATIC_UTILITIES

Matcher = Callable[[ParsedUtility], Optional[CSSRule]]
Pairs = list[tuple[str, str]]

# ---------------------------------------------------------------------------
# Shared side/corner maps (also used by the arbitrary-value matcher)
# ---------------------------------------------------------------------------

SPACING_SIDES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "": ("top", "right", "bottom", "left"),
    "t": ("top",),
    "r": ("right",),
    "b": ("bottom",),
    "l": ("left",),
    "x": ("left", "right"),
    "y": ("top", "bottom"),
    "s": ("inline-start",),
    "e": ("inline-end",),
})

RADIUS_CORNERS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "": ("border-radius",),
    "t": ("border-top-left-radius", "border-top-right-radius"),
    "r": ("border-top-right-radius", "border-bottom-right-radius"),
    "b": ("border-bottom-right-radius", "border-bottom-left-radius"),
    "l": ("border-top-left-radius", "border-bottom-left-radius"),
    "tl": ("border-top-left-radius",),
    "tr": ("border-top-right-radius",),
    "br": ("border-bottom-right-radius",),
    "bl": ("border-bottom-left-radius",),
    "s": ("border-start-start-radius", "border-end-start-radius"),
    "e": ("border-start-end-radius", "border-end-end-radius"),
    "ss": ("border-start-start-radius",),
    "se": ("border-start-end-radius",),
    "es": ("border-end-start-radius",),
    "ee": ("border-end-end-radius",),
})

BORDER_SIDES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "": ("",),
    "t": ("-top",),
    "r": ("-right",),
    "b": ("-bottom",),
    "l": ("-left",),
    "x": ("-left", "-right"),
    "y": ("-top", "-bottom"),
})

INSET_PROPERTIES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "inset": ("top", "right", "bottom", "left"),
    "inset-x": ("left", "right"),
    "inset-y": ("top", "bottom"),
    "top": ("top",),
    "right": ("right",),
    "bottom": ("bottom",),
    "left": ("left",),
    "start": ("inset-inline-start",),
    "end": ("inset-inline-end",),
})

SIZE_PROPERTIES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "w": ("width",),
    "h": ("height",),
    "min-w": ("min-width",),
    "min-h": ("min-height",),
    "max-w": ("max-width",),
    "max-h": ("max-height",),
    "size": ("width", "height"),
})


def build_rule(parsed: ParsedUtility, pairs: Pairs, suffix: str = "") -> CSSRule:
    """Rule for ``parsed`` with its state selector plus an optional suffix."""
    return CSSRule(
        selector=state_selector(parsed.raw, parsed.state) + suffix,
        declarations=format_declarations(pairs),
    )


def negate(value: str) -> str:
    """Negate a length: ``1rem`` -> ``-1rem``; zero stays zero."""
    if value in ("0", "0px"):
        return value
    if value.startswith("-"):
        return value[1:]
    if value[0].isdigit() or value[0] == ".":
        return f"-{value}"
    return f"calc({value} * -1)"


def fraction_percent(numerator: str, denominator: str) -> str | None:
    if int(denominator) == 0:
        return None
    percent = f"{int(numerator) / int(denominator) * 100:.6f}".rstrip("0").rstrip(".")
    return f"{percent}%"


_FRACTION_RE = re.compile(r"^(?P<num>\d+)/(?P<den>\d+)$")


def _scale_or_fraction(value: str) -> str | None:
    if value in SPACING:
        return SPACING[value]
    match = _FRACTION_RE.match(value)
    if match:
        return fraction_percent(match.group("num"), match.group("den"))
    if value == "full":
        return "100%"
    if value == "auto":
        return "auto"
    return None


# ---------------------------------------------------------------------------
# Matchers
# ---------------------------------------------------------------------------


def match_static(parsed: ParsedUtility) -> CSSRule | None:
    if parsed.negative:
        return None
    declarations = STATIC_UTILITIES.get(parsed.base)
    if declarations is None:
        return None
    return build_rule(parsed, list(declarations))


_SPACING_RE = re.compile(r"^(?P<kind>[mp])(?P<side>[trblxyse]?)-(?P<value>[\w./]+)$")


def match_spacing(parsed: ParsedUtility) -> CSSRule | None:
    match = _SPACING_RE.match(parsed.base)
    if match is None:
        return None
    prop = "margin" if match.group("kind") == "m" else "padding"
    raw = match.group("value")
    if raw == "auto" and prop == "margin" and not parsed.negative:
        value = "auto"
    elif raw in SPACING:
        value = SPACING[raw]
    else:
        return None
    if parsed.negative:
        if prop == "padding":
            return None
        value = negate(value)
    sides = SPACING_SIDES[match.group("side")]
    return build_rule(parsed, [(f"{prop}-{side}", value) for side in sides])


_GAP_RE = re.compile(r"^gap(?:-(?P<axis>[xy]))?-(?P<value>[\w.]+)$")


def match_gap(parsed: ParsedUtility) -> CSSRule | None:
    match = _GAP_RE.match(parsed.base)
    if match is None or parsed.negative or match.group("value") not in SPACING:
        return None
    prop = {"x": "column-gap", "y": "row-gap"}.get(match.group("axis") or "", "gap")
    return build_rule(parsed, [(prop, SPACING[match.group("value")])])


_SIZE_RE = re.compile(r"^(?P<prop>w|h|min-w|min-h|max-h|size)-(?P<value>[\w./]+)$")

_SIZE_KEYWORDS = MappingProxyType({
    "min": "min-content",
    "max": "max-content",
    "fit": "fit-content",
    "px": "1px",
})


def match_size(parsed: ParsedUtility) -> CSSRule | None:
    match = _SIZE_RE.match(parsed.base)
    if match is None or parsed.negative:
        return None
    prop = match.group("prop")
    raw = match.group("value")
    if raw == "screen":
        value = "100vh" if prop in ("h", "min-h", "max-h") else "100vw"
    elif raw == "none" and prop == "max-h":
        value = "none"
    else:
        value = _scale_or_fraction(raw) or _SIZE_KEYWORDS.get(raw)
    if value is None:
        return None
    return build_rule(parsed, [(css_prop, value) for css_prop in SIZE_PROPERTIES[prop]])


def match_max_width(parsed: ParsedUtility) -> CSSRule | None:
    if parsed.negative or not parsed.base.startswith("max-w-"):
        return None
    raw = parsed.base[len("max-w-"):]
    value = MAX_WIDTHS.get(raw) or SPACING.get(raw)
    if value is None:
        return None
    return build_rule(parsed, [("max-width", value)])


_FONT_SIZE_RE = re.compile(r"^text-(?P<size>xs|sm|base|lg|xl|[2-9]xl)$")


def match_font_size(parsed: ParsedUtility) -> CSSRule | None:
    match = _FONT_SIZE_RE.match(parsed.base)
    if match is None or parsed.negative:
        return None
    size, line_height = FONT_SIZES[match.group("size")]
    return build_rule(parsed, [("font-size", size), ("line-height", line_height)])


_COLOR_RE = re.compile(
    r"""
    ^(?P<prefix>bg|text|border)
    (?:-(?P<side>[trblxy])(?=-))?-
    (?P<name>[a-z]+)
    (?:-(?P<shade>\d{2,3}))?
    (?:/(?P<alpha>\d{1,3}))?$
    """,
    re.VERBOSE,
)


def _resolve_color(name: str, shade: str | None) -> str | None:
    if shade is None:
        return NAMED_COLORS.get(name)
    family = COLOR_PALETTE.get(name)
    if family is None:
        return None
    return family.get(shade)


def match_color(parsed: ParsedUtility) -> CSSRule | None:
    """Palette, named and alpha-blended colors for bg/text/border, plus per-side border colors."""
    match = _COLOR_RE.match(parsed.base)
    if match is None or parsed.negative:
        return None
    prefix, side = match.group("prefix"), match.group("side")
    if side is not None and prefix != "border":
        return None
    color = _resolve_color(match.group("name"), match.group("shade"))
    if color is None:
        return None
    alpha = match.group("alpha")
    if alpha is not None:
        if not color.startswith("#"):
            return None
        color = rgba(color, format_alpha(alpha))
    if side is not None:
        return build_rule(parsed, [(f"border{edge}-color", color) for edge in BORDER_SIDES[side]])
    return build_rule(parsed, [(COLOR_PROPERTIES[prefix], color)])


_INSET_RE = re.compile(r"^(?P<prop>inset-x|inset-y|inset|top|right|bottom|left|start|end)-(?P<value>[\w./]+)$")


def match_inset(parsed: ParsedUtility) -> CSSRule | None:
    match = _INSET_RE.match(parsed.base)
    if match is None:
        return None
    value = _scale_or_fraction(match.group("value"))
    if value is None:
        return None
    if parsed.negative:
        if value == "auto":
            return None
        value = negate(value)
    return build_rule(parsed, [(prop, value) for prop in INSET_PROPERTIES[match.group("prop")]])


_Z_RE = re.compile(r"^z-(?P<value>\d+|auto)$")


def match_z_index(parsed: ParsedUtility) -> CSSRule | None:
    match = _Z_RE.match(parsed.base)
    if match is None:
        return None
    value = match.group("value")
    if parsed.negative:
        if value == "auto":
            return None
        value = negate(value)
    return build_rule(parsed, [("z-index", value)])


_OPACITY_RE = re.compile(r"^opacity-(?P<value>100|[1-9]?\d)$")


def match_opacity(parsed: ParsedUtility) -> CSSRule | None:
    match = _OPACITY_RE.match(parsed.base)
    if match is None or parsed.negative:
        return None
    return build_rule(parsed, [("opacity", format_alpha(match.group("value")))])


_BORDER_WIDTH_RE = re.compile(r"^border(?:-(?P<side>[trblxy]))?(?:-(?P<width>\d+))?$")


def match_border_width(parsed: ParsedUtility) -> CSSRule | None:
    match = _BORDER_WIDTH_RE.match(parsed.base)
    if match is None or parsed.negative:
        return None
    width = match.group("width")
    value = f"{width}px" if width is not None else "1px"
    sides = BORDER_SIDES[match.group("side") or ""]
    return build_rule(parsed, [(f"border{side}-width", value) for side in sides])


def _named_scale(prefix: str, prop: str, table: Mapping[str, str]) -> Matcher:
    def matcher(parsed: ParsedUtility) -> CSSRule | None:
        if parsed.negative or not parsed.base.startswith(prefix):
            return None
        value = table.get(parsed.base[len(prefix):])
        if value is None:
            return None
        return build_rule(parsed, [(prop, value)])

    matcher.__name__ = f"match_{prop.replace('-', '_')}"
    return matcher


match_letter_spacing = _named_scale("tracking-", "letter-spacing", LETTER_SPACING)
match_line_height = _named_scale("leading-", "line-height", LINE_HEIGHTS)
match_font_weight = _named_scale("font-", "font-weight", FONT_WEIGHTS)


_GRID_TEMPLATE_RE = re.compile(r"^grid-(?P<axis>cols|rows)-(?P<value>\d+|none|subgrid)$")
_GRID_SPAN_RE = re.compile(r"^(?P<axis>col|row)-span-(?P<value>\d+|full)$")


def match_grid(parsed: ParsedUtility) -> CSSRule | None:
    if parsed.negative:
        return None
    match = _GRID_TEMPLATE_RE.match(parsed.base)
    if match is not None:
        prop = "grid-template-columns" if match.group("axis") == "cols" else "grid-template-rows"
        raw = match.group("value")
        value = raw if not raw.isdigit() else f"repeat({raw}, minmax(0, 1fr))"
        return build_rule(parsed, [(prop, value)])
    match = _GRID_SPAN_RE.match(parsed.base)
    if match is not None:
        prop = "grid-column" if match.group("axis") == "col" else "grid-row"
        raw = match.group("value")
        value = "1 / -1" if raw == "full" else f"span {raw} / span {raw}"
        return build_rule(parsed, [(prop, value)])
    return None


_SPACE_RE = re.compile(r"^space-(?P<axis>[xy])-(?P<value>[\w.]+)$")


def match_space_between(parsed: ParsedUtility) -> CSSRule | None:
    """``space-y-4``: margin on every child that follows a sibling."""
    match = _SPACE_RE.match(parsed.base)
    if match is None or match.group("value") not in SPACING:
        return None
    value = SPACING[match.group("value")]
    if parsed.negative:
        value = negate(value)
    prop = "margin-left" if match.group("axis") == "x" else "margin-top"
    return build_rule(parsed, [(prop, value)], suffix=" > * + *")


_ROUNDED_RE = re.compile(
    r"^rounded(?:-(?P<corner>tl|tr|br|bl|ss|se|es|ee|t|r|b|l|s|e))?(?:-(?P<size>none|sm|md|lg|xl|2xl|3xl|full))?$"
)


def match_rounded(parsed: ParsedUtility) -> CSSRule | None:
    match = _ROUNDED_RE.match(parsed.base)
    if match is None or parsed.negative:
        return None
    value = BORDER_RADIUS[match.group("size") or ""]
    props = RADIUS_CORNERS[match.group("corner") or ""]
    return build_rule(parsed, [(prop, value) for prop in props])


_SHADOW_RE = re.compile(r"^shadow(?:-(?P<size>sm|md|lg|xl|2xl|inner|none))?$")


def match_shadow(parsed: ParsedUtility) -> CSSRule | None:
    match = _SHADOW_RE.match(parsed.base)
    if match is None or parsed.negative:
        return None
    return build_rule(parsed, [("box-shadow", SHADOWS[match.group("size") or ""])])


_TRANSFORM_RE = re.compile(r"^(?P<kind>rotate|scale)-(?P<value>\d+)$")
_TIMING_RE = re.compile(r"^(?P<kind>duration|delay)-(?P<value>\d+)$")


def match_motion(parsed: ParsedUtility) -> CSSRule | None:
    """Rotation, scale and transition timing steps."""
    match = _TRANSFORM_RE.match(parsed.base)
    if match is not None:
        raw = match.group("value")
        if match.group("kind") == "rotate":
            degrees = f"-{raw}" if parsed.negative and raw != "0" else raw
            return build_rule(parsed, [("transform", f"rotate({degrees}deg)")])
        if parsed.negative:
            return None
        return build_rule(parsed, [("transform", f"scale({format_alpha(raw)})")])
    match = _TIMING_RE.match(parsed.base)
    if match is not None and not parsed.negative:
        prop = "transition-duration" if match.group("kind") == "duration" else "transition-delay"
        return build_rule(parsed, [(prop, f"{match.group('value')}ms")])
    return None


SCALE_MATCHERS: tuple[Matcher, ...] = (
    match_spacing,
    match_gap,
    match_size,
    match_max_width,
    match_font_size,
    match_color,
    match_inset,
    match_z_index,
    match_opacity,
    match_border_width,
    match_letter_spacing,
    match_line_height,
    match_grid,
    match_space_between,
    match_rounded,
    match_shadow,
    match_font_weight,
    match_motion,
)

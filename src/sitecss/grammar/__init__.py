"""Utility class grammar and shared lookup tables."""

from sitecss.grammar.tables import (
    BREAKPOINTS,
    COLOR_PALETTE,
    FONT_SIZES,
    SPACING,
)
from sitecss.grammar.utility import (
    ParsedUtility,
    class_selector,
    escape_class,
    parse_utility,
    state_selector,
)
from sitecss.grammar.values import hex_to_rgb, is_color_value, unescape_arbitrary

__all__ = [
    "BREAKPOINTS",
    "COLOR_PALETTE",
    "FONT_SIZES",
    "SPACING",
    "ParsedUtility",
    "class_selector",
    "escape_class",
    "parse_utility",
    "state_selector",
    "hex_to_rgb",
    "is_color_value",
    "unescape_arbitrary",
]

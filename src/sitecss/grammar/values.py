"""Value helpers: hex decomposition, alpha formatting, and value-shape sniffing.

Arbitrary values (``bg-[...]``, ``text-[...]``) are ambiguous between color
and size/image. The sniffing here is a best-effort heuristic; an explicit
``color:``/``length:``/``image:`` hint always wins over it.
"""

from __future__ import annotations

import re

__all__ = [
    "TYPE_HINTS",
    "format_font_stack",
    "format_alpha",
    "hex_to_rgb",
    "is_color_value",
    "is_image_value",
    "is_size_value",
    "rgba",
    "split_type_hint",
    "unescape_arbitrary",
]

TYPE_HINTS = frozenset({"color", "length", "image", "url", "percentage", "number"})

_HEX_RE = re.compile(r"^#?(?P<hex>[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

_COLOR_FUNCTIONS = ("rgb(", "rgba(", "hsl(", "hsla(", "hwb(", "lab(", "lch(", "oklab(", "oklch(", "color-mix(", "color(")

_SIZE_FUNCTIONS = ("calc(", "clamp(", "min(", "max(", "var(", "env(", "fit-content(")

_IMAGE_MARKERS = ("url(", "gradient(", "image-set(", "conic-", "linear-", "radial-")

# Keywords that can only be colors in a bg-/text-/border- position.
_COLOR_KEYWORDS = frozenset({
    "transparent", "currentcolor", "inherit", "white", "black", "red", "green",
    "blue", "yellow", "orange", "purple", "pink", "gray", "grey", "silver",
    "navy", "teal", "maroon", "olive", "lime", "aqua", "fuchsia",
})


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Decompose ``#rgb`` / ``#rrggbb`` / ``#rrggbbaa`` into integer channels.

    Raises ValueError for anything that is not a hex color.
    """
    match = _HEX_RE.match(value.strip())
    if match is None:
        raise ValueError(f"Not a hex color: {value!r}")
    digits = match.group("hex")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def format_alpha(percent: str | int | float) -> str:
    """``50`` -> ``"0.5"``, ``5`` -> ``"0.05"``, ``100`` -> ``"1"``."""
    return f"{float(percent) / 100:g}"


def rgba(hex_value: str, alpha: str) -> str:
    r, g, b = hex_to_rgb(hex_value)
    return f"rgba({r}, {g}, {b}, {alpha})"


def unescape_arbitrary(value: str) -> str:
    """Turn the bracket-body encoding back into CSS text.

    Underscores stand for spaces; ``\\_`` keeps a literal underscore.
    """
    placeholder = "\x00"
    return value.replace("\\_", placeholder).replace("_", " ").replace(placeholder, "_")


def split_type_hint(value: str) -> tuple[str | None, str]:
    """Split ``"color:#fff"`` into ``("color", "#fff")``; unhinted values pass through."""
    head, sep, rest = value.partition(":")
    if sep and head in TYPE_HINTS:
        return head, rest
    return None, value


def is_image_value(value: str) -> bool:
    lowered = value.lower()
    return any(marker in lowered for marker in _IMAGE_MARKERS)


def is_color_value(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered.startswith("#"):
        return True
    if lowered.startswith(_COLOR_FUNCTIONS):
        return True
    if lowered.startswith("var(--color"):
        return True
    return lowered in _COLOR_KEYWORDS


def is_size_value(value: str) -> bool:
    lowered = value.strip().lower()
    if not lowered:
        return False
    if lowered[0].isdigit() or lowered[0] in ".-+":
        return True
    return lowered.startswith(_SIZE_FUNCTIONS) and not is_color_value(lowered)


_GENERIC_FAMILIES = frozenset({
    "serif", "sans-serif", "monospace", "cursive", "fantasy", "system-ui",
    "ui-serif", "ui-sans-serif", "ui-monospace", "ui-rounded", "emoji", "math",
    "inherit", "initial",
})


def format_font_stack(stack: list[str] | tuple[str, ...]) -> str:
    """``["Open Sans", "sans-serif"]`` -> ``"Open Sans", sans-serif``."""
    parts: list[str] = []
    for name in stack:
        name = name.strip()
        if not name:
            continue
        if name[0] in "'\"" or name.lower() in _GENERIC_FAMILIES or name.startswith("var("):
            parts.append(name)
        elif " " in name or not name.replace("-", "").isalnum():
            parts.append(f'"{name}"')
        else:
            parts.append(name)
    return ", ".join(parts)

"""Design-token section: custom properties plus the utility classes derived from them.

This section is emitted last and unlayered, so its rules win over the
compiled utilities by source order alone.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from sitecss.grammar.utility import class_selector, state_selector
from sitecss.grammar.values import format_alpha, hex_to_rgb

OPACITY_STEPS = (5, 10, 20, 30, 40, 50, 60, 70, 80, 90)

DEFAULT_SHADOWS: dict[str, str] = {
    "sm": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
    "md": "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)",
    "lg": "0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1)",
    "xl": "0 20px 25px -5px rgb(0 0 0 / 0.1), 0 8px 10px -6px rgb(0 0 0 / 0.1)",
}

_GRADIENT_DIRECTIONS = {
    "to-r": "to right",
    "to-l": "to left",
    "to-t": "to top",
    "to-b": "to bottom",
    "to-tr": "to top right",
    "to-tl": "to top left",
    "to-br": "to bottom right",
    "to-bl": "to bottom left",
}


def _section(data: Mapping[str, Any] | None, key: str) -> Mapping[str, Any]:
    value = (data or {}).get(key)
    return value if isinstance(value, Mapping) else {}


@dataclass(frozen=True)
class TokenColor:
    """A named token color and the custom property that carries it."""

    name: str
    variable: str
    value: str

    @property
    def rgb(self) -> str | None:
        try:
            r, g, b = hex_to_rgb(self.value)
        except ValueError:
            return None
        return f"{r}, {g}, {b}"


@dataclass(frozen=True)
class Gradient:
    start: str
    end: str
    via: str = ""
    direction: str = "to right"

    def to_css(self) -> str:
        stops = [self.start, self.via, self.end] if self.via else [self.start, self.end]
        return f"linear-gradient({self.direction}, {', '.join(stops)})"


@dataclass(frozen=True)
class DesignTokens:
    """Resolved design tokens with defaults applied."""

    primary: str = "#3b82f6"
    primary_hover: str = "#2563eb"
    secondary: str = "#64748b"
    accent: str = "#8b5cf6"
    background: str = "#ffffff"
    foreground: str = "#0f172a"
    muted: str = "#f1f5f9"
    border: str = "#e2e8f0"
    success: str = "#22c55e"
    warning: str = "#f59e0b"
    error: str = "#ef4444"
    info: str = "#3b82f6"
    font_heading: str = "Inter"
    font_body: str = "Inter"
    font_mono: str = "JetBrains Mono"
    radius_default: str = "0.5rem"
    radius_lg: str = "0.75rem"
    spacing_section: str = "5rem"
    container_width: str = "1280px"
    shadows: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_SHADOWS))
    custom_colors: dict[str, str] = field(default_factory=dict)
    gradient: Gradient | None = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any] | None) -> DesignTokens:
        """Read a stored design-token record; missing values keep their defaults."""
        defaults = cls()
        colors = _section(record, "colors")
        brand = _section(colors, "brand")
        neutral = _section(colors, "neutral")
        semantic = _section(colors, "semantic")
        typography = _section(record, "typography")
        radius = _section(_section(record, "borders"), "radius")
        spacing = _section(record, "spacing")
        gradient = _section(_section(record, "gradients"), "primary")

        def pick(section: Mapping[str, Any], key: str, default: str) -> str:
            value = section.get(key)
            return str(value) if value else default

        primary = pick(brand, "primary", defaults.primary)
        accent = pick(brand, "accent", defaults.accent)
        return cls(
            primary=primary,
            primary_hover=pick(brand, "primaryHover", defaults.primary_hover),
            secondary=pick(brand, "secondary", defaults.secondary),
            accent=accent,
            background=pick(neutral, "background", defaults.background),
            foreground=pick(neutral, "foreground", defaults.foreground),
            muted=pick(neutral, "muted", defaults.muted),
            border=pick(neutral, "border", defaults.border),
            success=pick(semantic, "success", defaults.success),
            warning=pick(semantic, "warning", defaults.warning),
            error=pick(semantic, "error", defaults.error),
            info=pick(semantic, "info", defaults.info),
            font_heading=pick(typography, "fontHeading", defaults.font_heading),
            font_body=pick(typography, "fontBody", defaults.font_body),
            font_mono=pick(typography, "fontMono", defaults.font_mono),
            radius_default=pick(radius, "default", defaults.radius_default),
            radius_lg=pick(radius, "lg", defaults.radius_lg),
            spacing_section=pick(_section(spacing, "scale"), "section", defaults.spacing_section),
            container_width=pick(_section(spacing, "containerWidths"), "xl", defaults.container_width),
            shadows={**DEFAULT_SHADOWS, **{str(k): str(v) for k, v in _section(record, "shadows").items() if v}},
            custom_colors={str(k): str(v) for k, v in _section(record, "customColors").items() if v},
            gradient=(
                Gradient(
                    start=pick(gradient, "from", primary),
                    end=pick(gradient, "to", accent),
                    via=pick(gradient, "via", ""),
                    direction=_GRADIENT_DIRECTIONS.get(str(gradient.get("direction", "")), "to right"),
                )
                if gradient.get("enabled")
                else None
            ),
        )

    @property
    def colors(self) -> tuple[TokenColor, ...]:
        named = (
            TokenColor("primary", "--color-brand-primary", self.primary),
            TokenColor("primary-hover", "--color-brand-primary-hover", self.primary_hover),
            TokenColor("secondary", "--color-brand-secondary", self.secondary),
            TokenColor("accent", "--color-brand-accent", self.accent),
            TokenColor("background", "--color-neutral-background", self.background),
            TokenColor("foreground", "--color-neutral-foreground", self.foreground),
            TokenColor("muted", "--color-neutral-muted", self.muted),
            TokenColor("border", "--color-neutral-border", self.border),
            TokenColor("success", "--color-semantic-success", self.success),
            TokenColor("warning", "--color-semantic-warning", self.warning),
            TokenColor("error", "--color-semantic-error", self.error),
            TokenColor("info", "--color-semantic-info", self.info),
        )
        custom = tuple(
            TokenColor(name, f"--color-custom-{name}", value)
            for name, value in self.custom_colors.items()
        )
        return named + custom

    @property
    def radii(self) -> dict[str, str]:
        return {
            "default": self.radius_default,
            "sm": "0.25rem",
            "lg": self.radius_lg,
            "xl": "1rem",
            "2xl": "1.5rem",
            "full": "9999px",
        }


def _font_value(name: str, fallback: str) -> str:
    return f"'{name}', {fallback}"


def root_variables(tokens: DesignTokens) -> str:
    lines: list[str] = []
    for color in tokens.colors:
        lines.append(f"  {color.variable}: {color.value};")
    for color in tokens.colors:
        if color.rgb is not None:
            lines.append(f"  {color.variable}-rgb: {color.rgb};")
    lines.append(f"  --font-heading: {_font_value(tokens.font_heading, 'system-ui, sans-serif')};")
    lines.append(f"  --font-body: {_font_value(tokens.font_body, 'system-ui, sans-serif')};")
    lines.append(f"  --font-mono: {_font_value(tokens.font_mono, 'monospace')};")
    for name, value in tokens.radii.items():
        lines.append(f"  --radius-{name}: {value};")
    lines.append(f"  --spacing-section: {tokens.spacing_section};")
    lines.append(f"  --spacing-container: {tokens.container_width};")
    for name, value in tokens.shadows.items():
        lines.append(f"  --shadow-{name}: {value};")
    if tokens.gradient is not None:
        lines.append(f"  --gradient-primary: {tokens.gradient.to_css()};")
    return ":root {\n" + "\n".join(lines) + "\n}"


_COLOR_PROPS = (("bg", "background-color"), ("text", "color"), ("border", "border-color"))

# (state, prefixes it applies to)
_STATE_VARIANTS = (
    ("hover", ("bg", "text", "border")),
    ("focus", ("bg", "text", "border")),
    ("group-hover", ("bg", "text")),
)


def _rule(selector: str, declarations: str) -> str:
    return f"{selector} {{ {declarations} }}"


def color_utilities(tokens: DesignTokens) -> list[str]:
    rules: list[str] = []
    for color in tokens.colors:
        value = f"var({color.variable})"
        for prefix, prop in _COLOR_PROPS:
            rules.append(_rule(class_selector(f"{prefix}-{color.name}"), f"{prop}: {value};"))
        if color.rgb is not None:
            for prefix, prop in _COLOR_PROPS[:2]:
                for step in OPACITY_STEPS:
                    name = f"{prefix}-{color.name}/{step}"
                    alpha = f"rgba(var({color.variable}-rgb), {format_alpha(step)})"
                    rules.append(_rule(class_selector(name), f"{prop}: {alpha};"))
        for stop in ("from", "via", "to"):
            rules.append(_rule(class_selector(f"{stop}-{color.name}"), _gradient_stop(stop, value)))
    for state, prefixes in _STATE_VARIANTS:
        for color in tokens.colors:
            value = f"var({color.variable})"
            for prefix, prop in _COLOR_PROPS:
                if prefix in prefixes:
                    name = f"{state}:{prefix}-{color.name}"
                    rules.append(_rule(state_selector(name, state), f"{prop}: {value};"))
    return rules


def _gradient_stop(stop: str, value: str) -> str:
    if stop == "from":
        return (
            f"--tw-gradient-from: {value}; --tw-gradient-to: transparent; "
            "--tw-gradient-stops: var(--tw-gradient-from), var(--tw-gradient-to);"
        )
    if stop == "via":
        return (
            "--tw-gradient-to: transparent; "
            f"--tw-gradient-stops: var(--tw-gradient-from), {value}, var(--tw-gradient-to);"
        )
    return f"--tw-gradient-to: {value};"


def typography_utilities() -> list[str]:
    return [
        _rule(class_selector(f"font-{role}"), f"font-family: var(--font-{role});")
        for role in ("heading", "body", "mono")
    ]


def effect_utilities(tokens: DesignTokens) -> list[str]:
    rules = [
        _rule(class_selector(f"shadow-{name}"), f"box-shadow: var(--shadow-{name});")
        for name in tokens.shadows
    ]
    for name in tokens.radii:
        cls = "rounded" if name == "default" else f"rounded-{name}"
        rules.append(_rule(class_selector(cls), f"border-radius: var(--radius-{name});"))
    if tokens.gradient is not None:
        rules.append(_rule(class_selector("bg-gradient-primary"), "background-image: var(--gradient-primary);"))
    return rules


def generate_design_tokens_css(record: Mapping[str, Any] | DesignTokens | None) -> str:
    """Render the design-token section from a stored record (or resolved tokens).

    Only class selectors and ``:root`` are emitted here; element rules belong
    to the layered base reset.
    """
    tokens = record if isinstance(record, DesignTokens) else DesignTokens.from_record(record)
    parts = [root_variables(tokens)]
    parts.append("\n".join(color_utilities(tokens)))
    parts.append("\n".join(typography_utilities()))
    parts.append("\n".join(effect_utilities(tokens)))
    return "\n\n".join(parts)

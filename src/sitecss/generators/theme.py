"""Utilities derived straight from the theme extension.

No tier knows about custom animation or background-image keys, so these
rules are generated here regardless of which tier compiled the rest.
"""

from __future__ import annotations

from sitecss.grammar.utility import class_selector
from sitecss.model.theme import ThemeExtension


def generate_keyframes(theme: ThemeExtension) -> str:
    blocks: list[str] = []
    for name, frames in theme.keyframes.items():
        lines = [f"@keyframes {name} {{"]
        for offset, props in frames.items():
            declarations = " ".join(f"{prop}: {value};" for prop, value in props.items())
            lines.append(f"  {offset} {{ {declarations} }}")
        lines.append("}")
        blocks.append("\n".join(lines))
    return "\n".join(blocks)


def generate_animation_utilities(theme: ThemeExtension) -> str:
    return "\n".join(
        f"{class_selector(f'animate-{name}')} {{ animation: {value}; }}"
        for name, value in theme.animation.items()
    )


def generate_background_utilities(theme: ThemeExtension) -> str:
    return "\n".join(
        f"{class_selector(f'bg-{name}')} {{ background-image: {value}; }}"
        for name, value in theme.background_image.items()
    )


def generate_theme_utilities(theme: ThemeExtension) -> str:
    """Animation classes followed by background-image classes."""
    parts = [generate_animation_utilities(theme), generate_background_utilities(theme)]
    return "\n".join(part for part in parts if part)

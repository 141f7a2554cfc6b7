"""Assembles the compiled sections into one ordered stylesheet."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from sitecss.generators import (
    generate_font_faces,
    generate_keyframes,
    generate_theme_utilities,
)
from sitecss.model.document import SECTION_ORDER, CompiledDocument, Section, SectionKind
from sitecss.model.site import FontDescriptor
from sitecss.model.theme import ThemeExtension

SECTION_TITLES: dict[SectionKind, str] = {
    SectionKind.FONTS: "Local fonts",
    SectionKind.BASE: "Base reset",
    SectionKind.UTILITIES: "Utility classes",
    SectionKind.KEYFRAMES: "Theme keyframes",
    SectionKind.THEME_UTILITIES: "Theme animation and background utilities",
    SectionKind.COMPONENT_CSS: "Component custom CSS",
    SectionKind.PAGE_CSS: "Page custom CSS",
    SectionKind.GLOBAL_CSS: "Global component custom CSS",
    SectionKind.DESIGN_TOKENS: "Design tokens",
}


def wrap_layer(css: str, layer: str = "utilities") -> str:
    body = "\n".join(f"  {line}" if line else line for line in css.strip().splitlines())
    return f"@layer {layer} {{\n{body}\n}}"


def render_header(site_id: str, generated_at: datetime, class_count: int) -> str:
    return (
        "/*\n"
        f" * Site stylesheet: {site_id}\n"
        f" * Generated: {generated_at.isoformat()}\n"
        f" * Classes: {class_count}\n"
        " */"
    )


def assemble(
    *,
    site_id: str,
    generated_at: datetime,
    class_count: int,
    utilities_css: str,
    base_css: str = "",
    theme: ThemeExtension | None = None,
    fonts: Iterable[FontDescriptor] = (),
    component_css: str = "",
    page_css: str = "",
    global_css: str = "",
    design_tokens_css: str = "",
) -> CompiledDocument:
    """Build the document in cascade order.

    ``base_css`` must already be layered; utilities go inside
    ``@layer utilities``. The design-token section is last and unlayered.
    Empty sections are dropped without reordering the rest.
    """
    theme = theme or ThemeExtension()
    bodies: dict[SectionKind, str] = {
        SectionKind.FONTS: generate_font_faces(fonts),
        SectionKind.BASE: base_css,
        SectionKind.UTILITIES: wrap_layer(utilities_css) if utilities_css.strip() else "",
        SectionKind.KEYFRAMES: generate_keyframes(theme),
        SectionKind.THEME_UTILITIES: generate_theme_utilities(theme),
        SectionKind.COMPONENT_CSS: component_css,
        SectionKind.PAGE_CSS: page_css,
        SectionKind.GLOBAL_CSS: global_css,
        SectionKind.DESIGN_TOKENS: design_tokens_css,
    }
    sections = tuple(
        Section(kind=kind, title=SECTION_TITLES[kind], css=bodies[kind].strip())
        for kind in SECTION_ORDER
        if bodies[kind].strip()
    )
    return CompiledDocument(
        header=render_header(site_id, generated_at, class_count),
        sections=sections,
    )

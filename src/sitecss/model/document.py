"""CompiledDocument: the ordered, banner-annotated output stylesheet."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class SectionKind(StrEnum):
    FONTS = "fonts"
    BASE = "base"
    UTILITIES = "utilities"
    KEYFRAMES = "keyframes"
    THEME_UTILITIES = "theme_utilities"
    COMPONENT_CSS = "component_css"
    PAGE_CSS = "page_css"
    GLOBAL_CSS = "global_css"
    DESIGN_TOKENS = "design_tokens"


# Fixed cascade order; the design-token section must stay last.
SECTION_ORDER: tuple[SectionKind, ...] = (
    SectionKind.FONTS,
    SectionKind.BASE,
    SectionKind.UTILITIES,
    SectionKind.KEYFRAMES,
    SectionKind.THEME_UTILITIES,
    SectionKind.COMPONENT_CSS,
    SectionKind.PAGE_CSS,
    SectionKind.GLOBAL_CSS,
    SectionKind.DESIGN_TOKENS,
)


@dataclass(frozen=True)
class Section:
    kind: SectionKind
    title: str
    css: str

    def to_css(self) -> str:
        banner = (
            "/* ----------------------------------------------------------------\n"
            f"   {self.title}\n"
            "   ---------------------------------------------------------------- */"
        )
        return f"{banner}\n{self.css}"


@dataclass(frozen=True)
class CompiledDocument:
    """An ordered list of named CSS sections plus a header banner."""

    header: str
    sections: tuple[Section, ...] = field(default_factory=tuple)

    def section(self, kind: SectionKind) -> Section | None:
        for section in self.sections:
            if section.kind is kind:
                return section
        return None

    def to_css(self) -> str:
        parts = [self.header]
        parts.extend(section.to_css() for section in self.sections)
        return "\n\n".join(parts) + "\n"

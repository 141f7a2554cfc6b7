"""sitecss model layer -- public type re-exports."""

from sitecss.model.css import CSSRule, ResponsiveGroup, RuleSet
from sitecss.model.document import SECTION_ORDER, CompiledDocument, Section, SectionKind
from sitecss.model.result import TierResult
from sitecss.model.site import (
    ComponentRecord,
    FontDescriptor,
    GlobalComponent,
    PageRecord,
    SiteContent,
    TemplateRecord,
)
from sitecss.model.theme import ThemeExtension, merge_theme

__all__ = [
    # css
    "CSSRule",
    "ResponsiveGroup",
    "RuleSet",
    # document
    "CompiledDocument",
    "Section",
    "SectionKind",
    "SECTION_ORDER",
    # result
    "TierResult",
    # site
    "PageRecord",
    "ComponentRecord",
    "TemplateRecord",
    "GlobalComponent",
    "FontDescriptor",
    "SiteContent",
    # theme
    "ThemeExtension",
    "merge_theme",
]

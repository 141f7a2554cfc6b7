from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Iterator

from sitecss.model.theme import ThemeExtension


@dataclass(frozen=True)
class PageRecord:
    id: str
    slug: str = ""
    content: dict[str, Any] = field(default_factory=dict, hash=False)
    html: str = ""


@dataclass(frozen=True)
class ComponentRecord:
    id: str
    name: str = ""
    html: str = ""
    variants: tuple[str, ...] = ()  # variant html
    custom_css: str = ""


@dataclass(frozen=True)
class TemplateRecord:
    id: str
    name: str = ""
    html: str = ""


@dataclass(frozen=True)
class GlobalComponent:
    id: str
    name: str = ""
    position: str = "header"  # "header" | "footer"
    html: str = ""
    custom_css: str = ""


@dataclass(frozen=True)
class FontDescriptor:
    family: str
    path: str  # relative to the exported stylesheet
    weight: str = "400"
    style: str = "normal"
    format: str = "woff2"


def iter_strings(value: Any) -> Iterator[str]:
    """Yield every string leaf of a nested JSON-like structure."""
    if isinstance(value, str):
        yield value
    elif isinstance(value, dict):
        for item in value.values():
            yield from iter_strings(item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from iter_strings(item)


@dataclass(frozen=True)
class SiteContent:
    """Everything gathered for one site before compilation begins."""

    site_id: str
    pages: tuple[PageRecord, ...] = ()
    components: tuple[ComponentRecord, ...] = ()
    templates: tuple[TemplateRecord, ...] = ()
    global_components: tuple[GlobalComponent, ...] = ()
    design_tokens: dict[str, Any] | None = field(default=None, hash=False)
    theme: ThemeExtension = field(default_factory=ThemeExtension, hash=False)
    fonts: tuple[FontDescriptor, ...] = ()

    def markup_blobs(self) -> list[str]:
        """Return every markup blob scanned for class names.

        Page content is JSON-serialized so that structured ``className``
        fields are visible to the extractor.
        """
        blobs: list[str] = []
        for page in self.pages:
            if page.content:
                blobs.append(json.dumps(page.content, ensure_ascii=False))
            if page.html:
                blobs.append(page.html)
        for comp in self.components:
            blobs.append(comp.html)
            blobs.extend(comp.variants)
        blobs.extend(tpl.html for tpl in self.templates)
        blobs.extend(gc.html for gc in self.global_components)
        return [blob for blob in blobs if blob]

    def page_markup(self) -> list[str]:
        """Decoded page/template/component markup, searched for ``<style>`` blocks."""
        out: list[str] = []
        for page in self.pages:
            out.extend(iter_strings(page.content))
            if page.html:
                out.append(page.html)
        out.extend(tpl.html for tpl in self.templates)
        for comp in self.components:
            out.append(comp.html)
            out.extend(comp.variants)
        return [text for text in out if text]

"""Site sources: where the pipeline reads pages, components and settings from."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Protocol

from sitecss.errors import SiteNotFoundError
from sitecss.model.site import (
    ComponentRecord,
    FontDescriptor,
    GlobalComponent,
    PageRecord,
    SiteContent,
    TemplateRecord,
)
from sitecss.model.theme import ThemeExtension


class SiteSource(Protocol):
    """Read-only access to one site's stored inputs."""

    def fetch_pages(self, site_id: str) -> list[PageRecord]: ...

    def fetch_components(self, site_id: str) -> list[ComponentRecord]: ...

    def fetch_templates(self, site_id: str) -> list[TemplateRecord]: ...

    def fetch_global_components(self, site_id: str) -> list[GlobalComponent]: ...

    def fetch_design_tokens(self, site_id: str) -> dict[str, Any] | None: ...

    def fetch_theme(self, site_id: str) -> ThemeExtension: ...

    def fetch_fonts(self, site_id: str) -> list[FontDescriptor]: ...

    def fetch_updated_at(self, site_id: str) -> list[str]: ...


@dataclass
class InMemorySiteSource:
    """Serves pre-built ``SiteContent`` objects keyed by site id."""

    sites: dict[str, SiteContent] = field(default_factory=dict)
    updated_at: dict[str, list[str]] = field(default_factory=dict)

    def add(self, content: SiteContent) -> None:
        self.sites[content.site_id] = content

    def _site(self, site_id: str) -> SiteContent:
        try:
            return self.sites[site_id]
        except KeyError:
            raise SiteNotFoundError(site_id) from None

    def fetch_pages(self, site_id: str) -> list[PageRecord]:
        return list(self._site(site_id).pages)

    def fetch_components(self, site_id: str) -> list[ComponentRecord]:
        return list(self._site(site_id).components)

    def fetch_templates(self, site_id: str) -> list[TemplateRecord]:
        return list(self._site(site_id).templates)

    def fetch_global_components(self, site_id: str) -> list[GlobalComponent]:
        return list(self._site(site_id).global_components)

    def fetch_design_tokens(self, site_id: str) -> dict[str, Any] | None:
        return self._site(site_id).design_tokens

    def fetch_theme(self, site_id: str) -> ThemeExtension:
        return self._site(site_id).theme

    def fetch_fonts(self, site_id: str) -> list[FontDescriptor]:
        return list(self._site(site_id).fonts)

    def fetch_updated_at(self, site_id: str) -> list[str]:
        self._site(site_id)
        return list(self.updated_at.get(site_id, ()))


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def _custom_css(data: dict[str, Any]) -> str:
    return str(data.get("customCss") or data.get("custom_css") or "")


def _variant_html(variant: Any) -> str:
    if isinstance(variant, dict):
        return str(variant.get("html", ""))
    return str(variant)


class DirectorySiteSource:
    """Reads sites laid out on disk as ``<root>/<site_id>/...``.

    Layout::

        pages/*.json | pages/*.html
        components/*.json
        templates/*.html
        global/*.json
        design_tokens.json
        settings.json        (its "theme" key)
        fonts.json
    """

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def site_dir(self, site_id: str) -> Path:
        path = self.root / site_id
        # Reject ids that would escape the root.
        if site_id in ("", ".", "..") or "/" in site_id or "\\" in site_id or not path.is_dir():
            raise SiteNotFoundError(site_id)
        return path

    def _files(self, site_id: str, subdir: str, pattern: str) -> list[Path]:
        directory = self.site_dir(site_id) / subdir
        if not directory.is_dir():
            return []
        return sorted(directory.glob(pattern))

    def fetch_pages(self, site_id: str) -> list[PageRecord]:
        pages: list[PageRecord] = []
        for path in self._files(site_id, "pages", "*"):
            if path.suffix == ".json":
                data = _read_json(path)
                pages.append(
                    PageRecord(
                        id=str(data.get("id", path.stem)),
                        slug=str(data.get("slug", path.stem)),
                        content=data.get("content") or {},
                        html=str(data.get("html", "")),
                    )
                )
            elif path.suffix == ".html":
                pages.append(PageRecord(id=path.stem, slug=path.stem, html=path.read_text(encoding="utf-8")))
        return pages

    def fetch_components(self, site_id: str) -> list[ComponentRecord]:
        components: list[ComponentRecord] = []
        for path in self._files(site_id, "components", "*.json"):
            data = _read_json(path)
            components.append(
                ComponentRecord(
                    id=str(data.get("id", path.stem)),
                    name=str(data.get("name", path.stem)),
                    html=str(data.get("html", "")),
                    variants=tuple(_variant_html(v) for v in data.get("variants") or ()),
                    custom_css=_custom_css(data),
                )
            )
        return components

    def fetch_templates(self, site_id: str) -> list[TemplateRecord]:
        return [
            TemplateRecord(id=path.stem, name=path.stem, html=path.read_text(encoding="utf-8"))
            for path in self._files(site_id, "templates", "*.html")
        ]

    def fetch_global_components(self, site_id: str) -> list[GlobalComponent]:
        components: list[GlobalComponent] = []
        for path in self._files(site_id, "global", "*.json"):
            data = _read_json(path)
            components.append(
                GlobalComponent(
                    id=str(data.get("id", path.stem)),
                    name=str(data.get("name", path.stem)),
                    position=str(data.get("position", "header")),
                    html=str(data.get("html", "")),
                    custom_css=_custom_css(data),
                )
            )
        return components

    def fetch_design_tokens(self, site_id: str) -> dict[str, Any] | None:
        path = self.site_dir(site_id) / "design_tokens.json"
        if not path.is_file():
            return None
        return _read_json(path)

    def fetch_theme(self, site_id: str) -> ThemeExtension:
        path = self.site_dir(site_id) / "settings.json"
        if not path.is_file():
            return ThemeExtension()
        settings = _read_json(path)
        return ThemeExtension.from_mapping(settings.get("theme"))

    def fetch_fonts(self, site_id: str) -> list[FontDescriptor]:
        path = self.site_dir(site_id) / "fonts.json"
        if not path.is_file():
            return []
        return [
            FontDescriptor(
                family=str(item["family"]),
                path=str(item["path"]),
                weight=str(item.get("weight", "400")),
                style=str(item.get("style", "normal")),
                format=str(item.get("format", "woff2")),
            )
            for item in _read_json(path)
        ]

    def fetch_updated_at(self, site_id: str) -> list[str]:
        """Modification times of every file under the site directory, ISO formatted."""
        site = self.site_dir(site_id)
        return [
            datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc).isoformat()
            for path in site.rglob("*")
            if path.is_file()
        ]

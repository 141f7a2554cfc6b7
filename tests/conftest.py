from __future__ import annotations

from datetime import datetime, timezone

import pytest

from sitecss.model.result import TierResult
from sitecss.model.site import (
    ComponentRecord,
    FontDescriptor,
    GlobalComponent,
    PageRecord,
    SiteContent,
    TemplateRecord,
)
from sitecss.model.theme import ThemeExtension
from sitecss.sources import InMemorySiteSource
from sitecss.tiers import FallbackCompiler

FIXED_NOW = datetime(2025, 1, 15, 10, 0, tzinfo=timezone.utc)


class FailingTier:
    """A tier that always reports failure."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.calls = 0

    def compile(self, request):
        self.calls += 1
        return TierResult.failure(self.name, RuntimeError(f"{self.name} unavailable"))


class StaticTier:
    """A tier that always succeeds with fixed CSS."""

    def __init__(self, name: str, css: str) -> None:
        self.name = name
        self.css = css
        self.requests = []

    def compile(self, request):
        self.requests.append(request)
        return TierResult.success(self.name, self.css)


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def failing_tier_factory():
    return FailingTier


@pytest.fixture
def static_tier_factory():
    return StaticTier


@pytest.fixture
def fallback_tiers():
    """Primary and secondary fail; the fallback compiler does the work."""
    return [FailingTier("primary"), FailingTier("secondary"), FallbackCompiler()]


@pytest.fixture
def site_content() -> SiteContent:
    return SiteContent(
        site_id="site-1",
        pages=(
            PageRecord(
                id="home",
                slug="home",
                content={
                    "hero": {"html": '<section class="flex items-center p-4">Hi</section>'},
                    "cta": {"className": "bg-primary text-white"},
                },
            ),
            PageRecord(
                id="about",
                slug="about",
                html=(
                    '<div class="mt-2 hover:bg-[#ff0000] md:flex">About</div>'
                    "<style>.about-hero { min-height: 40vh; }</style>"
                ),
            ),
        ),
        components=(
            ComponentRecord(
                id="card",
                name="Card",
                html='<div class="rounded-lg shadow-md bg-white">Card</div>',
                variants=('<div class="bg-gray-500/50">Muted card</div>',),
                custom_css=".card-title { letter-spacing: 0.02em; }",
            ),
        ),
        templates=(
            TemplateRecord(id="post", name="Post", html='<article class="w-[320px] text-lg">{{ body }}</article>'),
        ),
        global_components=(
            GlobalComponent(
                id="header",
                name="Header",
                position="header",
                html='<header class="sticky top-0"><style>.site-header { z-index: 50; }</style></header>',
                custom_css=":root {\n  --color-brand-primary: #000000;\n}\n.site-nav { gap: 1rem; }",
            ),
        ),
        design_tokens={"colors": {"brand": {"primary": "#ff5500"}}},
        theme=ThemeExtension(
            keyframes={"wiggle": {"0%, 100%": {"transform": "rotate(-3deg)"}, "50%": {"transform": "rotate(3deg)"}}},
            animation={"wiggle": "wiggle 1s ease-in-out infinite"},
            background_image={"hero": "url('/img/hero.png')"},
        ),
        fonts=(FontDescriptor(family="Inter", path="fonts/inter-400.woff2"),),
    )


@pytest.fixture
def memory_source(site_content) -> InMemorySiteSource:
    source = InMemorySiteSource()
    source.add(site_content)
    source.updated_at["site-1"] = ["2025-01-10T08:00:00Z", "2025-01-14T09:30:00Z"]
    return source


def _write_json(path, data) -> None:
    import json

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


@pytest.fixture
def site_root(tmp_path):
    """A DirectorySiteSource root holding one site, ``acme``."""
    site = tmp_path / "acme"
    _write_json(
        site / "pages" / "home.json",
        {"id": "home", "slug": "", "content": {"hero": {"className": "flex gap-4 bg-primary"}}},
    )
    (site / "pages" / "landing.html").write_text(
        '<main class="p-4 md:p-8"><style>.landing { color: teal; }</style></main>', encoding="utf-8"
    )
    _write_json(
        site / "components" / "button.json",
        {
            "id": "button",
            "name": "Button",
            "html": '<button class="rounded-md px-4">Go</button>',
            "variants": [{"html": '<button class="bg-gray-200">Go</button>'}, '<a class="underline">Go</a>'],
            "customCss": ".btn-icon { width: 1rem; }",
        },
    )
    (site / "templates").mkdir()
    (site / "templates" / "post.html").write_text('<article class="max-w-prose">', encoding="utf-8")
    _write_json(
        site / "global" / "footer.json",
        {"id": "footer", "position": "footer", "html": '<footer class="mt-auto"></footer>'},
    )
    _write_json(site / "design_tokens.json", {"colors": {"brand": {"primary": "#123456"}}})
    _write_json(site / "settings.json", {"theme": {"animation": {"pulse-slow": "pulse 3s infinite"}}})
    _write_json(site / "fonts.json", [{"family": "Inter", "path": "fonts/inter.woff2", "weight": "600"}])
    return tmp_path

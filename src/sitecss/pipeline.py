"""CSS export pipeline: gather site inputs, compile utilities, assemble the stylesheet."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Callable, Sequence

from sitecss.assembler import assemble
from sitecss.config import SiteCSSConfig
from sitecss.extract import ClassExtractor, collect_style_css, combine_css
from sitecss.extract.styles import filter_design_tokens
from sitecss.generators import generate_base_css, generate_design_tokens_css
from sitecss.model.document import CompiledDocument
from sitecss.model.site import FontDescriptor, SiteContent
from sitecss.model.theme import merge_theme
from sitecss.sources import SiteSource
from sitecss.tiers import CompileRequest, Tier, TierChain, build_tiers

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CSSExportPipeline:
    """Turns one site's stored content into a single stylesheet.

    Input gathering runs on a small thread pool; everything after the join
    is synchronous. Tiers are tried in order and the first success wins.
    """

    def __init__(
        self,
        source: SiteSource,
        config: SiteCSSConfig | None = None,
        *,
        tiers: Sequence[Tier] | None = None,
        clock: Clock | None = None,
        extractor: ClassExtractor | None = None,
    ) -> None:
        self.source = source
        self.config = config or SiteCSSConfig()
        self.tiers = list(tiers) if tiers is not None else build_tiers(self.config)
        self.clock = clock or _utcnow
        self.extractor = extractor or ClassExtractor()

    def gather(self, site_id: str) -> SiteContent:
        """Fetch every input for ``site_id`` concurrently.

        Raises SiteNotFoundError if the source does not know the site. A
        failure to load font metadata only drops the font section.
        """
        with ThreadPoolExecutor(max_workers=7, thread_name_prefix="sitecss-gather") as pool:
            pages = pool.submit(self.source.fetch_pages, site_id)
            components = pool.submit(self.source.fetch_components, site_id)
            templates = pool.submit(self.source.fetch_templates, site_id)
            global_components = pool.submit(self.source.fetch_global_components, site_id)
            design_tokens = pool.submit(self.source.fetch_design_tokens, site_id)
            theme = pool.submit(self.source.fetch_theme, site_id)
            fonts = pool.submit(self._fetch_fonts, site_id)

            return SiteContent(
                site_id=site_id,
                pages=tuple(pages.result()),
                components=tuple(components.result()),
                templates=tuple(templates.result()),
                global_components=tuple(global_components.result()),
                design_tokens=design_tokens.result(),
                theme=theme.result(),
                fonts=tuple(fonts.result()),
            )

    def _fetch_fonts(self, site_id: str) -> list[FontDescriptor]:
        try:
            return self.source.fetch_fonts(site_id)
        except (OSError, ValueError, KeyError, TypeError) as exc:
            logger.warning("Could not load font metadata for site %s: %s", site_id, exc)
            return []

    def compile(self, content: SiteContent) -> CompiledDocument:
        """Compile gathered content. Raises CompilationError if every tier fails."""
        blobs = content.markup_blobs()
        extraction = self.extractor.extract(blobs)
        theme = merge_theme(content.theme, extraction.theme)
        logger.info(
            "Compiling %d classes for site %s with %d tiers",
            len(extraction.classes),
            content.site_id,
            len(self.tiers),
        )

        result = TierChain(self.tiers).run(
            CompileRequest(markup=tuple(blobs), classes=extraction.classes, theme=theme)
        )
        logger.info("Utilities for site %s compiled by tier %s", content.site_id, result.tier)

        return assemble(
            site_id=content.site_id,
            generated_at=self.clock(),
            class_count=len(extraction.classes),
            utilities_css=result.css,
            base_css=generate_base_css() if self.config.include_reset else "",
            theme=theme,
            fonts=content.fonts,
            component_css=combine_css(
                *(filter_design_tokens(comp.custom_css)[0] for comp in content.components)
            ),
            page_css=collect_style_css(content.page_markup()),
            global_css=combine_css(
                *(filter_design_tokens(gc.custom_css)[0] for gc in content.global_components),
                collect_style_css(gc.html for gc in content.global_components),
            ),
            design_tokens_css=generate_design_tokens_css(content.design_tokens),
        )

    def build(self, site_id: str) -> CompiledDocument:
        return self.compile(self.gather(site_id))

    def export(self, site_id: str) -> str:
        """Gather, compile and serialize the stylesheet for ``site_id``."""
        return self.build(site_id).to_css()

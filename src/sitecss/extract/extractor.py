"""Class extractor: the union of every extraction rule over every markup blob."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from sitecss.extract.rules import DEFAULT_RULES, ExtractionRule
from sitecss.extract.theme_literal import extract_config_theme, scan_background_images
from sitecss.model.theme import ThemeExtension, merge_theme

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractionResult:
    """Ordered, deduplicated class tokens plus any theme found inline."""

    classes: tuple[str, ...] = ()
    theme: ThemeExtension = field(default_factory=ThemeExtension)

    def __len__(self) -> int:
        return len(self.classes)

    def __contains__(self, token: object) -> bool:
        return token in self.classes


class ClassExtractor:
    """Scan markup blobs with a table of independent extraction rules."""

    def __init__(self, rules: Iterable[ExtractionRule] = DEFAULT_RULES) -> None:
        self.rules = tuple(rules)

    def extract(self, blobs: Iterable[str]) -> ExtractionResult:
        seen: dict[str, None] = {}
        theme = ThemeExtension()
        for blob in blobs:
            if not blob:
                continue
            for rule in self.rules:
                for token in rule.apply(blob):
                    seen.setdefault(token, None)
            theme = merge_theme(theme, self._inline_theme(blob))
        logger.debug("Extracted %d class tokens", len(seen))
        return ExtractionResult(classes=tuple(seen), theme=theme)

    @staticmethod
    def _inline_theme(blob: str) -> ThemeExtension:
        scanned = scan_background_images(blob)
        structured = extract_config_theme(blob)
        if not scanned:
            return structured
        return merge_theme(ThemeExtension(background_image=scanned), structured)


def extract_classes(
    blobs: Iterable[str] | str,
    rules: Iterable[ExtractionRule] | None = None,
) -> ExtractionResult:
    """Extract class tokens and inline theme from one blob or many."""
    if isinstance(blobs, str):
        blobs = [blobs]
    extractor = ClassExtractor(rules) if rules is not None else ClassExtractor()
    return extractor.extract(blobs)

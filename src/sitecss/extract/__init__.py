"""Class-token, inline-theme and style-block extraction from markup."""

from sitecss.extract.extractor import ClassExtractor, ExtractionResult, extract_classes
from sitecss.extract.rules import DEFAULT_RULES, ExtractionRule
from sitecss.extract.styles import collect_style_css, combine_css, extract_and_filter
from sitecss.extract.theme_literal import extract_config_theme, parse_js_object

__all__ = [
    "ClassExtractor",
    "ExtractionResult",
    "extract_classes",
    "DEFAULT_RULES",
    "ExtractionRule",
    "collect_style_css",
    "combine_css",
    "extract_and_filter",
    "extract_config_theme",
    "parse_js_object",
]

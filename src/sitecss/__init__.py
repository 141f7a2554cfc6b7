"""sitecss: compile a site's utility classes and design tokens into one stylesheet."""
from __future__ import annotations

__version__ = "0.1.0"

from sitecss.config import SiteCSSConfig
from sitecss.errors import (
    CompilationError,
    EngineError,
    SiteCSSError,
    SiteNotFoundError,
)
from sitecss.pipeline import CSSExportPipeline
from sitecss.report import build_report, css_version
from sitecss.sources import DirectorySiteSource, InMemorySiteSource, SiteSource

__all__ = [
    "__version__",
    "CSSExportPipeline",
    "CompilationError",
    "DirectorySiteSource",
    "EngineError",
    "InMemorySiteSource",
    "SiteCSSConfig",
    "SiteCSSError",
    "SiteNotFoundError",
    "SiteSource",
    "build_report",
    "css_version",
]

"""Coverage report over extracted classes, and the stylesheet version hash."""

from __future__ import annotations

import hashlib
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable

from sitecss.tiers.fallback import FallbackCompiler

_RESPONSIVE_RE = re.compile(r"^(sm|md|lg|xl|2xl):")
_STATE_RE = re.compile(r"^(hover|focus|active|group-hover|focus-within|focus-visible|disabled|first|last|odd|even):")
_ANIMATION_RE = re.compile(r"animate-|transition|duration|ease|delay")
_GRAY_RE = re.compile(r"-(gray|slate|zinc|neutral|stone)-\d+")

_DESIGN_TOKEN_RES = (
    re.compile(r"^(bg|text|border)-(primary|secondary|accent|muted|foreground|background|border)$"),
    re.compile(r"^font-(heading|body|mono)$"),
    re.compile(r"^shadow-(sm|md|lg|xl)$"),
)

CATEGORIES = ("responsive", "state", "arbitrary", "design_token", "animation", "standard", "unknown")


def is_arbitrary(token: str) -> bool:
    return "[" in token and "]" in token


def categorize(token: str, compiler: FallbackCompiler) -> str:
    """First matching category wins, checked in ``CATEGORIES`` order."""
    if _RESPONSIVE_RE.match(token):
        return "responsive"
    if _STATE_RE.match(token):
        return "state"
    if is_arbitrary(token):
        return "arbitrary"
    if any(pattern.match(token) for pattern in _DESIGN_TOKEN_RES):
        return "design_token"
    if _ANIMATION_RE.search(token):
        return "animation"
    if compiler.covers(token):
        return "standard"
    return "unknown"


@dataclass
class CoverageReport:
    classes: tuple[str, ...]
    categories: dict[str, list[str]] = field(default_factory=dict)
    site_id: str | None = None
    generated_at: datetime | None = None

    @property
    def issues(self) -> list[str]:
        issues: list[str] = []
        risky = [
            cls for cls in self.categories["arbitrary"]
            if "var(" in cls or "rgb(" in cls or "rgba(" in cls
        ]
        if risky:
            issues.append(
                f"{len(risky)} arbitrary values with CSS variables/functions - may need fallback CSS"
            )
        grays = [
            cls for cls in self.categories["standard"] + self.categories["unknown"]
            if _GRAY_RE.search(cls)
        ]
        if grays:
            issues.append(f"{len(grays)} gray/neutral color classes - consider using design tokens instead")
        if self.categories["unknown"]:
            issues.append(
                f"{len(self.categories['unknown'])} unknown classes - may not have CSS generated"
            )
        return issues

    def to_dict(self) -> dict[str, Any]:
        return {
            "siteId": self.site_id,
            "timestamp": self.generated_at.isoformat() if self.generated_at else None,
            "summary": {
                "totalClasses": len(self.classes),
                "byCategory": {name: len(self.categories[name]) for name in CATEGORIES},
            },
            "potentialIssues": self.issues,
            "details": {name: sorted(self.categories[name]) for name in CATEGORIES if name != "standard"},
        }


def build_report(
    classes: Iterable[str],
    *,
    site_id: str | None = None,
    generated_at: datetime | None = None,
    compiler: FallbackCompiler | None = None,
) -> CoverageReport:
    compiler = compiler or FallbackCompiler()
    tokens = tuple(dict.fromkeys(classes))
    categories: dict[str, list[str]] = {name: [] for name in CATEGORIES}
    for token in tokens:
        categories[categorize(token, compiler)].append(token)
    return CoverageReport(
        classes=tokens,
        categories=categories,
        site_id=site_id,
        generated_at=generated_at,
    )


@dataclass(frozen=True)
class CSSVersion:
    version: str
    version_long: str
    last_updated: str
    cache_url: str

    def to_dict(self) -> dict[str, str]:
        return {
            "version": self.version,
            "version_long": self.version_long,
            "last_updated": self.last_updated,
            "cache_url": self.cache_url,
        }


def css_version(
    site_id: str,
    timestamps: Iterable[str | None],
    *,
    now: datetime | None = None,
    url_prefix: str = "/sites",
) -> CSSVersion:
    """Hash ``"<site_id>-<latest timestamp>"`` for cache busting.

    With no timestamps the current time is used, so the version changes on
    every call.
    """
    present = sorted((ts for ts in timestamps if ts), reverse=True)
    latest = present[0] if present else (now or datetime.now()).isoformat()
    seed = f"{site_id}-{latest}".encode()
    version = hashlib.md5(seed).hexdigest()[:12]
    return CSSVersion(
        version=version,
        version_long=hashlib.sha256(seed).hexdigest(),
        last_updated=latest,
        cache_url=f"{url_prefix}/{site_id}/export/css?v={version}",
    )

"""Tier result model: success or failure of one compilation tier."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TierResult:
    """Outcome of a single tier attempt.

    Exactly one of ``css`` (on success) or ``error`` (on failure) is meaningful.
    """

    tier: str
    css: str = ""
    error: Exception | None = None

    @classmethod
    def success(cls, tier: str, css: str) -> TierResult:
        return cls(tier=tier, css=css)

    @classmethod
    def failure(cls, tier: str, error: Exception) -> TierResult:
        return cls(tier=tier, error=error)

    @property
    def ok(self) -> bool:
        """True if the tier produced usable CSS."""
        return self.error is None

    @property
    def failed(self) -> bool:
        return self.error is not None

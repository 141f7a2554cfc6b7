from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from sitecss.model.result import TierResult
from sitecss.model.theme import ThemeExtension


@dataclass(frozen=True)
class CompileRequest:
    """Inputs shared by every tier.

    Tier 1 reads the raw ``markup``; Tiers 2 and 3 read the extracted
    ``classes``.
    """

    markup: tuple[str, ...] = ()
    classes: tuple[str, ...] = ()
    theme: ThemeExtension = field(default_factory=ThemeExtension)


class Tier(Protocol):
    """Protocol for a compilation tier."""

    name: str

    def compile(self, request: CompileRequest) -> TierResult:
        """Compile utilities. Returns a failed result instead of raising."""
        ...

"""First-success-wins combinator over the compilation tiers."""

from __future__ import annotations

import logging
from typing import Sequence

from sitecss.errors import CompilationError
from sitecss.model.result import TierResult
from sitecss.tiers.base import CompileRequest, Tier

logger = logging.getLogger(__name__)


class TierChain:
    """Run tiers strictly in order until one succeeds."""

    def __init__(self, tiers: Sequence[Tier]) -> None:
        self.tiers = tuple(tiers)

    def run(self, request: CompileRequest) -> TierResult:
        """Return the first successful result.

        Raises CompilationError carrying every failed result when no tier
        succeeds.
        """
        failures: list[TierResult] = []
        for tier in self.tiers:
            logger.info("Compiling utilities with %s tier", tier.name)
            try:
                result = tier.compile(request)
            except Exception as exc:  # a tier raising is an internal defect
                logger.exception("Tier %s raised instead of returning a result", tier.name)
                result = TierResult.failure(tier.name, exc)
            if result.ok:
                return result
            logger.warning("Tier %s failed: %s", tier.name, result.error)
            failures.append(result)
        raise CompilationError(
            f"All {len(self.tiers)} tiers failed to compile utilities",
            failures=failures,
        )

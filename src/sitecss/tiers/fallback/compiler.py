"""Tier 3: the dependency-free fallback rule compiler.

Every token is parsed by the utility grammar and run through an ordered
matcher list: the static table first, then the shape matchers, then the
arbitrary-value matcher. The first rule produced wins. Tokens with a
responsive prefix land in that breakpoint's bucket; unmatched tokens are
dropped.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from sitecss.grammar.utility import parse_utility
from sitecss.model.css import CSSRule, RuleSet
from sitecss.model.result import TierResult
from sitecss.tiers.base import CompileRequest
from sitecss.tiers.fallback.arbitrary import match_arbitrary
from sitecss.tiers.fallback.matchers import SCALE_MATCHERS, Matcher, match_static

logger = logging.getLogger(__name__)

DEFAULT_MATCHERS: tuple[Matcher, ...] = (match_static, *SCALE_MATCHERS, match_arbitrary)


class FallbackCompiler:
    """Pattern-matching compiler: class token -> zero or one CSS rule."""

    name = "fallback"

    def __init__(self, matchers: Sequence[Matcher] = DEFAULT_MATCHERS) -> None:
        self.matchers = tuple(matchers)

    def compile_token(self, token: str) -> tuple[CSSRule, str | None] | None:
        """Return the rule for ``token`` and its breakpoint, or None."""
        parsed = parse_utility(token)
        if parsed is None:
            return None
        for matcher in self.matchers:
            rule = matcher(parsed)
            if rule is not None:
                return rule, parsed.responsive
        return None

    def compile_classes(self, classes: Iterable[str]) -> RuleSet:
        rules = RuleSet()
        for token in classes:
            compiled = self.compile_token(token)
            if compiled is not None:
                rule, breakpoint = compiled
                rules.add(rule, breakpoint)
        return rules

    def covers(self, token: str) -> bool:
        return self.compile_token(token) is not None

    def compile(self, request: CompileRequest) -> TierResult:
        rules = self.compile_classes(request.classes)
        logger.debug(
            "Fallback compiler produced %d rules for %d tokens",
            len(rules),
            len(request.classes),
        )
        return TierResult.success(self.name, rules.to_css())

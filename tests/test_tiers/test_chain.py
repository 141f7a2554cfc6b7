from __future__ import annotations

import pytest

from sitecss.errors import CompilationError
from sitecss.model.result import TierResult
from sitecss.tiers import TierChain
from sitecss.tiers.base import CompileRequest


class ExplodingTier:
    name = "exploding"

    def compile(self, request: CompileRequest) -> TierResult:
        raise RuntimeError("kaboom")


class TestTierChain:
    def test_first_success_wins(self, failing_tier_factory, static_tier_factory) -> None:
        failing = failing_tier_factory("primary")
        winner = static_tier_factory("secondary", ".a { color: red; }")
        later = static_tier_factory("fallback", ".b { color: blue; }")
        result = TierChain([failing, winner, later]).run(CompileRequest(classes=("a",)))
        assert result.tier == "secondary"
        assert result.css == ".a { color: red; }"
        assert failing.calls == 1
        assert len(winner.requests) == 1
        assert later.requests == []

    def test_all_failures_are_reported(self, failing_tier_factory) -> None:
        tiers = [failing_tier_factory("primary"), failing_tier_factory("secondary")]
        with pytest.raises(CompilationError) as excinfo:
            TierChain(tiers).run(CompileRequest())
        failures = excinfo.value.failures
        assert [f.tier for f in failures] == ["primary", "secondary"]
        assert str(failures[0].error) == "primary unavailable"

    def test_raising_tier_becomes_failure(self, static_tier_factory) -> None:
        fallback = static_tier_factory("fallback", ".x { top: 0; }")
        result = TierChain([ExplodingTier(), fallback]).run(CompileRequest())
        assert result.tier == "fallback"

    def test_raising_tier_is_listed(self) -> None:
        with pytest.raises(CompilationError) as excinfo:
            TierChain([ExplodingTier()]).run(CompileRequest())
        (failure,) = excinfo.value.failures
        assert isinstance(failure.error, RuntimeError)

    def test_empty_chain(self) -> None:
        with pytest.raises(CompilationError):
            TierChain([]).run(CompileRequest())

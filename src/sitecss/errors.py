"""Error hierarchy for the sitecss compilation pipeline."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sitecss.model.result import TierResult


class SiteCSSError(Exception):
    """Base error for all sitecss errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Engine errors (recoverable: the next tier is tried)
# ---------------------------------------------------------------------------


class EngineError(SiteCSSError):
    """An external CSS engine could not produce output."""

    def __init__(
        self,
        message: str,
        *,
        tier: str = "",
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.tier = tier


class EngineUnavailableError(EngineError):
    """The engine binary could not be located or started."""


class EngineCompileError(EngineError):
    """The engine ran but exited with an error or produced no CSS."""

    def __init__(
        self,
        message: str,
        *,
        tier: str = "",
        returncode: int | None = None,
        stderr: str = "",
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, tier=tier, cause=cause)
        self.returncode = returncode
        self.stderr = stderr


class EngineTimeoutError(EngineError):
    """The engine did not finish within the configured timeout."""


class PostProcessError(SiteCSSError):
    """Engine output could not be parsed by the post-processor."""

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(message)
        self.line = line
        self.column = column


# ---------------------------------------------------------------------------
# Terminal and input errors
# ---------------------------------------------------------------------------


class CompilationError(SiteCSSError):
    """Every tier failed; no stylesheet can be produced."""

    def __init__(self, message: str, *, failures: list[TierResult] | None = None) -> None:
        super().__init__(message)
        self.failures = list(failures or [])


class ThemeConfigError(SiteCSSError):
    """Raised when an inline theme config literal cannot be parsed."""

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.line = line
        self.column = column


class SiteNotFoundError(SiteCSSError):
    """The requested site does not exist in the content source."""

    def __init__(self, site_id: str) -> None:
        super().__init__(f"Site not found: {site_id}")
        self.site_id = site_id

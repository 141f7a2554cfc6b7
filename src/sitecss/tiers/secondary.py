"""Tier 2: Tailwind CSS v4 standalone CLI run against the extracted class set.

The v4 engine is configured in CSS: the base engine stylesheet is inlined,
followed by an ``@theme`` block built from the theme extension and an
``@source inline(...)`` directive listing the classes. Its output then runs
through the post-processing chain.
"""

from __future__ import annotations

import logging
import re
import tempfile
from pathlib import Path
from typing import Any, Iterator, Sequence

from sitecss.config import SiteCSSConfig
from sitecss.errors import EngineError, EngineUnavailableError, PostProcessError
from sitecss.grammar.values import format_font_stack
from sitecss.model.result import TierResult
from sitecss.model.theme import ThemeExtension
from sitecss.postprocess import postprocess
from sitecss.tiers.base import CompileRequest
from sitecss.tiers.binary import EngineBinary
from sitecss.tiers.runner import run_engine

logger = logging.getLogger(__name__)

FALLBACK_BASE_SOURCE = "@layer theme, base, components, utilities;\n@tailwind utilities;\n"

_RELATIVE_IMPORT_RE = re.compile(r"""@import\s+(?P<q>['"])(?P<path>\.{1,2}/[^'"]+)(?P=q)""")


def rewrite_relative_imports(source: str, base_dir: Path) -> str:
    """Point ``@import './x.css'`` lines at absolute paths under ``base_dir``."""

    def _absolute(match: re.Match[str]) -> str:
        target = (base_dir / match.group("path")).resolve().as_posix()
        quote = match.group("q")
        return f"@import {quote}{target}{quote}"

    return _RELATIVE_IMPORT_RE.sub(_absolute, source)


class BaseSourceCache:
    """Loads the base engine stylesheet once per process.

    Only a real, successfully read source is cached; the minimal fallback is
    returned on every miss so a later install is still picked up.
    """

    def __init__(self, search_paths: Sequence[str | Path]) -> None:
        self.search_paths = tuple(Path(p) for p in search_paths)
        self._source: str | None = None

    @property
    def loaded(self) -> bool:
        return self._source is not None

    def get_or_load(self) -> str:
        if self._source is not None:
            return self._source
        for path in self.search_paths:
            try:
                text = path.read_text(encoding="utf-8")
            except OSError:
                logger.debug("Base engine source not readable at %s", path)
                continue
            self._source = rewrite_relative_imports(text, path.parent.resolve())
            logger.info("Loaded base engine source from %s", path)
            return self._source
        logger.info("No base engine source found; using minimal fallback")
        return FALLBACK_BASE_SOURCE


def flatten_colors(colors: dict[str, Any], prefix: str = "") -> Iterator[tuple[str, str]]:
    """``{"brand": {"DEFAULT": "#111", "500": "#222"}}`` -> ``brand``, ``brand-500``."""
    for key, value in colors.items():
        if key == "DEFAULT":
            name = prefix
        else:
            name = f"{prefix}-{key}" if prefix else str(key)
        if isinstance(value, dict):
            yield from flatten_colors(value, name)
        elif name:
            yield name, str(value)


def build_theme_block(theme: ThemeExtension) -> str:
    lines: list[str] = []
    for name, value in flatten_colors(theme.colors or {}):
        lines.append(f"  --color-{name}: {value};")
    for name, stack in (theme.font_family or {}).items():
        lines.append(f"  --font-{name}: {format_font_stack(stack)};")
    for name, value in theme.animation.items():
        lines.append(f"  --animate-{name}: {value};")
    if not lines:
        return ""
    return "@theme {\n" + "\n".join(lines) + "\n}\n"


def build_source_directive(classes: Sequence[str]) -> str:
    escaped = " ".join(classes).replace("\\", "\\\\").replace('"', '\\"')
    return f'@source inline("{escaped}");\n'


def build_input_css(base_source: str, theme: ThemeExtension, classes: Sequence[str]) -> str:
    parts = [base_source.rstrip() + "\n"]
    theme_block = build_theme_block(theme)
    if theme_block:
        parts.append(theme_block)
    parts.append(build_source_directive(classes))
    return "\n".join(parts)


class SecondaryEngine:
    """Runs the v4 CLI against the class set, then post-processes the result."""

    name = "secondary"

    def __init__(
        self,
        binary: EngineBinary,
        base_source: BaseSourceCache,
        *,
        timeout: float = 60.0,
    ) -> None:
        self.binary = binary
        self.base_source = base_source
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: SiteCSSConfig, base_source: BaseSourceCache | None = None) -> SecondaryEngine:
        binary = EngineBinary(
            config.secondary_version,
            explicit_path=config.secondary_engine,
            path_names=("tailwindcss4", "tailwindcss"),
            cache_dir=config.cache_dir,
            allow_download=config.allow_download,
            tier=cls.name,
        )
        return cls(
            binary,
            base_source or BaseSourceCache(config.base_source_paths),
            timeout=config.engine_timeout,
        )

    def compile(self, request: CompileRequest) -> TierResult:
        try:
            raw = self._run(request)
            css = postprocess(raw)
        except (EngineError, PostProcessError) as exc:
            return TierResult.failure(self.name, exc)
        return TierResult.success(self.name, css)

    def _run(self, request: CompileRequest) -> str:
        binary = self.binary.resolve()
        input_css = build_input_css(self.base_source.get_or_load(), request.theme, request.classes)
        try:
            with tempfile.TemporaryDirectory(prefix="sitecss-v4-") as tmp:
                work = Path(tmp)
                input_path = work / "input.css"
                input_path.write_text(input_css, encoding="utf-8")
                return run_engine(
                    binary,
                    input_css=input_path,
                    output_css=work / "output.css",
                    cwd=work,
                    timeout=self.timeout,
                    tier=self.name,
                )
        except OSError as exc:
            raise EngineUnavailableError(
                f"Could not prepare engine workspace: {exc}", tier=self.name, cause=exc
            ) from exc

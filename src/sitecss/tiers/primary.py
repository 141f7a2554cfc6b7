"""Tier 1: Tailwind CSS v3 standalone CLI run against the raw markup."""

from __future__ import annotations

import json
import logging
import tempfile
from pathlib import Path
from typing import Any

from sitecss.config import SiteCSSConfig
from sitecss.errors import EngineError, EngineUnavailableError
from sitecss.model.result import TierResult
from sitecss.model.theme import ThemeExtension
from sitecss.tiers.base import CompileRequest
from sitecss.tiers.binary import EngineBinary
from sitecss.tiers.runner import run_engine

logger = logging.getLogger(__name__)

TAILWIND_DIRECTIVES = "@tailwind base;\n@tailwind components;\n@tailwind utilities;\n"


def build_engine_config(markup: tuple[str, ...] | list[str], theme: ThemeExtension) -> dict[str, Any]:
    """The ``tailwind.config.js`` payload: inline content, theme extension, preflight on."""
    raw = TAILWIND_DIRECTIVES + "\n".join(markup)
    return {
        "content": [{"raw": raw, "extension": "html"}],
        "theme": {"extend": theme.to_dict()},
        "corePlugins": {"preflight": True},
    }


def render_engine_config(config: dict[str, Any]) -> str:
    return "module.exports = " + json.dumps(config, indent=2, ensure_ascii=False) + ";\n"


class PrimaryEngine:
    """Runs the v3 CLI with a generated config; failures become failed results."""

    name = "primary"

    def __init__(self, binary: EngineBinary, *, timeout: float = 60.0) -> None:
        self.binary = binary
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: SiteCSSConfig) -> PrimaryEngine:
        binary = EngineBinary(
            config.primary_version,
            explicit_path=config.primary_engine,
            path_names=("tailwindcss3", "tailwindcss"),
            cache_dir=config.cache_dir,
            allow_download=config.allow_download,
            tier=cls.name,
        )
        return cls(binary, timeout=config.engine_timeout)

    def compile(self, request: CompileRequest) -> TierResult:
        try:
            css = self._run(request)
        except EngineError as exc:
            return TierResult.failure(self.name, exc)
        return TierResult.success(self.name, css)

    def _run(self, request: CompileRequest) -> str:
        binary = self.binary.resolve()
        config = build_engine_config(request.markup, request.theme)
        try:
            with tempfile.TemporaryDirectory(prefix="sitecss-v3-") as tmp:
                work = Path(tmp)
                config_path = work / "tailwind.config.js"
                input_path = work / "input.css"
                config_path.write_text(render_engine_config(config), encoding="utf-8")
                input_path.write_text(TAILWIND_DIRECTIVES, encoding="utf-8")
                return run_engine(
                    binary,
                    input_css=input_path,
                    output_css=work / "output.css",
                    cwd=work,
                    timeout=self.timeout,
                    tier=self.name,
                    extra_args=("--config", str(config_path)),
                )
        except OSError as exc:
            raise EngineUnavailableError(
                f"Could not prepare engine workspace: {exc}", tier=self.name, cause=exc
            ) from exc

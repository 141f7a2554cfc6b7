"""Run an engine CLI as a subprocess and map its failures to engine errors."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from sitecss.errors import (
    EngineCompileError,
    EngineTimeoutError,
    EngineUnavailableError,
)

logger = logging.getLogger(__name__)


def run_engine(
    binary: Path,
    *,
    input_css: Path,
    output_css: Path,
    cwd: Path,
    timeout: float,
    tier: str,
    extra_args: tuple[str, ...] = (),
) -> str:
    """Compile ``input_css`` to ``output_css`` and return the CSS text.

    Raises EngineUnavailableError, EngineTimeoutError or EngineCompileError.
    """
    cmd = [str(binary), "--input", str(input_css), "--output", str(output_css), *extra_args]
    logger.debug("Running engine: %s", " ".join(cmd))
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
            cwd=str(cwd),
        )
    except subprocess.TimeoutExpired as exc:
        raise EngineTimeoutError(
            f"Engine timed out after {timeout:g}s", tier=tier, cause=exc
        ) from exc
    except OSError as exc:
        raise EngineUnavailableError(
            f"Engine could not be started: {exc}", tier=tier, cause=exc
        ) from exc

    if result.returncode != 0:
        raise EngineCompileError(
            f"Engine exited with status {result.returncode}",
            tier=tier,
            returncode=result.returncode,
            stderr=result.stderr or "",
        )

    try:
        css = output_css.read_text(encoding="utf-8")
    except OSError as exc:
        raise EngineCompileError(
            f"Engine produced no output file: {exc}", tier=tier, returncode=0, cause=exc
        ) from exc
    if not css.strip():
        raise EngineCompileError("Engine produced empty output", tier=tier, returncode=0)
    return css

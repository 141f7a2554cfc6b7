from __future__ import annotations

import subprocess

import pytest

from sitecss.errors import EngineCompileError, EngineTimeoutError, EngineUnavailableError
from sitecss.tiers.runner import run_engine


def _run(binary_path, tmp_path, **kwargs):
    input_css = tmp_path / "input.css"
    input_css.write_text("@tailwind utilities;")
    return run_engine(
        binary_path,
        input_css=input_css,
        output_css=tmp_path / "output.css",
        cwd=tmp_path,
        timeout=5,
        tier="primary",
        **kwargs,
    )


class TestRunEngine:
    def test_returns_output(self, fake_engine, binary_path, tmp_path) -> None:
        engine = fake_engine(output=".flex { display: flex; }")
        assert _run(binary_path, tmp_path, extra_args=("--minify",)) == ".flex { display: flex; }"
        cmd, kwargs = engine.calls[0]
        assert cmd[0] == str(binary_path)
        assert cmd[1:3] == ["--input", str(tmp_path / "input.css")]
        assert cmd[-1] == "--minify"
        assert kwargs["timeout"] == 5

    def test_nonzero_exit(self, fake_engine, binary_path, tmp_path) -> None:
        fake_engine(returncode=1, stderr="boom")
        with pytest.raises(EngineCompileError) as excinfo:
            _run(binary_path, tmp_path)
        assert excinfo.value.returncode == 1
        assert excinfo.value.stderr == "boom"

    def test_timeout(self, fake_engine, binary_path, tmp_path) -> None:
        fake_engine(exc=subprocess.TimeoutExpired(cmd="tailwindcss", timeout=5))
        with pytest.raises(EngineTimeoutError):
            _run(binary_path, tmp_path)

    def test_cannot_start(self, fake_engine, binary_path, tmp_path) -> None:
        fake_engine(exc=PermissionError("not executable"))
        with pytest.raises(EngineUnavailableError):
            _run(binary_path, tmp_path)

    def test_missing_output_file(self, fake_engine, binary_path, tmp_path) -> None:
        fake_engine(output=None)
        with pytest.raises(EngineCompileError):
            _run(binary_path, tmp_path)

    def test_empty_output(self, fake_engine, binary_path, tmp_path) -> None:
        fake_engine(output="   \n")
        with pytest.raises(EngineCompileError, match="empty output"):
            _run(binary_path, tmp_path)

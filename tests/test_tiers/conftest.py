from __future__ import annotations

import subprocess
from pathlib import Path

import pytest


class FakeEngine:
    """Stands in for ``subprocess.run`` and behaves like a Tailwind CLI."""

    def __init__(self, output: str | None = "", returncode: int = 0, stderr: str = "", exc=None) -> None:
        self.output = output
        self.returncode = returncode
        self.stderr = stderr
        self.exc = exc
        self.calls: list[tuple[list[str], dict]] = []
        self.inputs: dict[str, str] = {}

    def __call__(self, cmd, **kwargs):
        self.calls.append((list(cmd), kwargs))
        if self.exc is not None:
            raise self.exc
        for flag in ("--input", "--config"):
            if flag in cmd:
                self.inputs[flag] = Path(cmd[cmd.index(flag) + 1]).read_text(encoding="utf-8")
        if self.returncode == 0 and self.output is not None:
            Path(cmd[cmd.index("--output") + 1]).write_text(self.output, encoding="utf-8")
        return subprocess.CompletedProcess(cmd, self.returncode, stdout="", stderr=self.stderr)


@pytest.fixture
def fake_engine(monkeypatch):
    """Install a FakeEngine in place of ``subprocess.run``."""

    def install(**kwargs) -> FakeEngine:
        engine = FakeEngine(**kwargs)
        monkeypatch.setattr("sitecss.tiers.runner.subprocess.run", engine)
        return engine

    return install


@pytest.fixture
def binary_path(tmp_path) -> Path:
    path = tmp_path / "bin" / "tailwindcss"
    path.parent.mkdir()
    path.write_text("#!/bin/sh\nexit 0\n")
    return path


@pytest.fixture
def no_path_lookup(monkeypatch):
    monkeypatch.setattr("sitecss.tiers.binary.shutil.which", lambda name: None)

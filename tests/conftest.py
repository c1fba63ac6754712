from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

from tests.fixtures.processes import FakeRun

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from projkit.console import Reporter  # noqa: E402

TEMPLATE_NAMES = (
    ".czrc",
    ".git-cz.json",
    ".lintstagedrc",
    ".editorconfig",
    ".prettierrc",
    ".eslintrc",
    ".eslintrc.typescript",
    ".eslintrc.prettier",
    ".eslintrc.typescript.prettier",
)


class CapturingReporter(Reporter):
    """Reporter writing plain text into a buffer."""

    def __init__(self) -> None:
        self.buffer = io.StringIO()
        super().__init__(Console(file=self.buffer, width=200, color_system=None, highlight=False))

    @property
    def text(self) -> str:
        return self.buffer.getvalue()


@pytest.fixture()
def reporter() -> CapturingReporter:
    return CapturingReporter()


@pytest.fixture()
def fake_run() -> FakeRun:
    return FakeRun()


@pytest.fixture()
def template_dir(tmp_path: Path) -> Path:
    """A template store holding every template the built-in jobs copy."""

    directory = tmp_path / "templates"
    directory.mkdir()
    for name in TEMPLATE_NAMES:
        (directory / name).write_bytes(f"template {name}\n".encode("utf-8"))
    return directory


@pytest.fixture()
def project_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "project"
    directory.mkdir()
    return directory

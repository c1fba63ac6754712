"""Error types separating fatal failures from per-job ones."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

__all__ = [
    "CommandError",
    "FileConflict",
    "InstallError",
    "JobError",
    "ProjkitError",
    "TemplateNotFoundError",
]


class ProjkitError(RuntimeError):
    """Base class for errors raised by projkit."""


class InstallError(ProjkitError):
    """Raised when the package manager fails. Aborts the whole setup."""

    def __init__(
        self,
        command: Sequence[str],
        *,
        returncode: int | None = None,
        stderr: str = "",
        reason: str | None = None,
    ) -> None:
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        if reason is None:
            reason = stderr.strip() or f"exited with status {returncode}"
        super().__init__(f"{' '.join(self.command)}: {reason}")


class JobError(ProjkitError):
    """Raised when a single tool's setup fails. Other jobs keep running."""


class CommandError(JobError):
    """A setup command exited unsuccessfully."""

    def __init__(self, command: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        message = f"command {' '.join(self.command)!r} failed with status {returncode}"
        if stderr.strip():
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)


class TemplateNotFoundError(JobError):
    """The requested template does not exist in the template store."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"template not found: {path}")


@dataclass(frozen=True, slots=True)
class FileConflict:
    """A destination that already existed and was left untouched."""

    name: str
    path: Path

    def __str__(self) -> str:
        return f"File existed at: {self.path}"

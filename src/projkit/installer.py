"""Install development packages with the chosen package manager."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Callable, Sequence

from .console import Reporter
from .errors import InstallError
from .tools import PackageManager

__all__ = ["Installer", "PNPM_WORKSPACE_FILE", "build_install_command", "in_pnpm_workspace"]


LOGGER = logging.getLogger(__name__)

PNPM_WORKSPACE_FILE = "pnpm-workspace.yaml"

RunCommand = Callable[..., "subprocess.CompletedProcess[str]"]


def in_pnpm_workspace(directory: str | Path) -> bool:
    """Return whether ``directory`` is the root of a pnpm workspace."""

    return (Path(directory) / PNPM_WORKSPACE_FILE).is_file()


def build_install_command(
    packages: Sequence[str], manager: PackageManager | str, cwd: str | Path
) -> list[str]:
    """Return the argv installing ``packages`` as development dependencies."""

    manager = PackageManager(manager)
    command = [manager.value, "add", *packages, "-D"]
    if manager is PackageManager.PNPM and in_pnpm_workspace(cwd):
        command.append("-w")
    return command


class Installer:
    """Run a single package manager invocation inside ``cwd``."""

    def __init__(
        self,
        cwd: str | Path,
        reporter: Reporter | None = None,
        *,
        run: RunCommand = subprocess.run,
    ) -> None:
        self.cwd = Path(cwd)
        self.reporter = reporter or Reporter()
        self._run = run

    def install(self, packages: Sequence[str], manager: PackageManager | str) -> str:
        """Install ``packages`` and return the package manager's stdout.

        Raises
        ------
        InstallError
            When the process cannot be started, exits with a non-zero status
            or writes anything to stderr.
        """

        manager = PackageManager(manager)
        if not packages:
            self.reporter.unimportant("No packages need to install")
            return ""

        command = build_install_command(packages, manager, self.cwd)
        self.reporter.log(f"Install packages with {manager}: {' '.join(packages)}")
        LOGGER.debug("running %s in %s", command, self.cwd)

        with self.reporter.spinner("Installing"):
            try:
                result = self._run(command, cwd=self.cwd, capture_output=True, text=True)
            except OSError as exc:
                raise InstallError(command, reason=str(exc)) from exc

        stderr = result.stderr or ""
        if result.returncode != 0 or stderr.strip():
            raise InstallError(command, returncode=result.returncode, stderr=stderr)

        stdout = result.stdout or ""
        self.reporter.success("Packages installed")
        self.reporter.boxed(stdout)
        return stdout

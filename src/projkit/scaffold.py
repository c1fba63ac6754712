"""Set up development tooling for an existing project."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import SetupConfig
from .console import Reporter
from .installer import Installer, build_install_command
from .jobs import CommandRunner, JobOutcome, JobRunner, default_jobs
from .materializer import FileMaterializer
from .resolver import resolve_packages
from .tools import PackageManager, ToolSelection

__all__ = ["InstallPlan", "ToolchainScaffolder"]


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InstallPlan:
    """Packages and command a run would use, without side effects."""

    packages: list[str]
    command: list[str] | None


@dataclass(slots=True)
class ToolchainScaffolder:
    """Install packages, then run each selected tool's job."""

    config: SetupConfig
    reporter: Reporter
    installer: Installer
    runner: JobRunner

    def __init__(
        self,
        config: SetupConfig,
        reporter: Reporter | None = None,
        *,
        installer: Installer | None = None,
        runner: JobRunner | None = None,
    ) -> None:
        self.config = config
        self.reporter = reporter or Reporter()
        self.installer = installer or Installer(config.target_dir, self.reporter)
        if runner is None:
            materializer = FileMaterializer(config.template_dir, config.target_dir, self.reporter)
            jobs = default_jobs(materializer, CommandRunner(config.target_dir))
            runner = JobRunner(jobs, order=config.tool_order, reporter=self.reporter)
        self.runner = runner

    def plan(self, selection: ToolSelection, manager: PackageManager) -> InstallPlan:
        packages = resolve_packages(selection, self.config.tool_order)
        command = None
        if packages:
            command = build_install_command(packages, manager, self.config.target_dir)
        return InstallPlan(packages=packages, command=command)

    def run(self, selection: ToolSelection, manager: PackageManager) -> list[JobOutcome]:
        """Install the resolved packages and run the jobs.

        :class:`~projkit.errors.InstallError` propagates before any job runs.
        Job failures are reported and recorded in the returned outcomes.
        """

        packages = resolve_packages(selection, self.config.tool_order)
        LOGGER.debug("resolved packages: %s", packages)
        self.installer.install(packages, manager)
        return self.runner.run(selection, manager)

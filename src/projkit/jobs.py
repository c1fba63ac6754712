"""Per-tool setup jobs and the runner that executes them in order."""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .console import Reporter
from .errors import CommandError
from .materializer import FileMaterializer
from .tools import TOOL_ORDER, PackageManager, Tool, ToolSelection

__all__ = [
    "CommandRunner",
    "CopyTemplatesJob",
    "EslintConfigJob",
    "GitHooksJob",
    "Job",
    "JobOutcome",
    "JobRunner",
    "JobStatus",
    "default_jobs",
]


LOGGER = logging.getLogger(__name__)

RunCommand = Callable[..., "subprocess.CompletedProcess[str]"]


class JobStatus(str, Enum):
    SKIPPED = "skipped"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class JobOutcome(BaseModel):
    """Result of one tool's job, used for reporting."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    tool: Tool = Field(..., description="Tool the job belongs to.")
    status: JobStatus = Field(..., description="How the job ended.")
    reason: str | None = Field(None, description="Failure description for failed jobs.")

    @classmethod
    def skipped(cls, tool: Tool) -> "JobOutcome":
        return cls(tool=tool, status=JobStatus.SKIPPED)

    @classmethod
    def succeeded(cls, tool: Tool) -> "JobOutcome":
        return cls(tool=tool, status=JobStatus.SUCCEEDED)

    @classmethod
    def failed(cls, tool: Tool, reason: str) -> "JobOutcome":
        return cls(tool=tool, status=JobStatus.FAILED, reason=reason)


class CommandRunner:
    """Run setup commands to completion, raising :class:`CommandError` on failure."""

    def __init__(self, cwd: str | Path, *, run: RunCommand = subprocess.run) -> None:
        self.cwd = Path(cwd)
        self._run = run

    def __call__(self, command: Sequence[str]) -> str:
        LOGGER.debug("running %s in %s", list(command), self.cwd)
        result = self._run(list(command), cwd=self.cwd, capture_output=True, text=True)
        if result.returncode != 0:
            raise CommandError(command, result.returncode, result.stderr or "")
        return result.stdout or ""


class Job(ABC):
    """Setup action for a single tool."""

    tool: Tool

    @abstractmethod
    def run(self, tool: Tool, selection: ToolSelection, manager: PackageManager) -> None:
        """Perform the setup. Any exception marks the job as failed."""


class CopyTemplatesJob(Job):
    """Copy one or more configuration templates into the project."""

    def __init__(self, tool: Tool, files: Sequence[str], materializer: FileMaterializer) -> None:
        self.tool = tool
        self.files = tuple(files)
        self.materializer = materializer

    def run(self, tool: Tool, selection: ToolSelection, manager: PackageManager) -> None:
        self.materializer.copy(*self.files)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.tool.value!r}, {list(self.files)!r})"


class EslintConfigJob(CopyTemplatesJob):
    """Copy the eslint config variant wired for typescript and prettier when selected."""

    CONFIG_FILE = ".eslintrc"
    INTEGRATIONS = (Tool.TYPESCRIPT, Tool.PRETTIER)

    def __init__(self, materializer: FileMaterializer) -> None:
        super().__init__(Tool.ESLINT, [self.CONFIG_FILE], materializer)

    def template_for(self, selection: ToolSelection) -> str:
        suffixes = [f".{tool.value}" for tool in self.INTEGRATIONS if selection.is_wanted(tool)]
        return self.CONFIG_FILE + "".join(suffixes)

    def run(self, tool: Tool, selection: ToolSelection, manager: PackageManager) -> None:
        self.materializer.copy_as((self.template_for(selection), self.CONFIG_FILE))


class GitHooksJob(Job):
    """Install husky and register a pre-commit hook.

    The hook runs lint-staged when that tool is selected too, and the test
    script otherwise.
    """

    tool = Tool.HUSKY

    PREPARE_SCRIPT = ["npm", "pkg", "set", "scripts.prepare=husky"]
    RUN_PREPARE = ["npm", "run", "prepare"]
    HOOK_PATH = Path(".husky") / "pre-commit"
    LINT_STAGED_HOOK = "npx lint-staged"
    TEST_HOOK = "npm test"

    def __init__(self, commands: Callable[[Sequence[str]], object], project_dir: str | Path) -> None:
        self.commands = commands
        self.project_dir = Path(project_dir)

    def hook_command(self, selection: ToolSelection) -> str:
        if selection.is_wanted(Tool.LINT_STAGED):
            return self.LINT_STAGED_HOOK
        return self.TEST_HOOK

    def run(self, tool: Tool, selection: ToolSelection, manager: PackageManager) -> None:
        self.commands(self.PREPARE_SCRIPT)
        self.commands(self.RUN_PREPARE)
        self.write_hook(selection)

    def write_hook(self, selection: ToolSelection) -> Path:
        """Write the pre-commit hook. husky 9 hooks are plain executable scripts."""

        hook = self.project_dir / self.HOOK_PATH
        hook.parent.mkdir(parents=True, exist_ok=True)
        hook.write_text(self.hook_command(selection) + "\n", encoding="utf-8")
        hook.chmod(0o755)
        LOGGER.debug("wrote %s", hook)
        return hook


def default_jobs(
    materializer: FileMaterializer, commands: Callable[[Sequence[str]], object]
) -> list[Job]:
    """Return the built-in jobs. typescript only needs its package."""

    return [
        CopyTemplatesJob(Tool.COMMITIZEN, [".czrc", ".git-cz.json"], materializer),
        GitHooksJob(commands, materializer.target_dir),
        CopyTemplatesJob(Tool.LINT_STAGED, [".lintstagedrc"], materializer),
        CopyTemplatesJob(Tool.EDITORCONFIG, [".editorconfig"], materializer),
        CopyTemplatesJob(Tool.PRETTIER, [".prettierrc"], materializer),
        EslintConfigJob(materializer),
    ]


class JobRunner:
    """Execute registered jobs in a fixed order, isolating failures."""

    def __init__(
        self,
        jobs: Iterable[Job],
        *,
        order: Sequence[Tool] = TOOL_ORDER,
        reporter: Reporter | None = None,
    ) -> None:
        self.jobs: dict[Tool, Job] = {}
        for job in jobs:
            if job.tool in self.jobs:
                raise ValueError(f"duplicate job registered for {job.tool.value}")
            self.jobs[job.tool] = job
        self.order = tuple(order)
        self.reporter = reporter or Reporter()

    def run(self, selection: ToolSelection, manager: PackageManager) -> list[JobOutcome]:
        outcomes: list[JobOutcome] = []
        for tool in self.order:
            job = self.jobs.get(tool)
            if job is None:
                continue
            outcomes.append(self._run_job(job, tool, selection, manager))
        return outcomes

    def _run_job(
        self, job: Job, tool: Tool, selection: ToolSelection, manager: PackageManager
    ) -> JobOutcome:
        if not selection.is_wanted(tool):
            self.reporter.unimportant(f"Skip {tool}")
            return JobOutcome.skipped(tool)

        try:
            job.run(tool, selection, manager)
        except Exception as exc:
            LOGGER.debug("job %s failed", tool, exc_info=True)
            self.reporter.error(exc)
            self.reporter.error(f"{tool} job fail")
            return JobOutcome.failed(tool, str(exc) or type(exc).__name__)

        self.reporter.success(f"{tool} job success.")
        return JobOutcome.succeeded(tool)

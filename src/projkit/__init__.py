"""Interactive setup of JavaScript development tooling.

projkit asks which tools a project should use, installs their packages with
the chosen package manager and copies bundled configuration templates into the
project. It can be driven programmatically through
:class:`~projkit.scaffold.ToolchainScaffolder` or via the command line.
"""

from __future__ import annotations

from .config import SetupConfig
from .errors import CommandError, FileConflict, InstallError, JobError, ProjkitError, TemplateNotFoundError
from .jobs import Job, JobOutcome, JobRunner, JobStatus, default_jobs
from .resolver import resolve_packages
from .scaffold import ToolchainScaffolder
from .tools import TOOL_ORDER, PackageManager, Tool, ToolSelection

__all__ = [
    "CommandError",
    "FileConflict",
    "InstallError",
    "Job",
    "JobError",
    "JobOutcome",
    "JobRunner",
    "JobStatus",
    "PackageManager",
    "ProjkitError",
    "SetupConfig",
    "TOOL_ORDER",
    "TemplateNotFoundError",
    "Tool",
    "ToolSelection",
    "ToolchainScaffolder",
    "default_jobs",
    "resolve_packages",
]

__version__ = "0.1.0"

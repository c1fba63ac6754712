"""Runtime configuration for a setup run."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .tools import TOOL_ORDER, Tool

__all__ = ["BUNDLED_TEMPLATES", "SetupConfig", "TEMPLATES_ENV_VAR"]


BUNDLED_TEMPLATES = Path(__file__).resolve().parent / "templates"
TEMPLATES_ENV_VAR = "PROJKIT_TEMPLATES"


@dataclass(slots=True)
class SetupConfig:
    """Where templates are read from and where they are written.

    Attributes
    ----------
    target_dir:
        The project directory receiving configuration files. Package manager
        and setup commands also run here.
    template_dir:
        Directory holding the static templates, keyed by file name.
    tool_order:
        Order in which packages are resolved and jobs are executed.
    """

    target_dir: Path
    template_dir: Path = BUNDLED_TEMPLATES
    tool_order: tuple[Tool, ...] = TOOL_ORDER

    @classmethod
    def from_environment(
        cls,
        target_dir: str | Path | None = None,
        template_dir: str | Path | None = None,
        *,
        tool_order: tuple[Tool, ...] = TOOL_ORDER,
    ) -> "SetupConfig":
        """Build a :class:`SetupConfig`, falling back to the environment.

        The template directory is taken from ``template_dir``, then from the
        ``PROJKIT_TEMPLATES`` environment variable, then the templates bundled
        with the package.
        """

        target = Path(target_dir) if target_dir is not None else Path.cwd()
        target = target.expanduser().resolve()
        if not target.is_dir():
            raise ValueError(f"target directory does not exist: {target}")

        if template_dir is None:
            template_dir = os.environ.get(TEMPLATES_ENV_VAR) or BUNDLED_TEMPLATES
        templates = Path(template_dir).expanduser().resolve()

        return cls(target_dir=target, template_dir=templates, tool_order=tuple(tool_order))

"""Copy configuration templates into the target project."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path

from .console import Reporter
from .errors import FileConflict, TemplateNotFoundError

__all__ = ["FileMaterializer"]


LOGGER = logging.getLogger(__name__)


class FileMaterializer:
    """Copy named templates verbatim without overwriting existing files."""

    def __init__(
        self, template_dir: str | Path, target_dir: str | Path, reporter: Reporter | None = None
    ) -> None:
        self.template_dir = Path(template_dir)
        self.target_dir = Path(target_dir)
        self.reporter = reporter or Reporter()

    def copy(self, *names: str) -> list[FileConflict]:
        """Copy each template in ``names`` and return the skipped destinations."""

        return self.copy_as(*((name, name) for name in names))

    def copy_as(self, *pairs: tuple[str, str]) -> list[FileConflict]:
        """Copy ``(template, destination name)`` pairs into the target directory."""

        conflicts: list[FileConflict] = []
        for template_name, name in pairs:
            destination = self.target_dir / name
            if destination.exists() or not self._copy_file(self.template_dir / template_name, destination):
                conflict = FileConflict(name=name, path=destination)
                self.reporter.error(conflict)
                conflicts.append(conflict)
        return conflicts

    def _copy_file(self, source: Path, destination: Path) -> bool:
        """Copy ``source`` to ``destination`` unless the destination exists.

        The content is staged in a temporary file carrying the template's
        permissions and hard-linked into place, so a destination created
        concurrently is never replaced. Returns ``False`` in that case.
        """

        if not source.is_file():
            raise TemplateNotFoundError(source)

        LOGGER.debug("copying %s to %s", source, destination)
        handle, temp_name = tempfile.mkstemp(prefix=f".{destination.name}.", dir=destination.parent)
        try:
            with os.fdopen(handle, "wb") as target, source.open("rb") as template:
                shutil.copyfileobj(template, target)
            shutil.copymode(source, temp_name)
            try:
                os.link(temp_name, destination)
            except FileExistsError:
                return False
            return True
        finally:
            Path(temp_name).unlink(missing_ok=True)

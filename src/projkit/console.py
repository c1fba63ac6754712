"""Coloured status output written to stderr."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

__all__ = ["Reporter", "configure_logging"]


class Reporter:
    """Render the four kinds of user-facing status lines."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True, highlight=False)

    def error(self, message: object) -> None:
        self.console.print(str(message), style="bright_red", markup=False)

    def success(self, message: object) -> None:
        self.console.print(str(message), style="bright_green", markup=False)

    def log(self, message: object) -> None:
        self.console.print(str(message), style="bright_blue", markup=False)

    def unimportant(self, message: object) -> None:
        self.console.print(str(message), style="grey50", markup=False)

    def boxed(self, text: str) -> None:
        self.console.print(Panel(text.rstrip() or " ", padding=1, border_style="bright_blue"))

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        with self.console.status(message):
            yield


def configure_logging(verbose: bool = False) -> None:
    """Route diagnostic logging through rich on stderr."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )

"""Interactive questions asked before a setup run."""

from __future__ import annotations

from typing import Iterable, TextIO

from rich.console import Console
from rich.prompt import Confirm, Prompt
from rich.table import Table

from .tools import TOOL_ORDER, PackageManager, Tool, ToolSelection

__all__ = ["ask_package_manager", "ask_tools"]


def _tool_table(tools: Iterable[Tool], defaults: ToolSelection) -> Table:
    table = Table(title="Tools are installed into the project directory only", show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Tool", style="cyan")
    table.add_column("Default")
    for index, tool in enumerate(tools, start=1):
        table.add_row(str(index), tool.value, "wanted" if defaults.is_wanted(tool) else "unwanted")
    return table


def ask_tools(
    console: Console,
    *,
    tools: Iterable[Tool] = TOOL_ORDER,
    defaults: ToolSelection | None = None,
    stream: TextIO | None = None,
) -> ToolSelection:
    """Ask about each tool in turn. Every tool is wanted unless declined."""

    tools = tuple(tools)
    defaults = defaults or ToolSelection.from_unwanted(tools=tools)
    console.print(_tool_table(tools, defaults))
    flags = {
        tool: Confirm.ask(
            f"Install [cyan]{tool.value}[/cyan]?",
            console=console,
            default=defaults.is_wanted(tool),
            stream=stream,
        )
        for tool in tools
    }
    return ToolSelection.from_flags(flags)


def ask_package_manager(
    console: Console,
    *,
    default: PackageManager = PackageManager.PNPM,
    stream: TextIO | None = None,
) -> PackageManager:
    answer = Prompt.ask(
        "Package manager",
        console=console,
        choices=[manager.value for manager in PackageManager],
        default=default.value,
        stream=stream,
    )
    return PackageManager(answer)

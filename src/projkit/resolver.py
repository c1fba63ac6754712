"""Map a tool selection to the packages that have to be installed."""

from __future__ import annotations

from typing import Iterable

from .tools import TOOL_ORDER, Tool, ToolSelection

__all__ = ["COMPANION_PACKAGES", "TOOL_PACKAGES", "resolve_packages"]


TOOL_PACKAGES: dict[Tool, str | None] = {
    Tool.TYPESCRIPT: "typescript",
    Tool.COMMITIZEN: "commitizen",
    Tool.HUSKY: "husky",
    Tool.LINT_STAGED: "lint-staged",
    Tool.EDITORCONFIG: None,
    Tool.PRETTIER: "prettier",
    Tool.ESLINT: "eslint",
}

COMMITIZEN_CLI = "git-cz"
TYPESCRIPT_ESLINT = ("@typescript-eslint/eslint-plugin", "@typescript-eslint/parser")
ESLINT_PRETTIER = "eslint-config-prettier"

COMPANION_PACKAGES = (COMMITIZEN_CLI, *TYPESCRIPT_ESLINT, ESLINT_PRETTIER)


def resolve_packages(selection: ToolSelection, order: Iterable[Tool] = TOOL_ORDER) -> list[str]:
    """Return the development packages needed for ``selection``.

    One package per wanted tool in ``order`` (editorconfig needs none),
    followed by companion packages for tool combinations.
    """

    packages: list[str] = []
    for tool in order:
        package = TOOL_PACKAGES.get(tool)
        if package and selection.is_wanted(tool):
            packages.append(package)

    if selection.is_wanted(Tool.COMMITIZEN):
        packages.append(COMMITIZEN_CLI)
    if selection.is_wanted(Tool.TYPESCRIPT) and selection.is_wanted(Tool.ESLINT):
        packages.extend(TYPESCRIPT_ESLINT)
    if selection.is_wanted(Tool.PRETTIER) and selection.is_wanted(Tool.ESLINT):
        packages.append(ESLINT_PRETTIER)
    return packages

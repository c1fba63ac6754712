"""Tool and package manager enumerations shared across projkit."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

__all__ = ["PackageManager", "TOOL_ORDER", "Tool", "ToolSelection"]


class Tool(str, Enum):
    """Development tools projkit knows how to set up."""

    TYPESCRIPT = "typescript"
    COMMITIZEN = "commitizen"
    HUSKY = "husky"
    LINT_STAGED = "lint-staged"
    EDITORCONFIG = "editorconfig"
    PRETTIER = "prettier"
    ESLINT = "eslint"

    def __str__(self) -> str:
        return self.value


class PackageManager(str, Enum):
    """Package managers that can install development dependencies."""

    PNPM = "pnpm"
    YARN = "yarn"
    NPM = "npm"

    def __str__(self) -> str:
        return self.value


# husky must come after lint-staged is known and before the config-file tools.
TOOL_ORDER: tuple[Tool, ...] = (
    Tool.TYPESCRIPT,
    Tool.COMMITIZEN,
    Tool.HUSKY,
    Tool.LINT_STAGED,
    Tool.EDITORCONFIG,
    Tool.PRETTIER,
    Tool.ESLINT,
)


class ToolSelection(BaseModel):
    """Which tools the user wants installed.

    Tools absent from :attr:`wanted` are treated as unwanted. The mapping is
    read-only once the selection is built.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    wanted: Mapping[Tool, bool] = Field(
        default_factory=dict, validate_default=True, description="Wanted flag per tool."
    )

    @field_validator("wanted", mode="after")
    @classmethod
    def _freeze_wanted(cls, value: Mapping[Tool, bool]) -> Mapping[Tool, bool]:
        return MappingProxyType(dict(value))

    @field_serializer("wanted")
    def _dump_wanted(self, value: Mapping[Tool, bool]) -> dict[Tool, bool]:
        return dict(value)

    @classmethod
    def from_flags(cls, flags: Mapping[Tool | str, bool]) -> "ToolSelection":
        return cls(wanted=dict(flags))

    @classmethod
    def from_unwanted(
        cls, unwanted: Iterable[Tool | str] = (), *, tools: Iterable[Tool] = TOOL_ORDER
    ) -> "ToolSelection":
        """Mark every tool wanted except the ones listed in ``unwanted``."""

        excluded = {Tool(name) for name in unwanted}
        return cls(wanted={tool: tool not in excluded for tool in tools})

    @classmethod
    def everything(cls) -> "ToolSelection":
        return cls.from_unwanted()

    @classmethod
    def nothing(cls) -> "ToolSelection":
        return cls(wanted={tool: False for tool in TOOL_ORDER})

    def is_wanted(self, tool: Tool | str) -> bool:
        return self.wanted.get(Tool(tool), False)

    def __contains__(self, tool: object) -> bool:
        try:
            return self.is_wanted(tool)  # type: ignore[arg-type]
        except ValueError:
            return False

    def selected(self, order: Iterable[Tool] = TOOL_ORDER) -> list[Tool]:
        """Return the wanted tools following ``order``."""

        return [tool for tool in order if self.is_wanted(tool)]

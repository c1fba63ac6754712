from __future__ import annotations

import pytest
from pydantic import ValidationError

from projkit.resolver import resolve_packages
from projkit.tools import TOOL_ORDER, Tool, ToolSelection


def test_tool_order_is_fixed():
    assert [tool.value for tool in TOOL_ORDER] == [
        "typescript",
        "commitizen",
        "husky",
        "lint-staged",
        "editorconfig",
        "prettier",
        "eslint",
    ]


def test_from_unwanted_marks_everything_else_wanted():
    selection = ToolSelection.from_unwanted(["husky", Tool.ESLINT])
    assert not selection.is_wanted(Tool.HUSKY)
    assert not selection.is_wanted("eslint")
    assert selection.selected() == [
        Tool.TYPESCRIPT,
        Tool.COMMITIZEN,
        Tool.LINT_STAGED,
        Tool.EDITORCONFIG,
        Tool.PRETTIER,
    ]


def test_missing_tools_count_as_unwanted():
    selection = ToolSelection.from_flags({"typescript": True})
    assert selection.is_wanted(Tool.TYPESCRIPT)
    assert not selection.is_wanted(Tool.PRETTIER)
    assert Tool.TYPESCRIPT in selection
    assert "not-a-tool" not in selection


def test_unknown_tool_names_are_rejected():
    with pytest.raises(ValidationError):
        ToolSelection.from_flags({"webpack": True})


def test_selection_is_immutable():
    selection = ToolSelection.nothing()
    with pytest.raises(ValidationError):
        selection.wanted = {}


def test_wanted_flags_cannot_be_changed_in_place():
    selection = ToolSelection.nothing()
    with pytest.raises(TypeError):
        selection.wanted[Tool.ESLINT] = True  # type: ignore[index]
    assert resolve_packages(selection) == []


def test_selection_is_not_tied_to_the_source_mapping():
    flags = {Tool.ESLINT: False}
    selection = ToolSelection.from_flags(flags)
    flags[Tool.ESLINT] = True
    assert not selection.is_wanted(Tool.ESLINT)
    assert ToolSelection().wanted == {}


def test_dump_returns_plain_dict():
    dumped = ToolSelection.from_flags({"eslint": True}).model_dump()
    assert dumped == {"wanted": {Tool.ESLINT: True}}

from __future__ import annotations

from projkit.resolver import resolve_packages
from projkit.tools import Tool, ToolSelection


def test_typescript_and_eslint_add_integration_packages():
    selection = ToolSelection.from_flags(
        {"typescript": True, "eslint": True, "prettier": False, "commitizen": False}
    )
    assert resolve_packages(selection) == [
        "typescript",
        "eslint",
        "@typescript-eslint/eslint-plugin",
        "@typescript-eslint/parser",
    ]


def test_everything_selected():
    assert resolve_packages(ToolSelection.everything()) == [
        "typescript",
        "commitizen",
        "husky",
        "lint-staged",
        "prettier",
        "eslint",
        "git-cz",
        "@typescript-eslint/eslint-plugin",
        "@typescript-eslint/parser",
        "eslint-config-prettier",
    ]


def test_editorconfig_needs_no_package():
    selection = ToolSelection.from_flags({Tool.EDITORCONFIG: True})
    assert resolve_packages(selection) == []


def test_commitizen_brings_its_cli():
    selection = ToolSelection.from_flags({Tool.COMMITIZEN: True})
    assert resolve_packages(selection) == ["commitizen", "git-cz"]


def test_prettier_and_eslint_add_config_prettier():
    selection = ToolSelection.from_flags({Tool.PRETTIER: True, Tool.ESLINT: True})
    assert resolve_packages(selection) == ["prettier", "eslint", "eslint-config-prettier"]


def test_combination_rules_follow_final_flags():
    selection = ToolSelection.from_flags({Tool.TYPESCRIPT: True, Tool.ESLINT: False})
    assert resolve_packages(selection) == ["typescript"]


def test_nothing_selected_yields_empty_list():
    assert resolve_packages(ToolSelection.nothing()) == []


def test_custom_order_is_respected():
    selection = ToolSelection.from_flags({Tool.ESLINT: True, Tool.HUSKY: True})
    assert resolve_packages(selection, order=[Tool.ESLINT, Tool.HUSKY]) == ["eslint", "husky"]

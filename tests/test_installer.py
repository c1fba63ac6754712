from __future__ import annotations

from pathlib import Path

import pytest

from projkit.errors import InstallError
from projkit.installer import Installer, build_install_command
from projkit.tools import PackageManager


@pytest.mark.parametrize(
    ("manager", "expected"),
    [
        (PackageManager.PNPM, ["pnpm", "add", "eslint", "prettier", "-D"]),
        (PackageManager.YARN, ["yarn", "add", "eslint", "prettier", "-D"]),
        (PackageManager.NPM, ["npm", "add", "eslint", "prettier", "-D"]),
    ],
)
def test_build_install_command(tmp_path: Path, manager, expected):
    assert build_install_command(["eslint", "prettier"], manager, tmp_path) == expected


def test_pnpm_workspace_adds_workspace_flag(tmp_path: Path):
    (tmp_path / "pnpm-workspace.yaml").write_text("packages:\n  - 'packages/*'\n", encoding="utf-8")
    assert build_install_command(["eslint"], "pnpm", tmp_path) == ["pnpm", "add", "eslint", "-D", "-w"]
    assert build_install_command(["eslint"], "yarn", tmp_path) == ["yarn", "add", "eslint", "-D"]


def test_install_reports_stdout(tmp_path: Path, reporter, fake_run):
    fake_run.default = (0, "added 12 packages\n", "")
    installer = Installer(tmp_path, reporter, run=fake_run)

    output = installer.install(["eslint"], PackageManager.NPM)

    assert output == "added 12 packages\n"
    command, kwargs = fake_run.calls[0]
    assert command == ["npm", "add", "eslint", "-D"]
    assert kwargs["cwd"] == tmp_path
    assert "Install packages with npm: eslint" in reporter.text
    assert "Packages installed" in reporter.text
    assert "added 12 packages" in reporter.text


def test_empty_package_list_is_a_noop(tmp_path: Path, reporter, fake_run):
    installer = Installer(tmp_path, reporter, run=fake_run)
    assert installer.install([], PackageManager.PNPM) == ""
    assert fake_run.calls == []
    assert "No packages need to install" in reporter.text


def test_non_zero_exit_raises(tmp_path: Path, reporter, fake_run):
    fake_run.default = (1, "", "")
    installer = Installer(tmp_path, reporter, run=fake_run)
    with pytest.raises(InstallError) as excinfo:
        installer.install(["eslint"], PackageManager.YARN)
    assert excinfo.value.returncode == 1
    assert "Packages installed" not in reporter.text


def test_stderr_output_raises(tmp_path: Path, reporter, fake_run):
    fake_run.default = (0, "done", "npm WARN deprecated\n")
    installer = Installer(tmp_path, reporter, run=fake_run)
    with pytest.raises(InstallError, match="npm WARN deprecated"):
        installer.install(["eslint"], PackageManager.NPM)


def test_missing_executable_raises(tmp_path: Path, reporter):
    def run(command, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", command[0])

    installer = Installer(tmp_path, reporter, run=run)
    with pytest.raises(InstallError):
        installer.install(["eslint"], PackageManager.PNPM)

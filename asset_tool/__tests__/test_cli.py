from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from asset_tool.api.exceptions import MissingArtifactError, ProjectNotFoundError
from asset_tool.cli.main import cli, main
from asset_tool.models.result import OperationStatus, UpgradeResult


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def invoke(runner: CliRunner, project_root: Path, *args: str):
    return runner.invoke(cli, ["--project-root", str(project_root), *args])


def test_help_lists_commands(runner: CliRunner):
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    for command in ("upgrade", "build", "compile-css", "write-vendor-js", "update-asset-version", "watch", "info"):
        assert command in result.output


def test_update_asset_version(runner: CliRunner, project_root: Path):
    result = invoke(runner, project_root, "update-asset-version")

    assert result.exit_code == 0, result.output
    version_file = project_root / "lib" / "mini_profiler" / "asset_version.rb"
    assert "ASSET_VERSION = '" in version_file.read_text()


def test_info_shows_vendored_version(runner: CliRunner, project_root: Path, vendor_dir: Path):
    result = invoke(runner, project_root, "info", "--show-config")

    assert result.exit_code == 0, result.output
    assert "1.4.0" in result.output
    assert "jlfwong/speedscope" in result.output


def test_upgrade_reports_result(runner: CliRunner, project_root: Path):
    upgrade_result = UpgradeResult(previous_version="1.4.0", latest_version="1.5.0")
    upgrade_result.complete(OperationStatus.SUCCESS, "Upgraded speedscope: 1.4.0 -> 1.5.0")

    with patch("asset_tool.cli.commands.upgrade.UpgradeService") as service:
        service.return_value.upgrade.return_value = upgrade_result
        result = invoke(runner, project_root, "upgrade", "--force")

    assert result.exit_code == 0, result.output
    service.return_value.upgrade.assert_called_once_with(force=True, build_after=False)
    assert "1.5.0" in result.output


def test_upgrade_error_exit_code(runner: CliRunner, project_root: Path):
    with patch("asset_tool.cli.commands.upgrade.UpgradeService") as service:
        service.return_value.upgrade.side_effect = MissingArtifactError("1.5.0", "application/zip")
        result = invoke(runner, project_root, "upgrade")

    assert result.exit_code == 1
    assert "AT104" in result.output


def test_write_vendor_js_engine_error(runner: CliRunner, project_root: Path):
    # The stub engine script does not define doT.compile
    result = invoke(runner, project_root, "write-vendor-js")

    assert result.exit_code == 1
    assert "AT302" in result.output
    assert not (project_root / "lib" / "html" / "vendor.js").exists()


def test_invalid_config_exit_code(runner: CliRunner, project_root: Path):
    (project_root / ".asset-tool.yaml").write_text("- not a mapping\n")

    result = invoke(runner, project_root, "info")

    assert result.exit_code == 1
    assert "AT001" in result.output


def test_project_not_found(runner: CliRunner):
    with patch("asset_tool.cli.main.PathResolver.find_project_root", side_effect=ProjectNotFoundError()):
        result = runner.invoke(cli, ["update-asset-version"])

    assert result.exit_code == 1
    assert "AT002" in result.output


def test_main_keyboard_interrupt():
    with patch("asset_tool.cli.main.cli", side_effect=KeyboardInterrupt):
        with pytest.raises(SystemExit) as exc_info:
            main()

    assert exc_info.value.code == 130


def test_main_unexpected_error():
    with patch("asset_tool.cli.main.cli", side_effect=RuntimeError("boom")):
        with pytest.raises(SystemExit) as exc_info:
            main()

    assert exc_info.value.code == 1

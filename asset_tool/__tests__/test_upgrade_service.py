from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from asset_tool.__tests__.common import speedscope_entries
from asset_tool.api.exceptions import MissingArtifactError, VersionMismatchError
from asset_tool.core.path_resolver import PathResolver
from asset_tool.models.release import Release, ReleaseAsset
from asset_tool.models.result import OperationStatus
from asset_tool.services.upgrade_service import UpgradeService


def make_release(version: str, content_type: str = "application/zip") -> Release:
    return Release(
        version=version,
        name=f"v{version}",
        assets=(ReleaseAsset(id=42, content_type=content_type, name="speedscope.zip"),),
    )


@pytest.fixture
def service(path_resolver: PathResolver, vendor_dir: Path, make_archive) -> UpgradeService:
    steps = []
    service = UpgradeService(path_resolver, session=MagicMock(), step_callback=steps.append)
    service.steps = steps

    def download(asset_id, destination, progress_callback=None):
        destination.write_bytes(service.archive_path.read_bytes())
        return destination

    service.archive_path = make_archive()
    service.fetcher.download = MagicMock(side_effect=download)
    return service


def test_upgrade_installs_latest(service: UpgradeService, vendor_dir: Path):
    service.resolver.latest = MagicMock(return_value=make_release("1.5.0"))

    result = service.upgrade()

    assert result.status == OperationStatus.SUCCESS
    assert result.previous_version == "1.4.0"
    assert result.latest_version == "1.5.0"
    assert result.asset_id == 42
    assert result.sync.is_success
    assert result.build is None
    assert (vendor_dir / "release.txt").read_text().startswith("speedscope@1.5.0")
    assert "Checking GitHub for the latest version..." in service.steps

    destination = service.fetcher.download.call_args.args[1]
    assert destination.name == "speedscope-v1.5.0.zip"
    # Scratch directory is gone once the upgrade finished
    assert not destination.parent.exists()


def test_upgrade_skips_when_current(service: UpgradeService, vendor_dir: Path):
    service.resolver.latest = MagicMock(return_value=make_release("1.4.0"))

    result = service.upgrade()

    assert result.status == OperationStatus.SKIPPED
    assert "1.4.0" in result.message
    service.fetcher.download.assert_not_called()
    assert (vendor_dir / "old-bundle.js").exists()


def test_upgrade_force_reinstalls(service: UpgradeService, make_archive):
    service.archive_path = make_archive(speedscope_entries("1.4.0"), name="same.zip")
    service.resolver.latest = MagicMock(return_value=make_release("1.4.0"))

    result = service.upgrade(force=True)

    assert result.status == OperationStatus.SUCCESS
    service.fetcher.download.assert_called_once()


def test_upgrade_missing_artifact_downloads_nothing(service: UpgradeService):
    service.resolver.latest = MagicMock(return_value=make_release("1.5.0", "application/gzip"))

    with pytest.raises(MissingArtifactError):
        service.upgrade()

    service.fetcher.download.assert_not_called()


def test_upgrade_version_mismatch(service: UpgradeService, vendor_dir: Path):
    service.resolver.latest = MagicMock(return_value=make_release("1.6.0"))

    with pytest.raises(VersionMismatchError):
        service.upgrade()

    assert service.syncer.current_version() == "1.4.0"


def test_upgrade_warns_on_downgrade(service: UpgradeService, make_archive):
    service.archive_path = make_archive(speedscope_entries("1.3.0"), name="older.zip")
    service.resolver.latest = MagicMock(return_value=make_release("1.3.0"))

    result = service.upgrade()

    assert result.status == OperationStatus.SUCCESS
    assert len(result.warnings) == 1
    assert "older" in result.warnings[0]


def test_upgrade_then_build(service: UpgradeService):
    service.resolver.latest = MagicMock(return_value=make_release("1.5.0"))

    with patch("asset_tool.services.upgrade_service.BuildService") as build_service:
        result = service.upgrade(build_after=True)

    build_service.return_value.build.assert_called_once_with()
    assert result.build is build_service.return_value.build.return_value

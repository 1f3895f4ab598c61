import zipfile
from pathlib import Path

import pytest

from asset_tool.__tests__.common import GOOGLE_FONTS_URL, speedscope_entries
from asset_tool.api.exceptions import ArchiveError, VersionMismatchError
from asset_tool.core.vendor_syncer import VendorSyncer, parse_kept_files
from asset_tool.models.config import VendorConfig


def live_names(directory: Path):
    return sorted(path.name for path in directory.iterdir())


@pytest.mark.parametrize(
    "content, expected",
    [
        ("LICENSE\nfonts\n", {"LICENSE", "fonts"}),
        ("// comment\nLICENSE\n\n   \n", {"LICENSE"}),
        ("  fonts  \r\n// fonts-old\n", {"fonts"}),
        ("", set()),
    ],
)
def test_parse_kept_files(content: str, expected: set):
    assert parse_kept_files(content) == frozenset(expected)


def test_read_version(vendor_dir: Path):
    syncer = VendorSyncer(vendor_dir)

    assert syncer.current_version() == "1.4.0"

    (vendor_dir / "release.txt").unlink()
    assert syncer.current_version() is None


def test_sync_replaces_release(vendor_dir: Path, make_archive):
    events = []
    syncer = VendorSyncer(vendor_dir, progress_callback=lambda action, message: events.append(action))

    result = syncer.sync(make_archive(), "1.5.0")

    assert result.is_success
    assert syncer.current_version() == "1.5.0"
    assert live_names(vendor_dir) == [
        ".kept-files",
        "LICENSE",
        "fonts",
        "index.html",
        "release.txt",
        "speedscope.js",
    ]

    # Kept entries come from the live directory, not from the archive
    assert (vendor_dir / "LICENSE").read_text() == "MIT"
    assert live_names(vendor_dir / "fonts") == ["source-code-pro-regular.css", "source-code-pro-regular.woff2"]

    assert result.removed == ["index.html", "old-bundle.js", "release.txt"]
    assert result.rewritten == ["index.html"]
    assert "remove" in events
    assert "extract" in events

    index = (vendor_dir / "index.html").read_text()
    assert GOOGLE_FONTS_URL not in index
    assert "fonts/source-code-pro-regular.css" in index


def test_sync_only_extracts_filtered_entries(vendor_dir: Path, make_archive):
    syncer = VendorSyncer(vendor_dir)

    result = syncer.sync(make_archive(), "1.5.0")

    for name in result.extracted:
        assert "perf-vertx-stacks" not in name
        assert "README" not in name
    assert not (vendor_dir / "README").exists()
    assert not (vendor_dir / "perf-vertx-stacks-01-collapsed-all.txt").exists()
    assert not (vendor_dir / "ignored.txt").exists()
    assert "other/ignored.txt" in result.skipped
    assert "fonts/source-code-pro-regular.woff2" in result.extracted


def test_kept_directory_receives_new_release_files(vendor_dir: Path, make_archive):
    entries = speedscope_entries()
    entries["speedscope/LICENSE"] = "Apache"
    entries["speedscope/fonts/source-code-pro-regular.css"] = "@font-face { new }"
    entries["speedscope/fonts/extra/source-code-pro-bold.woff2"] = "bold"

    result = VendorSyncer(vendor_dir).sync(make_archive(entries), "1.5.0")

    fonts = vendor_dir / "fonts"
    assert live_names(fonts) == ["extra", "source-code-pro-regular.css", "source-code-pro-regular.woff2"]
    assert (fonts / "extra" / "source-code-pro-bold.woff2").read_text() == "bold"

    # Kept copies win over archive entries at the same path
    assert (fonts / "source-code-pro-regular.css").read_text() == "@font-face {}"
    assert (vendor_dir / "LICENSE").read_text() == "MIT"
    assert "speedscope/fonts/source-code-pro-regular.css" in result.skipped
    assert "speedscope/LICENSE" in result.skipped


def test_sync_leaves_no_staging(vendor_dir: Path, make_archive):
    VendorSyncer(vendor_dir).sync(make_archive(), "1.5.0")

    assert live_names(vendor_dir.parent) == ["speedscope"]


def test_version_mismatch_keeps_live_directory(vendor_dir: Path, make_archive):
    before = {path.name: path.read_bytes() for path in vendor_dir.iterdir() if path.is_file()}
    syncer = VendorSyncer(vendor_dir)

    with pytest.raises(VersionMismatchError) as exc_info:
        syncer.sync(make_archive(speedscope_entries("1.4.9")), "1.5.0")

    error = exc_info.value
    assert error.expected == "1.5.0"
    assert error.actual == "1.4.9"

    # Live directory untouched
    assert {path.name: path.read_bytes() for path in vendor_dir.iterdir() if path.is_file()} == before
    assert syncer.current_version() == "1.4.0"

    # Staged files are left for inspection
    assert error.staging_dir is not None
    assert (error.staging_dir / "speedscope.js").exists()
    assert str(error.staging_dir) in str(error)


def test_sync_removes_stale_staging(vendor_dir: Path, make_archive):
    syncer = VendorSyncer(vendor_dir)
    with pytest.raises(VersionMismatchError) as exc_info:
        syncer.sync(make_archive(speedscope_entries("1.4.9")), "1.5.0")
    stale = exc_info.value.staging_dir
    assert stale.is_dir()

    with pytest.raises(VersionMismatchError) as exc_info:
        syncer.sync(make_archive(speedscope_entries("1.4.9")), "1.5.0")
    assert not stale.exists()
    assert live_names(vendor_dir.parent) == sorted(["speedscope", exc_info.value.staging_dir.name])

    syncer.sync(make_archive(), "1.5.0")
    assert live_names(vendor_dir.parent) == ["speedscope"]


def test_failure_removes_staging(vendor_dir: Path, tmp_path: Path):
    bad_archive = tmp_path / "broken.zip"
    bad_archive.write_bytes(b"not a zip file")

    with pytest.raises(ArchiveError):
        VendorSyncer(vendor_dir).sync(bad_archive, "1.5.0")

    assert live_names(vendor_dir.parent) == ["speedscope"]
    assert (vendor_dir / "old-bundle.js").exists()


def test_rejects_entries_escaping_vendor_dir(vendor_dir: Path, make_archive):
    entries = speedscope_entries()
    entries["speedscope/../../evil.txt"] = "evil"

    with pytest.raises(ArchiveError):
        VendorSyncer(vendor_dir).sync(make_archive(entries), "1.5.0")

    assert not (vendor_dir.parent.parent / "evil.txt").exists()
    assert (vendor_dir / "old-bundle.js").exists()


def test_missing_manifest_keeps_nothing(vendor_dir: Path, make_archive):
    (vendor_dir / ".kept-files").unlink()
    config = VendorConfig(rewrites=[])

    result = VendorSyncer(vendor_dir, config).sync(make_archive(), "1.5.0")

    assert result.kept == []
    assert not (vendor_dir / "LICENSE").exists()
    assert (vendor_dir / "fonts" / "source-code-pro-regular.woff2").exists()


def test_first_install(tmp_path: Path, make_archive):
    vendor_dir = tmp_path / "lib" / "html" / "speedscope"
    config = VendorConfig(rewrites=[])

    result = VendorSyncer(vendor_dir, config).sync(make_archive(), "1.5.0")

    assert result.removed == []
    assert (vendor_dir / "release.txt").exists()
    assert GOOGLE_FONTS_URL in (vendor_dir / "index.html").read_text()


def test_select_entries_custom_policy(tmp_path: Path, make_archive):
    config = VendorConfig(archive_prefix="dist", exclude=["map"], rewrites=[])
    syncer = VendorSyncer(tmp_path / "vendor", config)
    staging = tmp_path / "staging"
    (staging / "keep").mkdir(parents=True)
    (staging / "keep" / "me.txt").write_text("kept")
    archive_path = make_archive({
        "dist/app.js": "app",
        "dist/app.js.map": "map",
        "dist/keep/me.txt": "archived",
        "dist/keep/new.txt": "new",
        "speedscope/index.html": "other",
    })

    with zipfile.ZipFile(archive_path) as archive:
        selected, skipped = syncer.select_entries(archive, frozenset({"keep"}), staging)

    assert [relative for _, relative in selected] == ["app.js", "keep/new.txt"]
    assert sorted(skipped) == ["dist/app.js.map", "dist/keep/me.txt", "speedscope/index.html"]

# asset_tool/core/vendor_syncer.py
"""Vendor directory synchronization"""

import logging
import os
import shutil
import tempfile
import zipfile
from pathlib import Path
from typing import Callable, FrozenSet, List, Optional, Tuple

from ..api.exceptions import ArchiveError, VersionMismatchError
from ..constants import STAGING_DIR_PREFIX, BACKUP_DIR_SUFFIX, KEPT_FILES_COMMENT
from ..models.config import VendorConfig
from ..models.result import SyncResult, OperationStatus
from ..utils.file_utils import copy_path, remove_path, is_within
from .resource_rewriter import ResourceRewriter

logger = logging.getLogger(__name__)

# Called with (action, message); action is one of keep/remove/extract/skip/rewrite
SyncCallback = Callable[[str, str], None]


def parse_kept_files(content: str) -> FrozenSet[str]:
    """
    Parse a kept-file manifest

    Args:
        content: Manifest text, one entry name per line

    Returns:
        Entry names; blank lines and ``//`` comments are dropped
    """
    names = set()
    for line in content.splitlines():
        name = line.strip()
        if not name or name.startswith(KEPT_FILES_COMMENT):
            continue
        names.add(name)
    return frozenset(names)


def _shadowed_by_kept(staging: Path, relative: str) -> bool:
    """Check whether a staged kept file sits at or above a relative path"""
    path = staging
    for part in relative.strip("/").split("/"):
        path = path / part
        if path.is_symlink() or path.is_file():
            return True
        if not path.exists():
            return False
    return False


class VendorSyncer:
    """Replaces the vendor directory with the contents of a release archive

    The new directory is assembled in a staging directory next to the live
    one: kept entries are copied in, filtered archive entries are extracted,
    the version marker is checked and rewrites are applied. Only then is the
    staging directory swapped with the live one, so a failure at any earlier
    step leaves the live directory as it was.
    """

    def __init__(self,
                 vendor_dir: Path,
                 config: Optional[VendorConfig] = None,
                 rewriter: Optional[ResourceRewriter] = None,
                 progress_callback: Optional[SyncCallback] = None):
        """
        Initialize vendor syncer

        Args:
            vendor_dir: Live vendor directory
            config: Extraction policy (defaults when omitted)
            rewriter: Rewrites applied to the staged directory
            progress_callback: Optional callback for each file operation
        """
        self.vendor_dir = Path(vendor_dir)
        self.config = config or VendorConfig()
        self.rewriter = rewriter if rewriter is not None else ResourceRewriter(self.config.rewrites)
        self.progress_callback = progress_callback

    @property
    def manifest_path(self) -> Path:
        return self.vendor_dir / self.config.kept_files

    def _report(self, action: str, message: str) -> None:
        logger.info(message)
        if self.progress_callback:
            self.progress_callback(action, message)

    def load_kept_files(self) -> FrozenSet[str]:
        """Read the kept-file set from the manifest in the live directory"""
        if not self.manifest_path.exists():
            logger.warning("No %s manifest in %s, nothing will be kept", self.config.kept_files, self.vendor_dir)
            return frozenset()
        return parse_kept_files(self.manifest_path.read_text(encoding="utf-8"))

    def read_version(self, directory: Optional[Path] = None) -> Optional[str]:
        """
        Read the version marker of a vendor directory

        The marker's first line is split on the delimiter and its last field
        is the version (``speedscope@1.2.3`` gives ``1.2.3``).

        Args:
            directory: Directory to inspect (live directory by default)

        Returns:
            Version string or None if the marker does not exist
        """
        marker = (directory or self.vendor_dir) / self.config.version_file
        if not marker.is_file():
            return None

        lines = marker.read_text(encoding="utf-8").splitlines()
        first_line = lines[0] if lines else ""
        return first_line.split(self.config.version_delimiter)[-1].strip()

    def current_version(self) -> Optional[str]:
        return self.read_version(self.vendor_dir)

    def is_excluded(self, entry_name: str) -> bool:
        """Check an archive entry against the named exclusion fragments"""
        return any(fragment in entry_name for fragment in self.config.exclude)

    def select_entries(self, archive: zipfile.ZipFile,
                       protected: FrozenSet[str],
                       staging: Path) -> Tuple[List[Tuple[zipfile.ZipInfo, str]], List[str]]:
        """
        Filter archive entries

        Entries below a kept directory are extracted next to the kept files.
        Only an entry that would replace a kept copy already in staging is
        skipped, so the kept copy wins.

        Args:
            archive: Opened archive
            protected: Kept names and the manifest
            staging: Directory already holding the kept copies

        Returns:
            Tuple of ((entry, relative path) to extract, skipped entry names)
        """
        prefix = self.config.archive_prefix
        selected = []
        skipped = []

        for info in archive.infolist():
            name = info.filename
            if not name.startswith(prefix) or self.is_excluded(name):
                skipped.append(name)
                continue

            relative = name[len(prefix):]
            if not relative.strip("/"):
                continue

            if relative.split("/", 1)[0] in protected and _shadowed_by_kept(staging, relative):
                skipped.append(name)
                continue

            selected.append((info, relative))

        return selected, skipped

    def sync(self, archive_path: Path, expected_version: str) -> SyncResult:
        """
        Replace the vendor directory with a release archive

        Args:
            archive_path: Downloaded zip archive
            expected_version: Version the archive must contain

        Returns:
            SyncResult describing kept, removed and extracted entries

        Raises:
            ArchiveError: If the archive is unreadable or has unsafe entries
            VersionMismatchError: If the extracted marker disagrees; the
                staging directory is left in place until the next sync
            OSError: On filesystem failures
        """
        result = SyncResult(vendor_dir=self.vendor_dir, version=expected_version)

        # 1. Kept set is always read fresh, before anything is touched
        kept = self.load_kept_files()
        protected = kept | {self.config.kept_files}

        self._remove_stale_staging()
        staging = self._create_staging()
        try:
            # 2. Carry over the manifest and kept entries
            result.kept = self._copy_kept(staging, protected)

            # 3. Extract filtered archive entries
            result.extracted, result.skipped = self._extract(archive_path, staging, protected)

            # 4. Verify the staged release
            actual = self.read_version(staging)
            if actual != expected_version:
                raise VersionMismatchError(expected_version, actual, staging_dir=staging)

            # 5. Post-process
            for path in self.rewriter.apply(staging):
                relative = str(path.relative_to(staging))
                result.rewritten.append(relative)
                self._report("rewrite", f"Rewrote {relative}")

            # 6. Swap staging into place
            result.removed = self._removed_entries(protected)
            self._swap(staging)

        except VersionMismatchError:
            raise
        except BaseException:
            shutil.rmtree(staging, ignore_errors=True)
            raise

        for name in result.removed:
            self._report("remove", f"Deleted {self.vendor_dir / name}")

        result.complete(
            OperationStatus.SUCCESS,
            f"{self.vendor_dir.name} synchronized to {expected_version}"
        )
        return result

    def _remove_stale_staging(self) -> None:
        parent = self.vendor_dir.parent
        if not parent.is_dir():
            return
        for stale in parent.glob(f".{self.vendor_dir.name}{STAGING_DIR_PREFIX}*"):
            if stale.is_dir() and not stale.is_symlink():
                logger.info("Removing stale staging directory %s", stale)
                shutil.rmtree(stale)

    def _create_staging(self) -> Path:
        self.vendor_dir.parent.mkdir(parents=True, exist_ok=True)
        staging = tempfile.mkdtemp(
            prefix=f".{self.vendor_dir.name}{STAGING_DIR_PREFIX}",
            dir=self.vendor_dir.parent
        )
        # mkdtemp creates 0700 directories; the swapped-in directory keeps the live mode
        if self.vendor_dir.is_dir():
            shutil.copymode(self.vendor_dir, staging)
        else:
            os.chmod(staging, 0o755)
        logger.debug("Staging %s in %s", self.vendor_dir.name, staging)
        return Path(staging)

    def _copy_kept(self, staging: Path, protected: FrozenSet[str]) -> List[str]:
        copied = []
        for name in sorted(protected):
            source = self.vendor_dir / name
            if not source.exists() and not source.is_symlink():
                continue
            copy_path(source, staging / name)
            copied.append(name)
            self._report("keep", f"Kept {source}")
        return copied

    def _extract(self, archive_path: Path, staging: Path,
                 protected: FrozenSet[str]) -> Tuple[List[str], List[str]]:
        extracted = []

        try:
            with zipfile.ZipFile(archive_path) as archive:
                entries, skipped = self.select_entries(archive, protected, staging)

                for info, relative in entries:
                    dest = staging / relative
                    if not is_within(dest, staging):
                        raise ArchiveError(f"Refusing to extract {info.filename}: path escapes {self.vendor_dir.name}")

                    if info.is_dir():
                        dest.mkdir(parents=True, exist_ok=True)
                        continue

                    dest.parent.mkdir(parents=True, exist_ok=True)
                    with archive.open(info) as src, open(dest, "wb") as dst:
                        shutil.copyfileobj(src, dst)

                    extracted.append(relative)
                    self._report("extract", f"Extracted {info.filename} to {self.vendor_dir / relative}")

        except zipfile.BadZipFile as e:
            raise ArchiveError(f"Cannot read archive {archive_path}: {e}") from e

        for name in skipped:
            logger.debug("Skipped archive entry %s", name)

        return extracted, skipped

    def _removed_entries(self, protected: FrozenSet[str]) -> List[str]:
        if not self.vendor_dir.is_dir():
            return []
        return sorted(entry.name for entry in self.vendor_dir.iterdir() if entry.name not in protected)

    def _swap(self, staging: Path) -> None:
        backup = self.vendor_dir.with_name(self.vendor_dir.name + BACKUP_DIR_SUFFIX)
        if backup.exists():
            remove_path(backup)

        had_previous = self.vendor_dir.exists()
        if had_previous:
            os.replace(self.vendor_dir, backup)

        try:
            os.replace(staging, self.vendor_dir)
        except OSError:
            if had_previous:
                os.replace(backup, self.vendor_dir)
            raise

        if had_previous:
            remove_path(backup)
        logger.info("Swapped %s into place", self.vendor_dir)

# asset_tool/services/upgrade_service.py
"""Vendored library upgrade pipeline"""

import logging
import tempfile
from pathlib import Path
from typing import Callable, Optional

import requests

from ..constants import MSG_ALREADY_LATEST, MSG_UPGRADE_SUCCESS
from ..core.path_resolver import PathResolver
from ..core.release_resolver import ReleaseResolver
from ..core.artifact_fetcher import ArtifactFetcher, DownloadCallback
from ..core.vendor_syncer import VendorSyncer, SyncCallback
from ..models.result import UpgradeResult, OperationStatus
from ..utils.http_utils import create_session, get_github_token
from ..utils.version_utils import is_downgrade
from .build_service import BuildService

logger = logging.getLogger(__name__)

# Called with a human readable step description
StepCallback = Callable[[str], None]


class UpgradeService:
    """Brings the vendor directory up to the latest upstream release

    Steps run strictly in order and the first failure aborts the run:
    resolve the latest release, compare with the vendored version, pick the
    zip artifact, download it to a scratch directory, rebuild the vendor
    directory from it.
    """

    def __init__(self,
                 path_resolver: PathResolver,
                 session: Optional[requests.Session] = None,
                 step_callback: Optional[StepCallback] = None,
                 sync_callback: Optional[SyncCallback] = None,
                 download_callback: Optional[DownloadCallback] = None):
        """
        Initialize upgrade service

        Args:
            path_resolver: Path resolver carrying the tool configuration
            session: HTTP session (created with the GitHub token when omitted)
            step_callback: Optional callback for pipeline steps
            sync_callback: Optional callback for file operations
            download_callback: Optional callback for download progress
        """
        self.path_resolver = path_resolver
        self.config = path_resolver.config
        self.session = session or create_session(get_github_token())
        self.step_callback = step_callback
        self.sync_callback = sync_callback
        self.download_callback = download_callback

        upstream = self.config.upstream
        self.resolver = ReleaseResolver(
            upstream.repo,
            self.session,
            content_type=upstream.archive_content_type,
            timeout=upstream.timeout
        )
        self.fetcher = ArtifactFetcher(upstream.repo, self.session, timeout=upstream.timeout)
        self.syncer = VendorSyncer(
            path_resolver.get_vendor_dir(),
            self.config.vendor,
            progress_callback=sync_callback
        )

    def _step(self, message: str) -> None:
        logger.info(message)
        if self.step_callback:
            self.step_callback(message)

    def upgrade(self, force: bool = False, build_after: bool = False) -> UpgradeResult:
        """
        Execute the upgrade pipeline

        Args:
            force: Re-install even when already on the latest version
            build_after: Run the build pipeline after a successful sync

        Returns:
            UpgradeResult: SUCCESS, or SKIPPED when already up to date

        Raises:
            NetworkError, UnexpectedStatusError, ReleaseFormatError,
            MissingArtifactError, ArchiveError, VersionMismatchError,
            RewriteError, OSError: the first failure of any step
        """
        result = UpgradeResult()
        name = self.config.vendor.name

        # 1. Resolve latest release
        self._step("Checking GitHub for the latest version...")
        release = self.resolver.latest()
        result.latest_version = release.version

        # 2. Compare with what is vendored
        current = self.syncer.current_version()
        result.previous_version = current

        if current == release.version and not force:
            result.complete(OperationStatus.SKIPPED, MSG_ALREADY_LATEST.format(version=current))
            return result

        self._step(f"Current version is {current!r} and latest version is {release.version!r}")
        if is_downgrade(current, release.version):
            warning = f"Latest release {release.version} is older than vendored {current}"
            logger.warning(warning)
            result.add_warning(warning)

        # 3. Pick the archive before downloading anything
        asset = self.resolver.select_asset(release)
        result.asset_id = asset.id

        with tempfile.TemporaryDirectory() as temp_dir:
            # 4. Download
            archive_path = Path(temp_dir) / f"{name}-v{release.version}.zip"
            self._step(f"Downloading zip file of latest release to {temp_dir}...")
            self.fetcher.download(asset.id, archive_path, progress_callback=self.download_callback)
            result.archive_size = archive_path.stat().st_size
            self._step("Download completed.")

            # 5. Rebuild vendor directory
            self._step(f"Replacing {name} files...")
            result.sync = self.syncer.sync(archive_path, release.version)

        # 6. Optionally rebuild assets
        if build_after:
            self._step("Rebuilding UI assets...")
            result.build = BuildService(self.path_resolver).build()

        result.complete(
            OperationStatus.SUCCESS,
            MSG_UPGRADE_SUCCESS.format(name=name, old_version=current, new_version=release.version)
        )
        return result

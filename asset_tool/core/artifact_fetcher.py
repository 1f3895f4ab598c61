"""Release artifact download"""

import logging
from pathlib import Path
from typing import Callable, Optional, Union

import requests

from ..api.exceptions import NetworkError, UnexpectedStatusError
from ..constants import (
    GITHUB_API_URL,
    RELEASE_ASSET_PATH,
    DOWNLOAD_ACCEPT_HEADER,
    DOWNLOAD_REDIRECT_STATUS,
    DEFAULT_CHUNK_SIZE,
)
from ..utils.file_utils import ensure_parent_dir

logger = logging.getLogger(__name__)

# Called with (bytes_written, total_bytes or None)
DownloadCallback = Callable[[int, Optional[int]], None]


class ArtifactFetcher:
    """Downloads release assets through GitHub's redirect to object storage"""

    def __init__(self,
                 repo: str,
                 session: requests.Session,
                 api_url: str = GITHUB_API_URL,
                 timeout: Optional[float] = None,
                 chunk_size: int = DEFAULT_CHUNK_SIZE):
        """
        Initialize artifact fetcher

        Args:
            repo: Repository in ``owner/name`` form
            session: HTTP session used for both requests
            api_url: GitHub API base URL
            timeout: Request timeout (None keeps the transport default)
            chunk_size: Size of streamed chunks
        """
        self.repo = repo
        self.session = session
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.chunk_size = chunk_size

    def asset_url(self, asset_id: Union[int, str]) -> str:
        return self.api_url + RELEASE_ASSET_PATH.format(repo=self.repo, asset_id=asset_id)

    def resolve_location(self, asset_id: Union[int, str]) -> str:
        """
        Ask GitHub where the binary of an asset lives

        Args:
            asset_id: Release asset identifier

        Returns:
            Redirect target URL

        Raises:
            NetworkError: If the request could not be completed
            UnexpectedStatusError: If the answer is not a 302 with a Location
        """
        url = self.asset_url(asset_id)

        try:
            response = self.session.get(
                url,
                headers={"Accept": DOWNLOAD_ACCEPT_HEADER},
                allow_redirects=False,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            raise NetworkError(f"Failed to request asset {asset_id}: {e}", url=url) from e

        try:
            if response.status_code != DOWNLOAD_REDIRECT_STATUS:
                raise UnexpectedStatusError(
                    "Asset download URL", response.status_code, DOWNLOAD_REDIRECT_STATUS, url=url
                )

            location = response.headers.get("Location")
            if not location:
                raise UnexpectedStatusError(
                    "Asset download URL (redirect without Location)",
                    response.status_code,
                    DOWNLOAD_REDIRECT_STATUS,
                    url=url
                )
        finally:
            response.close()

        logger.debug("Asset %s redirects to %s", asset_id, location)
        return location

    def download(self,
                 asset_id: Union[int, str],
                 destination: Path,
                 progress_callback: Optional[DownloadCallback] = None) -> Path:
        """
        Download an asset to a local file

        The body is streamed to disk chunk by chunk. The destination file is
        only created once the binary location answered 200.

        Args:
            asset_id: Release asset identifier
            destination: Local file to write
            progress_callback: Optional callback for written bytes

        Returns:
            Path of the downloaded file

        Raises:
            NetworkError: If a request could not be completed
            UnexpectedStatusError: If either step answers with the wrong status
        """
        location = self.resolve_location(asset_id)

        try:
            # storage request carries no Authorization header
            response = self.session.get(
                location,
                headers={"Authorization": None},
                stream=True,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            raise NetworkError(f"Failed to download asset {asset_id}: {e}", url=location) from e

        with response:
            if response.status_code != 200:
                raise UnexpectedStatusError("Asset download", response.status_code, 200, url=location)

            total = response.headers.get("Content-Length")
            total = int(total) if total and total.isdigit() else None

            ensure_parent_dir(destination)
            written = 0
            try:
                with open(destination, "wb") as f:
                    for chunk in response.iter_content(chunk_size=self.chunk_size):
                        if not chunk:
                            continue
                        f.write(chunk)
                        written += len(chunk)
                        if progress_callback:
                            progress_callback(written, total)
            except requests.RequestException as e:
                raise NetworkError(f"Download of asset {asset_id} was interrupted: {e}", url=location) from e

        logger.info("Downloaded asset %s to %s (%d bytes)", asset_id, destination, written)
        return destination

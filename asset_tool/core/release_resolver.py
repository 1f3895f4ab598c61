"""Latest upstream release lookup"""

import logging
from typing import Optional

import requests

from ..api.exceptions import (
    NetworkError,
    UnexpectedStatusError,
    ReleaseFormatError,
    MissingArtifactError,
)
from ..constants import (
    GITHUB_API_URL,
    RELEASES_LATEST_PATH,
    RELEASE_ACCEPT_HEADER,
    ARCHIVE_CONTENT_TYPE,
)
from ..models.release import Release, ReleaseAsset

logger = logging.getLogger(__name__)


class ReleaseResolver:
    """Resolves the latest release of an upstream GitHub repository"""

    def __init__(self,
                 repo: str,
                 session: requests.Session,
                 content_type: str = ARCHIVE_CONTENT_TYPE,
                 api_url: str = GITHUB_API_URL,
                 timeout: Optional[float] = None):
        """
        Initialize release resolver

        Args:
            repo: Repository in ``owner/name`` form
            session: HTTP session used for the request
            content_type: Media type of the artifact to select
            api_url: GitHub API base URL
            timeout: Request timeout (None keeps the transport default)
        """
        self.repo = repo
        self.session = session
        self.content_type = content_type
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout

    @property
    def latest_url(self) -> str:
        return self.api_url + RELEASES_LATEST_PATH.format(repo=self.repo)

    def latest(self) -> Release:
        """
        Fetch the latest release

        Returns:
            Release: version and assets of the latest release

        Raises:
            NetworkError: If the request could not be completed
            UnexpectedStatusError: If GitHub does not answer 200
            ReleaseFormatError: If the payload is not release metadata
        """
        url = self.latest_url
        logger.info("Checking %s for the latest release", url)

        try:
            response = self.session.get(
                url,
                headers={"Accept": RELEASE_ACCEPT_HEADER},
                timeout=self.timeout
            )
        except requests.RequestException as e:
            raise NetworkError(f"Failed to fetch latest release from {url}: {e}", url=url) from e

        if response.status_code != 200:
            raise UnexpectedStatusError("Release lookup", response.status_code, 200, url=url)

        try:
            release = Release.from_dict(response.json())
        except ValueError as e:
            raise ReleaseFormatError(f"Release metadata from {url} is not valid JSON: {e}") from e
        except KeyError as e:
            raise ReleaseFormatError(f"Release metadata from {url} is missing {e}") from e
        except TypeError as e:
            raise ReleaseFormatError(f"Release metadata from {url} is malformed: {e}") from e

        logger.info("Latest release is %s (%d assets)", release.version, len(release.assets))
        return release

    def select_asset(self, release: Release) -> ReleaseAsset:
        """
        Pick the archive artifact of a release

        Args:
            release: Release to search

        Returns:
            ReleaseAsset: first asset with the expected content type

        Raises:
            MissingArtifactError: If no asset has the expected content type
        """
        asset = release.find_asset(self.content_type)
        if asset is None:
            raise MissingArtifactError(release.version, self.content_type)

        logger.debug("Selected asset %s (%s)", asset.id, asset.name)
        return asset

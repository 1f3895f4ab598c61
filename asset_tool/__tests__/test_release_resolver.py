from unittest.mock import MagicMock

import pytest
import requests

from asset_tool.__tests__.common import make_response
from asset_tool.api.exceptions import (
    MissingArtifactError,
    NetworkError,
    ReleaseFormatError,
    UnexpectedStatusError,
)
from asset_tool.constants import RELEASE_ACCEPT_HEADER
from asset_tool.core.release_resolver import ReleaseResolver
from asset_tool.models.release import Release

RELEASE_PAYLOAD = {
    "name": "v1.5.0",
    "assets": [
        {
            "id": 11,
            "name": "speedscope-1.5.0.tgz",
            "content_type": "application/gzip",
            "browser_download_url": "https://example.com/speedscope-1.5.0.tgz",
        },
        {
            "id": 12,
            "name": "speedscope-1.5.0.zip",
            "content_type": "application/zip",
            "browser_download_url": "https://example.com/speedscope-1.5.0.zip",
        },
    ],
}


def make_resolver(response) -> ReleaseResolver:
    session = MagicMock(spec=requests.Session)
    session.get.return_value = response
    return ReleaseResolver("jlfwong/speedscope", session)


def test_latest_strips_version_prefix():
    resolver = make_resolver(make_response(200, RELEASE_PAYLOAD))

    release = resolver.latest()

    assert release.version == "1.5.0"
    assert release.name == "v1.5.0"
    assert [asset.id for asset in release.assets] == [11, 12]

    resolver.session.get.assert_called_once_with(
        "https://api.github.com/repos/jlfwong/speedscope/releases/latest",
        headers={"Accept": RELEASE_ACCEPT_HEADER},
        timeout=None,
    )


def test_select_asset_picks_zip():
    resolver = make_resolver(make_response(200, RELEASE_PAYLOAD))

    asset = resolver.select_asset(resolver.latest())

    assert asset.id == 12
    assert asset.content_type == "application/zip"


def test_select_asset_missing_zip():
    payload = {"name": "v1.5.0", "assets": [RELEASE_PAYLOAD["assets"][0]]}
    resolver = make_resolver(make_response(200, payload))
    release = resolver.latest()

    with pytest.raises(MissingArtifactError) as exc_info:
        resolver.select_asset(release)

    assert exc_info.value.version == "1.5.0"
    assert exc_info.value.error_code == "AT104"


@pytest.mark.parametrize("status_code", [301, 403, 404, 500])
def test_latest_rejects_non_200(status_code: int):
    resolver = make_resolver(make_response(status_code))

    with pytest.raises(UnexpectedStatusError) as exc_info:
        resolver.latest()

    assert exc_info.value.status_code == status_code
    assert exc_info.value.expected == 200


def test_latest_invalid_json():
    response = make_response(200)
    response.json.side_effect = ValueError("Expecting value")
    resolver = make_resolver(response)

    with pytest.raises(ReleaseFormatError):
        resolver.latest()


@pytest.mark.parametrize(
    "payload",
    [
        {"assets": []},
        {"name": "v1.0.0"},
        {"name": "v1.0.0", "assets": [{"name": "no-id"}]},
        ["not", "a", "mapping"],
        {"name": None, "assets": []},
        {"name": "", "assets": []},
        {"name": 123, "assets": []},
        {"name": "v1.0.0", "assets": None},
    ],
)
def test_latest_missing_fields(payload):
    resolver = make_resolver(make_response(200, payload))

    with pytest.raises(ReleaseFormatError):
        resolver.latest()


def test_latest_untitled_release():
    resolver = make_resolver(make_response(200, {"name": None, "assets": []}))

    with pytest.raises(ReleaseFormatError) as exc_info:
        resolver.latest()

    assert "release name" in str(exc_info.value)
    assert exc_info.value.error_code == "AT103"


def test_latest_network_error():
    session = MagicMock(spec=requests.Session)
    session.get.side_effect = requests.ConnectionError("connection refused")
    resolver = ReleaseResolver("jlfwong/speedscope", session)

    with pytest.raises(NetworkError) as exc_info:
        resolver.latest()

    assert exc_info.value.url == resolver.latest_url


@pytest.mark.parametrize(
    "name, expected",
    [
        ("v1.2.3", "1.2.3"),
        ("1.2.3", "1.2.3"),
        ("vv1", "v1"),
    ],
)
def test_strip_version_prefix(name: str, expected: str):
    assert Release.strip_version_prefix(name) == expected

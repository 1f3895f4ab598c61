# asset_tool/models/release.py
"""Upstream release models"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union


@dataclass(frozen=True)
class ReleaseAsset:
    """A downloadable artifact attached to a release"""
    id: Union[int, str]
    content_type: str
    name: Optional[str] = None
    download_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ReleaseAsset':
        """Create from a GitHub asset payload"""
        return cls(
            id=data['id'],
            content_type=data.get('content_type', ''),
            name=data.get('name'),
            download_url=data.get('browser_download_url') or data.get('url')
        )


@dataclass(frozen=True)
class Release:
    """Latest upstream release, fetched fresh on every run"""
    version: str
    name: str
    assets: Tuple[ReleaseAsset, ...] = field(default_factory=tuple)

    def find_asset(self, content_type: str) -> Optional[ReleaseAsset]:
        """Return the first asset with the given content type"""
        for asset in self.assets:
            if asset.content_type == content_type:
                return asset
        return None

    @staticmethod
    def strip_version_prefix(name: str) -> str:
        """Turn a release name such as ``v1.2.3`` into ``1.2.3``"""
        return name[1:] if name.startswith('v') else name

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Release':
        """Create from a GitHub release payload"""
        name = data['name']
        if not isinstance(name, str) or not name:
            raise TypeError(f"release name must be a non-empty string, got {name!r}")
        return cls(
            version=cls.strip_version_prefix(name),
            name=name,
            assets=tuple(ReleaseAsset.from_dict(item) for item in data['assets'])
        )

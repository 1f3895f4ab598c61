# asset_tool/core/asset_version.py
"""Asset version token computation"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from ..constants import ASSET_VERSION_TEMPLATE, DEFAULT_ASSET_EXTENSIONS, DEFAULT_CONSTANT_NAME
from ..utils.file_utils import atomic_write
from ..utils.hash_utils import calculate_md5, combine_hashes

logger = logging.getLogger(__name__)


class AssetVersionBuilder:
    """Derives one cache-busting token from the content of all UI assets

    Every covered file is hashed on its own, the digests are sorted by value
    and hashed once more. The token therefore changes with any byte of any
    covered file, but not with the order files are enumerated in.
    """

    def __init__(self,
                 assets_dir: Path,
                 extensions: Optional[Iterable[str]] = None,
                 template: str = ASSET_VERSION_TEMPLATE,
                 constant_name: str = DEFAULT_CONSTANT_NAME):
        """
        Initialize asset version builder

        Args:
            assets_dir: Directory holding the generated UI assets
            extensions: File extensions covered by the token
            template: Source template of the generated constant file
            constant_name: Name of the generated constant
        """
        self.assets_dir = Path(assets_dir)
        self.extensions = [ext.lstrip(".") for ext in (extensions or DEFAULT_ASSET_EXTENSIONS)]
        self.template = template
        self.constant_name = constant_name

    def collect_files(self) -> List[Path]:
        """List covered files directly under the assets directory"""
        files = set()
        for ext in self.extensions:
            files.update(path for path in self.assets_dir.glob(f"*.{ext}") if path.is_file())
        return sorted(files)

    def file_hashes(self, files: Optional[Iterable[Path]] = None) -> Dict[Path, str]:
        """Hash each covered file"""
        if files is None:
            files = self.collect_files()
        return {path: calculate_md5(path) for path in files}

    def build(self, files: Optional[Iterable[Path]] = None) -> str:
        """
        Compute the asset version token

        Args:
            files: Files to cover (all covered files when omitted)

        Returns:
            Hex digest token
        """
        hashes = self.file_hashes(files)
        token = combine_hashes(hashes.values())
        logger.info("Asset version %s from %d files", token, len(hashes))
        return token

    def render(self, token: str) -> str:
        return self.template.format(constant=self.constant_name, version=token)

    def write(self, token: str, output_path: Path) -> Path:
        """
        Overwrite the generated constant file

        Args:
            token: Asset version token
            output_path: Generated source file

        Returns:
            Path of the written file
        """
        atomic_write(output_path, self.render(token))
        logger.info("Wrote %s = %r to %s", self.constant_name, token, output_path)
        return output_path

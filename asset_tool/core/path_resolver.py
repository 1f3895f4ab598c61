"""Path resolution module for asset-tool"""

import os
from pathlib import Path
from typing import Optional, Union

from ..api.exceptions import ProjectNotFoundError
from ..constants import PROJECT_MARKERS
from ..models.config import ToolConfig


class PathResolver:
    """Resolves configured paths within the host repository"""

    def __init__(self, project_root: Union[str, Path], config: Optional[ToolConfig] = None):
        """Initialize path resolver

        Args:
            project_root: Root directory of the host repository
            config: Tool configuration (defaults when omitted)
        """
        self.project_root = Path(project_root).resolve()
        self.config = config or ToolConfig()

    @staticmethod
    def find_project_root(start_path: Optional[Path] = None) -> Path:
        """Walk up from start_path until a project marker is found

        Args:
            start_path: Starting directory (current directory by default)

        Returns:
            Project root path

        Raises:
            ProjectNotFoundError: If no marker exists up to the filesystem root
        """
        current = Path(start_path or Path.cwd()).resolve()

        for candidate in (current, *current.parents):
            for marker in PROJECT_MARKERS:
                if (candidate / marker).exists():
                    return candidate

        raise ProjectNotFoundError()

    def resolve(self, path: Union[str, Path]) -> Path:
        """Resolve a path relative to project root

        Args:
            path: Path to resolve (can be relative or absolute)

        Returns:
            Resolved absolute path
        """
        path = Path(os.path.expanduser(os.path.expandvars(str(path))))

        if path.is_absolute():
            return path

        return (self.project_root / path).resolve()

    def make_relative(self, path: Union[str, Path]) -> Path:
        """Make a path relative to project root

        Args:
            path: Path to make relative

        Returns:
            Relative path, or the absolute path when outside the project
        """
        path = Path(path).resolve()

        try:
            return path.relative_to(self.project_root)
        except ValueError:
            return path

    def get_vendor_dir(self) -> Path:
        return self.resolve(self.config.vendor.path)

    def get_assets_dir(self) -> Path:
        return self.resolve(self.config.assets.path)

    def get_asset_version_file(self) -> Path:
        return self.resolve(self.config.assets.version_file)

    def get_scss_source(self) -> Optional[Path]:
        """Get SCSS source path, or None when stylesheet compilation is off"""
        if not self.config.assets.scss:
            return None
        return self.resolve(self.config.assets.scss)

    def get_css_output(self) -> Path:
        return self.resolve(self.config.assets.css)

    def get_template_source(self) -> Path:
        return self.resolve(self.config.templates.source)

    def get_engine_script(self) -> Path:
        return self.resolve(self.config.templates.engine_script)

    def get_static_script(self) -> Path:
        return self.resolve(self.config.templates.static_script)

    def get_bundle_output(self) -> Path:
        return self.resolve(self.config.templates.output)

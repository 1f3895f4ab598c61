"""Upgrader API for the vendored library"""

from pathlib import Path
from typing import Optional, Union

from ..core.path_resolver import PathResolver
from ..models.result import UpgradeResult
from ..services.config_service import ConfigService
from ..services.upgrade_service import UpgradeService


class Upgrader:
    """Upgrader class for vendor synchronization"""

    def __init__(self,
                 project_root: Optional[Union[str, Path]] = None,
                 config_path: Optional[Union[str, Path]] = None):
        """
        Initialize upgrader

        Args:
            project_root: Host repository root (searched from the current
                directory when omitted)
            config_path: Explicit configuration file
        """
        root = Path(project_root) if project_root else PathResolver.find_project_root()
        config = ConfigService(root, Path(config_path) if config_path else None).config
        self.path_resolver = PathResolver(root, config)

    def current_version(self) -> Optional[str]:
        """Version of the vendored copy, or None if nothing is vendored"""
        return UpgradeService(self.path_resolver).syncer.current_version()

    def upgrade(self, force: bool = False, build: bool = False, **service_options) -> UpgradeResult:
        """
        Upgrade the vendored library to the latest release

        Args:
            force: Re-install even when already on the latest version
            build: Rebuild UI assets afterwards
            **service_options: session, step_callback, sync_callback,
                download_callback

        Returns:
            UpgradeResult: Upgrade result

        Raises:
            AssetToolError: If any pipeline step fails
        """
        service = UpgradeService(self.path_resolver, **service_options)
        return service.upgrade(force=force, build_after=build)


# Convenience function
def upgrade(project_root: Optional[Union[str, Path]] = None, **options) -> UpgradeResult:
    """
    Upgrade the vendored library (convenience function)

    Args:
        project_root: Host repository root
        **options: Options
            - force: Re-install even when up to date
            - build: Rebuild UI assets afterwards
            - config_path: Explicit configuration file

    Returns:
        UpgradeResult: Upgrade result
    """
    upgrader = Upgrader(project_root, config_path=options.pop('config_path', None))
    return upgrader.upgrade(**options)

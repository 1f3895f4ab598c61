"""Builder API for generated UI assets"""

from pathlib import Path
from typing import Optional, Union

from ..core.path_resolver import PathResolver
from ..core.script_engine import ScriptEngine
from ..models.result import BuildResult
from ..services.build_service import BuildService
from ..services.config_service import ConfigService


class Builder:
    """Builder class for the UI asset pipeline"""

    def __init__(self,
                 project_root: Optional[Union[str, Path]] = None,
                 config_path: Optional[Union[str, Path]] = None):
        """
        Initialize builder

        Args:
            project_root: Host repository root (searched from the current
                directory when omitted)
            config_path: Explicit configuration file
        """
        root = Path(project_root) if project_root else PathResolver.find_project_root()
        config = ConfigService(root, Path(config_path) if config_path else None).config
        self.path_resolver = PathResolver(root, config)
        self.service = BuildService(self.path_resolver)

    def build(self, engine: Optional[ScriptEngine] = None) -> BuildResult:
        """
        Run the full build pipeline

        Args:
            engine: Open engine to reuse across repeated builds

        Returns:
            BuildResult: Build result

        Raises:
            AssetToolError: If any pipeline step fails
        """
        return self.service.build(engine)

    def compile_css(self) -> Optional[Path]:
        return self.service.compile_css()

    def write_vendor_js(self, engine: Optional[ScriptEngine] = None) -> Path:
        bundle_path, _ = self.service.write_vendor_js(engine)
        return bundle_path

    def update_asset_version(self) -> str:
        token, _, _ = self.service.update_asset_version()
        return token


# Convenience function
def build(project_root: Optional[Union[str, Path]] = None, **options) -> BuildResult:
    """
    Build UI assets (convenience function)

    Args:
        project_root: Host repository root
        **options: Options
            - config_path: Explicit configuration file

    Returns:
        BuildResult: Build result
    """
    return Builder(project_root, config_path=options.get('config_path')).build()

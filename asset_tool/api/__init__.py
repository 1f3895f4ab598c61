# asset_tool/api/__init__.py
"""API layer for asset-tool"""

from .upgrader import Upgrader, upgrade
from .builder import Builder, build
from .exceptions import (
    AssetToolError,
    ConfigError,
    ProjectNotFoundError,
    UpgradeError,
    NetworkError,
    UnexpectedStatusError,
    ReleaseFormatError,
    MissingArtifactError,
    SyncError,
    ArchiveError,
    VersionMismatchError,
    RewriteError,
    BuildError,
    TemplateIdError,
    ScriptEngineError,
    StylesheetError,
)

__all__ = [
    # Main classes
    "Upgrader",
    "Builder",

    # Convenience functions
    "upgrade",
    "build",

    # Exceptions
    "AssetToolError",
    "ConfigError",
    "ProjectNotFoundError",
    "UpgradeError",
    "NetworkError",
    "UnexpectedStatusError",
    "ReleaseFormatError",
    "MissingArtifactError",
    "SyncError",
    "ArchiveError",
    "VersionMismatchError",
    "RewriteError",
    "BuildError",
    "TemplateIdError",
    "ScriptEngineError",
    "StylesheetError",
]

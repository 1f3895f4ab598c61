"""Asset Tool - vendored library upgrades and UI asset builds for the profiler.

This tool keeps the vendored speedscope bundle in sync with its latest
upstream release and rebuilds the generated UI assets together with the
asset version token used for cache invalidation.
"""

from .__version__ import __version__, __version_info__, __author__, __license__

# Core API
from .api.upgrader import Upgrader, upgrade
from .api.builder import Builder, build

# Data models
from .models import Release, ReleaseAsset, ToolConfig, SyncResult, UpgradeResult, BuildResult

# Exceptions
from .api.exceptions import (
    AssetToolError,
    ConfigError,
    ProjectNotFoundError,
    NetworkError,
    UnexpectedStatusError,
    ReleaseFormatError,
    MissingArtifactError,
    ArchiveError,
    VersionMismatchError,
    RewriteError,
    TemplateIdError,
    ScriptEngineError,
    StylesheetError,
)

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__license__",

    # Main classes
    "Upgrader",
    "Builder",

    # Core API functions
    "upgrade",
    "build",

    # Data models
    "Release",
    "ReleaseAsset",
    "ToolConfig",
    "SyncResult",
    "UpgradeResult",
    "BuildResult",

    # Exceptions
    "AssetToolError",
    "ConfigError",
    "ProjectNotFoundError",
    "NetworkError",
    "UnexpectedStatusError",
    "ReleaseFormatError",
    "MissingArtifactError",
    "ArchiveError",
    "VersionMismatchError",
    "RewriteError",
    "TemplateIdError",
    "ScriptEngineError",
    "StylesheetError",
]

# asset_tool/models/__init__.py
"""Data models for asset-tool"""

from .release import Release, ReleaseAsset
from .config import (
    ToolConfig,
    UpstreamConfig,
    VendorConfig,
    AssetsConfig,
    TemplatesConfig,
    DevConfig,
    RewriteRule,
)
from .result import OperationStatus, Result, SyncResult, UpgradeResult, BuildResult

__all__ = [
    # Release models
    "Release",
    "ReleaseAsset",

    # Config models
    "ToolConfig",
    "UpstreamConfig",
    "VendorConfig",
    "AssetsConfig",
    "TemplatesConfig",
    "DevConfig",
    "RewriteRule",

    # Result models
    "OperationStatus",
    "Result",
    "SyncResult",
    "UpgradeResult",
    "BuildResult",
]

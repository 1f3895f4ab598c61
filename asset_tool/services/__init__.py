# asset_tool/services/__init__.py
"""Business logic services for asset-tool"""

from .config_service import ConfigService
from .build_service import BuildService
from .upgrade_service import UpgradeService

__all__ = [
    "ConfigService",
    "BuildService",
    "UpgradeService",
]

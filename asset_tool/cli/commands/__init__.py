# asset_tool/cli/commands/__init__.py
"""CLI commands"""

from . import upgrade
from . import build
from . import watch
from . import info

__all__ = [
    "upgrade",
    "build",
    "watch",
    "info",
]

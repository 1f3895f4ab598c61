"""CLI utilities"""

from .output import (
    console,
    format_upgrade_result,
    format_build_result,
    print_tool_error,
    print_error,
    print_warning,
    print_info,
    print_success,
)
from .progress import DownloadProgress, download_progress

__all__ = [
    "console",
    "format_upgrade_result",
    "format_build_result",
    "print_tool_error",
    "print_error",
    "print_warning",
    "print_info",
    "print_success",
    "DownloadProgress",
    "download_progress",
]

# asset_tool/utils/__init__.py
"""Utility functions for asset-tool"""

from .file_utils import (
    format_size,
    remove_path,
    copy_path,
    ensure_parent_dir,
    is_within,
    atomic_write,
)

from .hash_utils import (
    calculate_md5,
    combine_hashes,
    stream_hash,
)

from .version_utils import (
    parse_version,
    compare_versions,
    is_downgrade,
)

from .http_utils import (
    get_github_token,
    create_session,
)

__all__ = [
    # File utilities
    "format_size",
    "remove_path",
    "copy_path",
    "ensure_parent_dir",
    "is_within",
    "atomic_write",

    # Hash utilities
    "calculate_md5",
    "combine_hashes",
    "stream_hash",

    # Version utilities
    "parse_version",
    "compare_versions",
    "is_downgrade",

    # HTTP utilities
    "get_github_token",
    "create_session",
]

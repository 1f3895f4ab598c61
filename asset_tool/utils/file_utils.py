# asset_tool/utils/file_utils.py
"""File operation utilities"""

import os
import shutil
import tempfile
from pathlib import Path
from typing import Union


def format_size(size: int) -> str:
    """
    Format file size in human-readable format

    Args:
        size: Size in bytes

    Returns:
        Formatted size string
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0
    return f"{size:.2f} PB"


def remove_path(path: Path) -> None:
    """
    Remove a file, symlink or directory tree

    Args:
        path: Path to remove
    """
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def copy_path(src: Path, dst: Path) -> None:
    """
    Copy a file or directory tree, preserving metadata

    Args:
        src: Source path
        dst: Destination path
    """
    if src.is_dir() and not src.is_symlink():
        shutil.copytree(src, dst, symlinks=True)
    else:
        dst.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src, dst, follow_symlinks=False)


def ensure_parent_dir(file_path: Path) -> Path:
    """
    Ensure parent directory exists

    Args:
        file_path: File path

    Returns:
        Parent directory path
    """
    parent = file_path.parent
    parent.mkdir(parents=True, exist_ok=True)
    return parent


def is_within(path: Path, directory: Path) -> bool:
    """
    Check that a path resolves inside a directory

    Args:
        path: Candidate path
        directory: Containing directory

    Returns:
        True if path is directory or below it
    """
    try:
        path.resolve().relative_to(directory.resolve())
        return True
    except ValueError:
        return False


def atomic_write(file_path: Path,
                 content: Union[str, bytes],
                 encoding: str = "utf-8") -> None:
    """
    Write file atomically

    Args:
        file_path: Target file path
        content: Content to write
        encoding: Text encoding when content is str
    """
    ensure_parent_dir(file_path)

    # Write to temporary file first
    temp_fd, temp_path = tempfile.mkstemp(dir=file_path.parent, prefix=f".{file_path.name}.")

    try:
        if isinstance(content, bytes):
            with os.fdopen(temp_fd, 'wb') as f:
                f.write(content)
        else:
            # no newline translation
            with os.fdopen(temp_fd, 'w', encoding=encoding, newline='') as f:
                f.write(content)

        # mkstemp creates 0600 files
        if file_path.exists():
            shutil.copymode(file_path, temp_path)
        else:
            os.chmod(temp_path, 0o644)

        # Atomic rename
        os.replace(temp_path, file_path)

    except BaseException:
        # Clean up temp file on error
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        raise

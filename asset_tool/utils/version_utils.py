"""Version management utilities"""

from typing import Optional

from packaging.version import parse, Version, InvalidVersion


def parse_version(version_str: str) -> Optional[Version]:
    """
    Parse version string

    Args:
        version_str: Version string

    Returns:
        Version object or None if invalid
    """
    try:
        return parse(version_str)
    except InvalidVersion:
        return None


def compare_versions(version1: str, version2: str) -> int:
    """
    Compare two versions

    Args:
        version1: First version
        version2: Second version

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2
    """
    v1 = parse_version(version1)
    v2 = parse_version(version2)

    if v1 is None or v2 is None:
        # Fallback to string comparison
        v1, v2 = version1, version2

    if v1 < v2:
        return -1
    elif v1 > v2:
        return 1
    else:
        return 0


def is_downgrade(current: Optional[str], latest: str) -> bool:
    """
    Check whether moving from current to latest goes backwards

    Args:
        current: Currently vendored version (None when nothing is vendored)
        latest: Version published upstream

    Returns:
        True if latest is older than current
    """
    if not current:
        return False
    return compare_versions(latest, current) < 0

"""Hash calculation utilities"""

import hashlib
from pathlib import Path
from typing import BinaryIO, Iterable

from ..constants import HASH_ALGORITHM, HASH_CHUNK_SIZE


def stream_hash(file_obj: BinaryIO, algorithm: str = HASH_ALGORITHM) -> str:
    """Hex digest of everything left in a binary file object"""
    hash_func = hashlib.new(algorithm)

    while chunk := file_obj.read(HASH_CHUNK_SIZE):
        hash_func.update(chunk)

    return hash_func.hexdigest()


def calculate_md5(file_path: Path) -> str:
    """
    Calculate the MD5 digest of a file's bytes

    Args:
        file_path: Path to file

    Returns:
        Lowercase hex digest
    """
    with open(file_path, 'rb') as f:
        return stream_hash(f, "md5")


def combine_hashes(digests: Iterable[str], algorithm: str = HASH_ALGORITHM) -> str:
    """
    Combine hex digests into one digest independent of their order

    The digests are sorted by value and concatenated without separator
    before being hashed once more.
    """
    return hashlib.new(algorithm, "".join(sorted(digests)).encode("ascii")).hexdigest()

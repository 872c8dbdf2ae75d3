"""Exact-match detection by content digest."""

from __future__ import annotations

import hashlib

DEFAULT_HASH_ALGO = "sha256"


def validate_hash_algo(hash_algo: str) -> str:
    """Check that ``hash_algo`` is usable with :func:`hashlib.new`.

    Args:
        hash_algo: Hash algorithm name, e.g. ``"sha256"`` or ``"blake2b"``.

    Returns:
        The validated name, unchanged.

    Raises:
        ValueError: If hashlib does not provide the algorithm.
    """
    try:
        hasher = hashlib.new(hash_algo)
    except (ValueError, TypeError):
        msg = f"Unsupported hash algorithm: '{hash_algo}'"
        raise ValueError(msg) from None
    # shake_* digests need an explicit length and cannot back a fixed-size key
    if hasher.digest_size == 0:
        msg = f"Unsupported hash algorithm: '{hash_algo}'"
        raise ValueError(msg)
    return hash_algo


def content_digest(contents: bytes, hash_algo: str = DEFAULT_HASH_ALGO) -> str:
    """Compute the hex digest of an in-memory byte sequence.

    Args:
        contents: Bytes to hash. May be empty.
        hash_algo: Hash algorithm name accepted by :func:`hashlib.new`.

    Returns:
        Hexadecimal digest string.
    """
    return hashlib.new(hash_algo, contents).hexdigest()


def is_identical(left: bytes, right: bytes, hash_algo: str = DEFAULT_HASH_ALGO) -> bool:
    """Return True when both byte sequences have the same digest."""
    return content_digest(left, hash_algo) == content_digest(right, hash_algo)

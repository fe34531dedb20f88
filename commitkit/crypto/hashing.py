"""
Module 01 - Hashing Primitives
Leaf and pair hashing shared by every commitment structure.

Owner: Protocol/Crypto Engineer
Module ID: M01

This module provides:
- SHA-256 hashing for raw bytes
- Leaf hashing: leaf = sha256(data)
- Pair hashing: parent = sha256(left + right)
- Multi-part hashing for MMR peak bagging
- Hex encoding/decoding helpers for display

Security/Determinism Notes:
- Plain concatenation, no length prefixes and no domain separation
- Digests are never truncated (always DIGEST_SIZE bytes)
- All operations are deterministic
"""
from __future__ import annotations

import hashlib


# SHA-256 output size in bytes
DIGEST_SIZE: int = 32


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA-256 digest

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def leaf_hash(data: bytes) -> bytes:
    """
    Hash a leaf payload.

    Rule: leaf = sha256(data)

    Args:
        data: Arbitrary leaf payload

    Returns:
        32-byte leaf digest
    """
    return sha256(data)


def pair_hash(left: bytes, right: bytes) -> bytes:
    """
    Compute the parent hash of two child nodes.

    Rule: parent = sha256(left + right)

    Args:
        left: Left child hash
        right: Right child hash

    Returns:
        32-byte parent digest
    """
    return sha256(left + right)


def hash_concat(*parts: bytes) -> bytes:
    """
    Hash the in-order concatenation of any number of byte sequences.

    Used by the mountain range to collapse a window of adjacent peaks
    into one digest.

    Args:
        *parts: Byte sequences, hashed as sha256(parts[0] + parts[1] + ...)

    Returns:
        32-byte SHA-256 digest of the concatenation
    """
    hasher = hashlib.sha256()
    for part in parts:
        hasher.update(part)
    return hasher.digest()


def digest_hex(data: bytes) -> str:
    """Render a digest as lowercase hex without a prefix."""
    return data.hex()


def to_hex(data: bytes) -> str:
    """
    Convert bytes to hexadecimal string with 0x prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + data.hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert hexadecimal string (with 0x prefix) to bytes.

    Args:
        hex_string: Hex string with 0x prefix

    Returns:
        Decoded bytes

    Raises:
        ValueError: If string doesn't start with 0x, has odd length,
                   or contains invalid hex characters
    """
    if not hex_string.startswith("0x"):
        raise ValueError(
            f"Hex string must start with '0x' prefix, got: {hex_string[:10]}..."
        )

    hex_content = hex_string[2:]

    if len(hex_content) % 2 != 0:
        raise ValueError(
            f"Hex string must have even length after 0x prefix, "
            f"got length {len(hex_content)}"
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in string: {e}") from e


__all__ = [
    "DIGEST_SIZE",
    "sha256",
    "leaf_hash",
    "pair_hash",
    "hash_concat",
    "digest_hex",
    "to_hex",
    "from_hex",
]

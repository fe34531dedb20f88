"""
Core cryptographic utilities.

Module 01 provides the hashing primitives shared by the Merkle tree,
the sparse Merkle tree and the Merkle mountain range.
"""
from .hashing import (
    DIGEST_SIZE,
    sha256,
    leaf_hash,
    pair_hash,
    hash_concat,
    digest_hex,
    to_hex,
    from_hex,
)

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

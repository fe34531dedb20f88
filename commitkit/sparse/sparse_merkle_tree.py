"""
Module 03 - Sparse Merkle Tree
Fixed-depth, key-indexed Merkle commitment.

Owner: Protocol/Crypto Engineer
Module ID: M03

Tree Layout:
- Depth is fixed at TREE_DEPTH (128) levels; keys are KEY_SIZE (16) bytes
- default_nodes[TREE_DEPTH] = leaf_hash(32 zero bytes) (the empty leaf)
- default_nodes[i] = pair_hash(default_nodes[i + 1], default_nodes[i + 1])
- A fresh tree's root is default_nodes[0]

Path Derivation:
- Bit i of the path is bit (i % 8) of key[i // 8]
- Levels are walked from i = 127 down to 0; a 0 bit puts the running
  node on the left, a 1 bit puts it on the right

Single-Key Behavior:
- insert() stores no branches. The sibling at level i is always
  default_nodes[i + 1], so the root only reflects the most recent
  insert as if it were the sole non-empty leaf.
- generate_proof() returns the same default siblings for every key.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional, Sequence

from commitkit.crypto.hashing import DIGEST_SIZE, leaf_hash, pair_hash
from commitkit.schemas.errors import InvalidKeyLength


logger = logging.getLogger(__name__)


TREE_DEPTH: int = 128
KEY_SIZE: int = 16

# Leaf payload hashed to form the empty-leaf default
EMPTY_LEAF: bytes = bytes(DIGEST_SIZE)


@lru_cache(maxsize=1)
def build_default_nodes() -> tuple[bytes, ...]:
    """
    Build the default (empty subtree) node table.

    Returns:
        Tuple of TREE_DEPTH + 1 digests; index i is the hash of an
        empty subtree whose root sits at level i
    """
    nodes: list[bytes] = [b""] * (TREE_DEPTH + 1)
    nodes[TREE_DEPTH] = leaf_hash(EMPTY_LEAF)
    for i in range(TREE_DEPTH - 1, -1, -1):
        nodes[i] = pair_hash(nodes[i + 1], nodes[i + 1])
    return tuple(nodes)


def validate_key(key: bytes) -> None:
    """Raise InvalidKeyLength unless key is exactly KEY_SIZE bytes."""
    if len(key) != KEY_SIZE:
        raise InvalidKeyLength(expected=KEY_SIZE, actual=len(key))


def derive_path(key: bytes) -> int:
    """
    Derive the 128-bit branch path for a key.

    Example (4-bit illustration): key bits 1101 give path 0b1101,
    i.e. right, right, left, right from the root downward.

    Raises:
        InvalidKeyLength: If key is not KEY_SIZE bytes
    """
    validate_key(key)
    path = 0
    for i in range(TREE_DEPTH - 1, -1, -1):
        if key[i // 8] & (1 << (i % 8)):
            path |= 1 << i
    return path


def _fold_path(
    node: bytes,
    path: int,
    siblings: Sequence[bytes],
) -> bytes:
    # siblings[0] pairs with level 127, siblings[-1] with level 0
    for i in range(TREE_DEPTH - 1, -1, -1):
        sibling = siblings[TREE_DEPTH - 1 - i]
        if (path >> i) & 1 == 0:
            node = pair_hash(node, sibling)
        else:
            node = pair_hash(sibling, node)
    return node


class SparseMerkleTree:
    """
    Fixed-depth sparse Merkle tree keyed by 16-byte keys.

    Example:
        >>> tree = SparseMerkleTree()
        >>> key = bytes(16)
        >>> tree.insert(key, b"value")
        >>> tree.verify_proof(key, b"value", tree.generate_proof(key))
        True
    """

    def __init__(self) -> None:
        self._default_nodes = build_default_nodes()
        self._root = self._default_nodes[0]

    @property
    def root(self) -> bytes:
        return self._root

    @property
    def default_nodes(self) -> tuple[bytes, ...]:
        return self._default_nodes

    @property
    def empty_root(self) -> bytes:
        """Root of a tree with no non-default leaves."""
        return self._default_nodes[0]

    @property
    def is_empty(self) -> bool:
        return self._root == self._default_nodes[0]

    def _default_siblings(self) -> list[bytes]:
        return [self._default_nodes[i + 1] for i in range(TREE_DEPTH - 1, -1, -1)]

    def insert(self, key: bytes, value: bytes) -> None:
        """
        Insert value under key and recompute the root.

        The new root treats key as the only non-empty leaf; earlier
        inserts are not retained.

        Raises:
            InvalidKeyLength: If key is not KEY_SIZE bytes
        """
        path = derive_path(key)
        self._root = _fold_path(leaf_hash(value), path, self._default_siblings())
        logger.debug("SMT insert key=%s root=%s", key.hex(), self._root.hex())

    def generate_proof(self, key: bytes) -> list[bytes]:
        """
        Generate the sibling list for key, ordered from level 127 to level 0.

        Raises:
            InvalidKeyLength: If key is not KEY_SIZE bytes
        """
        validate_key(key)
        return self._default_siblings()

    def verify_proof(
        self,
        key: bytes,
        value: Optional[bytes],
        proof: Sequence[bytes],
    ) -> bool:
        """
        Verify that key maps to value (or to the empty leaf when value
        is None) under the current root.

        Returns:
            True if the recomputed root equals the stored root

        Raises:
            InvalidKeyLength: If key is not KEY_SIZE bytes
        """
        path = derive_path(key)
        if len(proof) != TREE_DEPTH:
            return False

        if value is None:
            node = self._default_nodes[TREE_DEPTH]
        else:
            node = leaf_hash(value)

        return _fold_path(node, path, proof) == self._root

    def __repr__(self) -> str:
        return f"SparseMerkleTree(depth={TREE_DEPTH}, root={self._root.hex()[:16]}...)"


__all__ = [
    "TREE_DEPTH",
    "KEY_SIZE",
    "EMPTY_LEAF",
    "SparseMerkleTree",
    "build_default_nodes",
    "derive_path",
    "validate_key",
]

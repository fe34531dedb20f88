"""
Module 02 - Merkle Tree Implementation
Deterministic Merkle tree construction, proof generation, and verification.

Owner: Protocol/Crypto Engineer
Module ID: M02

This module provides:
- Deterministic Merkle root computation over an ordered batch
- Merkle proof generation for any leaf index
- Merkle proof verification
- Carry rule for an odd number of nodes at a level

Commitment Rules (Hard Contracts):
1. Leaf hashing: leaf = sha256(item)
   - Implemented via commitkit.crypto.hashing.leaf_hash()
2. Parent hashing: parent = sha256(left + right)
3. Carry rule: a trailing unpaired node moves up to the next level
   unchanged (it is NOT hashed with itself)
4. Empty batches are rejected with EmptyInputError
5. Single leaf: root = leaf

Proof Format:
- Ordered list of ProofStep(sibling, is_left), bottom-up
- is_left is True when the node being proven is the left child,
  so the sibling is combined on the right
- Levels where the node is the unpaired carry emit no step

Determinism Notes:
- No randomness or non-deterministic ordering
- This module never sorts leaves - it trusts input order
"""
from __future__ import annotations

import logging
from typing import NamedTuple, Sequence

from commitkit.crypto.hashing import DIGEST_SIZE, leaf_hash, pair_hash
from commitkit.schemas.errors import EmptyInputError, IndexOutOfRange


logger = logging.getLogger(__name__)


class ProofStep(NamedTuple):
    """
    One level of a Merkle inclusion proof.

    Plain (sibling, is_left) pairs are accepted wherever a ProofStep is.

    Attributes:
        sibling: The sibling hash at this level
        is_left: True if the proven node is the left child at this level
    """
    sibling: bytes
    is_left: bool


def hash_level(level: Sequence[bytes]) -> list[bytes]:
    """
    Reduce one tree level to the next.

    Consecutive pairs are hashed with pair_hash; a trailing unpaired
    node is carried up unchanged.

    Example: [a, b, c] -> [parent(a, b), c]
    """
    next_level: list[bytes] = []
    for i in range(0, len(level), 2):
        if i + 1 < len(level):
            next_level.append(pair_hash(level[i], level[i + 1]))
        else:
            next_level.append(level[i])
    return next_level


def build_merkle_root(leaves: Sequence[bytes]) -> bytes:
    """
    Build a Merkle root from a sequence of leaf hashes.

    Algorithm:
    1. If empty: raise EmptyInputError
    2. Otherwise, reduce levels with hash_level() until one node remains

    Args:
        leaves: Sequence of leaf hashes. Order matters and is preserved.

    Returns:
        32-byte Merkle root (the leaf itself for a single leaf)

    Raises:
        EmptyInputError: If leaves is empty
    """
    if len(leaves) == 0:
        raise EmptyInputError()

    current_level: list[bytes] = list(leaves)
    while len(current_level) > 1:
        current_level = hash_level(current_level)

    return current_level[0]


def build_merkle_proof(leaves: Sequence[bytes], index: int) -> list[ProofStep]:
    """
    Generate a Merkle proof for the leaf at the given index.

    Algorithm:
    1. Start at the target leaf index
    2. At each level:
       - Sibling index is index XOR 1
       - If the sibling exists, record (sibling, index is even)
       - Move up: index = index // 2
       - Rebuild the next level with hash_level()
    3. Continue until root level

    Args:
        leaves: Sequence of leaf hashes
        index: 0-based index of the leaf to prove

    Returns:
        List of ProofStep, bottom-up

    Raises:
        IndexOutOfRange: If index is not a valid leaf index
    """
    if index < 0 or index >= len(leaves):
        raise IndexOutOfRange(index, len(leaves))

    proof: list[ProofStep] = []
    current_level: list[bytes] = list(leaves)
    current_index = index

    while len(current_level) > 1:
        sibling_index = current_index ^ 1
        if sibling_index < len(current_level):
            proof.append(
                ProofStep(
                    sibling=current_level[sibling_index],
                    is_left=current_index % 2 == 0,
                )
            )

        current_index = current_index // 2
        current_level = hash_level(current_level)

    return proof


def verify_merkle_proof(
    root: bytes,
    leaf: bytes,
    proof: Sequence[ProofStep],
) -> bool:
    """
    Verify a Merkle proof.

    Recomputes the root from the leaf and proof steps, checking
    against the claimed root.

    Args:
        root: The claimed Merkle root
        leaf: The leaf hash being proven
        proof: Proof steps (or plain (sibling, is_left) pairs), bottom-up

    Returns:
        True if the proof is valid, False otherwise (including when
        the leaf or any step is malformed)
    """
    if not isinstance(leaf, bytes):
        return False
    current_hash = leaf

    for step in proof:
        try:
            sibling, is_left = step
        except (TypeError, ValueError):
            return False
        if not isinstance(sibling, bytes) or len(sibling) != DIGEST_SIZE:
            return False

        if is_left:
            current_hash = pair_hash(current_hash, sibling)
        else:
            current_hash = pair_hash(sibling, current_hash)

    return current_hash == root


def compute_tree_depth(num_leaves: int) -> int:
    """
    Compute the depth of a Merkle tree with given number of leaves.

    Depth is the number of levels from leaves to root (inclusive).
    A single leaf has depth 1, two or three leaves have depth 2, etc.

    Args:
        num_leaves: Number of leaves in the tree

    Returns:
        Tree depth (0 for empty tree)
    """
    if num_leaves == 0:
        return 0

    depth = 1
    n = num_leaves
    while n > 1:
        # Carried node still occupies a slot on the next level
        n = (n + 1) // 2
        depth += 1

    return depth


class MerkleTree:
    """
    Binary Merkle tree over a fixed, ordered batch of items.

    Example:
        >>> tree = MerkleTree([b"a", b"b", b"c"])
        >>> proof = tree.generate_proof(2)
        >>> MerkleTree.verify_proof(tree.root, leaf_hash(b"c"), proof)
        True
    """

    def __init__(self, items: Sequence[bytes]) -> None:
        if len(items) == 0:
            raise EmptyInputError()
        self._leaves: tuple[bytes, ...] = tuple(leaf_hash(item) for item in items)
        self._root = build_merkle_root(self._leaves)
        logger.debug(
            "Built Merkle tree: %d leaves, root=%s",
            len(self._leaves),
            self._root.hex(),
        )

    @classmethod
    def from_leaves(cls, leaves: Sequence[bytes]) -> "MerkleTree":
        """Build a tree from precomputed leaf hashes."""
        if len(leaves) == 0:
            raise EmptyInputError()
        tree = cls.__new__(cls)
        tree._leaves = tuple(leaves)
        tree._root = build_merkle_root(tree._leaves)
        return tree

    @property
    def root(self) -> bytes:
        return self._root

    @property
    def leaves(self) -> tuple[bytes, ...]:
        return self._leaves

    @property
    def depth(self) -> int:
        return compute_tree_depth(len(self._leaves))

    def __len__(self) -> int:
        return len(self._leaves)

    def generate_proof(self, leaf_index: int) -> list[ProofStep]:
        """
        Generate an inclusion proof for the leaf at leaf_index.

        Raises:
            IndexOutOfRange: If leaf_index is not a valid leaf index
        """
        return build_merkle_proof(self._leaves, leaf_index)

    @staticmethod
    def verify_proof(root: bytes, leaf: bytes, proof: Sequence[ProofStep]) -> bool:
        """Verify that leaf is committed to by root."""
        return verify_merkle_proof(root, leaf, proof)

    def __repr__(self) -> str:
        return f"MerkleTree(leaves={len(self._leaves)}, root={self._root.hex()[:16]}...)"


__all__ = [
    "ProofStep",
    "MerkleTree",
    "hash_level",
    "build_merkle_root",
    "build_merkle_proof",
    "verify_merkle_proof",
    "compute_tree_depth",
]

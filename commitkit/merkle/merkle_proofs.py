"""
Module 02 - Merkle Proofs Convenience Wrappers
Thin wrappers around core Merkle tree functions for cleaner API.

Owner: Protocol/Crypto Engineer
Module ID: M02

This module provides class-based interfaces:
- MerkleProver: Generate proofs and roots straight from raw items
- MerkleVerifier: Verify proofs for raw items or pre-hashed leaves

These are convenience wrappers around the functions in merkle_tree.py.
"""
from __future__ import annotations

from typing import Sequence

from commitkit.crypto.hashing import leaf_hash
from commitkit.merkle.merkle_tree import (
    ProofStep,
    build_merkle_proof,
    build_merkle_root,
    verify_merkle_proof,
)


class MerkleProver:
    """
    Convenience class for generating Merkle proofs.

    Provides static methods for proof generation from:
    - Pre-hashed leaves (bytes)
    - Raw items (will be leaf-hashed)

    Example:
        >>> proof = MerkleProver.prove_item([b"a", b"b", b"c"], index=1)
        >>> len(proof)
        2
    """

    @staticmethod
    def prove(leaves: Sequence[bytes], index: int) -> list[ProofStep]:
        """
        Generate a Merkle proof for the leaf at the given index.

        Args:
            leaves: Sequence of pre-hashed leaf values
            index: 0-based index of the leaf to prove

        Returns:
            Proof steps for the specified leaf

        Raises:
            IndexOutOfRange: If index is out of range
        """
        return build_merkle_proof(leaves, index)

    @staticmethod
    def prove_item(items: Sequence[bytes], index: int) -> list[ProofStep]:
        """
        Generate a Merkle proof for a raw item at the given index.

        Items are first converted to leaf hashes.

        Raises:
            IndexOutOfRange: If index is out of range
        """
        leaves = [leaf_hash(item) for item in items]
        return build_merkle_proof(leaves, index)

    @staticmethod
    def compute_root(leaves: Sequence[bytes]) -> bytes:
        """
        Compute the Merkle root for a sequence of leaves.

        Raises:
            EmptyInputError: If leaves is empty
        """
        return build_merkle_root(leaves)

    @staticmethod
    def compute_root_from_items(items: Sequence[bytes]) -> bytes:
        """
        Compute the Merkle root for a sequence of raw items.

        Raises:
            EmptyInputError: If items is empty
        """
        leaves = [leaf_hash(item) for item in items]
        return build_merkle_root(leaves)


class MerkleVerifier:
    """
    Convenience class for verifying Merkle proofs.

    Example:
        >>> items = [b"a", b"b", b"c"]
        >>> root = MerkleProver.compute_root_from_items(items)
        >>> proof = MerkleProver.prove_item(items, index=1)
        >>> MerkleVerifier.verify_item_in_root(b"b", proof, root)
        True
    """

    @staticmethod
    def verify(root: bytes, leaf: bytes, proof: Sequence[ProofStep]) -> bool:
        """
        Verify a Merkle proof for a pre-hashed leaf.

        Returns:
            True if the proof is valid, False otherwise
        """
        return verify_merkle_proof(root, leaf, proof)

    @staticmethod
    def verify_item_in_root(
        item: bytes,
        proof: Sequence[ProofStep],
        root: bytes,
    ) -> bool:
        """
        Verify a raw item is included in a Merkle root.

        The item is leaf-hashed before verification.

        Args:
            item: The raw item (will be leaf-hashed)
            proof: Proof steps, bottom-up
            root: The claimed Merkle root

        Returns:
            True if the proof is valid, False otherwise
        """
        return verify_merkle_proof(root, leaf_hash(item), proof)


__all__ = [
    "MerkleProver",
    "MerkleVerifier",
]

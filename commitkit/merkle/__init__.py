"""
Module 02 - Merkle Tree and Commitments
Binary Merkle tree construction + proof generation/verification.

Owner: Protocol/Crypto Engineer
Module ID: M02

This module provides:
- MerkleTree: Tree over a fixed batch of items
- ProofStep: One (sibling, is_left) entry of an inclusion proof
- build_merkle_root: Compute root from leaf hashes
- build_merkle_proof: Generate proof for a specific leaf
- verify_merkle_proof: Verify a proof against a root

Commitment Rules:
1. Leaf hashing: sha256(item)
2. Parent hashing: sha256(left + right)
3. Odd node at any level: carried up unchanged
4. Empty batch: rejected with EmptyInputError
5. Single leaf: root = leaf

Usage:
    from commitkit.merkle import MerkleTree
    from commitkit.crypto import leaf_hash

    tree = MerkleTree([b"a", b"b", b"c"])
    proof = tree.generate_proof(2)
    assert MerkleTree.verify_proof(tree.root, leaf_hash(b"c"), proof)
"""
from .merkle_tree import (
    ProofStep,
    MerkleTree,
    hash_level,
    build_merkle_root,
    build_merkle_proof,
    verify_merkle_proof,
    compute_tree_depth,
)

from .merkle_proofs import (
    MerkleProver,
    MerkleVerifier,
)


__all__ = [
    # Core types
    "ProofStep",
    "MerkleTree",
    # Core functions
    "hash_level",
    "build_merkle_root",
    "build_merkle_proof",
    "verify_merkle_proof",
    "compute_tree_depth",
    # Convenience classes
    "MerkleProver",
    "MerkleVerifier",
]

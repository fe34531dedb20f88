"""
Module 03 - Sparse Merkle Tree

Usage:
    from commitkit.sparse import SparseMerkleTree

    tree = SparseMerkleTree()
    tree.insert(key, b"value")
    assert tree.verify_proof(key, b"value", tree.generate_proof(key))
"""
from .sparse_merkle_tree import (
    TREE_DEPTH,
    KEY_SIZE,
    EMPTY_LEAF,
    SparseMerkleTree,
    build_default_nodes,
    derive_path,
    validate_key,
)

__all__ = [
    "TREE_DEPTH",
    "KEY_SIZE",
    "EMPTY_LEAF",
    "SparseMerkleTree",
    "build_default_nodes",
    "derive_path",
    "validate_key",
]

"""
Common test fixtures shared by all modules.

Provides factory functions for commitkit structures:
- Item batches for Merkle trees and mountain ranges
- Sparse tree keys and populated trees
- Mountain ranges filled with sequential items
"""

from typing import Optional

from commitkit.mmr import MerkleMountainRange
from commitkit.sparse import KEY_SIZE, SparseMerkleTree


def make_items(count: int, prefix: str = "item") -> list[bytes]:
    """Create `count` distinct byte items."""
    return [f"{prefix}{i}".encode() for i in range(count)]


def make_key(fill: int = 0) -> bytes:
    """Create a KEY_SIZE key with every byte set to `fill`."""
    return bytes([fill]) * KEY_SIZE


def make_sparse_tree() -> SparseMerkleTree:
    """Create a sparse tree with three inserts; value3 under key 0x02.. is last."""
    tree = SparseMerkleTree()
    tree.insert(make_key(0), b"value1")
    tree.insert(make_key(1), b"value2")
    tree.insert(make_key(2), b"value3")
    return tree


def make_mmr(bag_size: int = 2, items: Optional[list[bytes]] = None) -> MerkleMountainRange:
    """Create a mountain range and append `items` in order."""
    mmr = MerkleMountainRange(bag_size=bag_size)
    mmr.extend(items or [])
    return mmr

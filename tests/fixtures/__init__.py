"""
Test fixtures package for commitkit tests.

This package provides factory functions for creating test objects:
- common.py: Item batches, keys and pre-populated structures

Usage:
    from fixtures import make_items, make_mmr

    def test_something():
        mmr = make_mmr(bag_size=3, items=make_items(10))
"""

from .common import (
    make_items,
    make_key,
    make_sparse_tree,
    make_mmr,
)

__all__ = [
    "make_items",
    "make_key",
    "make_sparse_tree",
    "make_mmr",
]

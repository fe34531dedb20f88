"""
Module 04 - Merkle Mountain Range

Usage:
    from commitkit.mmr import MerkleMountainRange

    mmr = MerkleMountainRange(bag_size=2)
    mmr.append(b"A")
    print(mmr.root_hex())
"""
from .mountain_range import DEFAULT_BAG_SIZE, MerkleMountainRange

__all__ = [
    "DEFAULT_BAG_SIZE",
    "MerkleMountainRange",
]

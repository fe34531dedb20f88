"""
commitkit - authenticated data structures.

- commitkit.merkle: binary Merkle tree with inclusion proofs
- commitkit.sparse: fixed-depth sparse Merkle tree
- commitkit.mmr: append-only Merkle mountain range
"""

from commitkit.merkle import MerkleTree, ProofStep
from commitkit.mmr import MerkleMountainRange
from commitkit.sparse import SparseMerkleTree

__version__ = "0.1.0"

__all__ = [
    "MerkleTree",
    "ProofStep",
    "SparseMerkleTree",
    "MerkleMountainRange",
]

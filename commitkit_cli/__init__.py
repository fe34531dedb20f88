"""
commitkit CLI

Command-line interface for the commitment structures.

Usage:
    python -m commitkit_cli merkle root a b c
    python -m commitkit_cli merkle prove --index 2 a b c
    python -m commitkit_cli sparse insert 0x000102030405060708090a0b0c0d0e0f value
    python -m commitkit_cli mmr append --bag-size 3 a b c d
"""

__version__ = "0.1.0"

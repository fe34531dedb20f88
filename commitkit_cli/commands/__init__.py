"""
CLI command modules.
"""

from commitkit_cli.commands import merkle, sparse, mmr

__all__ = ["merkle", "sparse", "mmr"]

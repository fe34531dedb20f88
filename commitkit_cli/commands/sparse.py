"""
CLI Sparse Merkle Tree Command

Insert a single key/value into a fresh sparse Merkle tree, print the
resulting root and check the generated proof.

Usage:
    commitkit sparse insert KEY_HEX VALUE [--json]
"""

from __future__ import annotations

import sys
from argparse import Namespace

from commitkit.crypto.hashing import from_hex, to_hex
from commitkit.schemas.errors import CommitKitException
from commitkit.sparse import SparseMerkleTree
from commitkit_cli.commands.output import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    EXIT_VERIFICATION_FAILED,
    print_json,
)


def insert_cmd(args: Namespace) -> int:
    """Execute the sparse insert command."""
    try:
        key = from_hex(args.key)
        value = args.value.encode("utf-8")
        tree = SparseMerkleTree()
        tree.insert(key, value)
        verified = tree.verify_proof(key, value, tree.generate_proof(key))
    except (CommitKitException, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    if args.json:
        print_json({"key": to_hex(key), "root": to_hex(tree.root), "verified": verified})
    else:
        print(f"root:     {to_hex(tree.root)}")
        print(f"verified: {'yes' if verified else 'NO'}")

    return EXIT_SUCCESS if verified else EXIT_VERIFICATION_FAILED

"""
CLI Merkle Commands

Build a Merkle tree over the given items and print its root, or
generate and check an inclusion proof.

Usage:
    commitkit merkle root ITEM... [--json]
    commitkit merkle prove --index N ITEM... [--json]
"""

from __future__ import annotations

import logging
import sys
from argparse import Namespace
from dataclasses import dataclass, field, asdict
from typing import Any

from commitkit.crypto.hashing import to_hex
from commitkit.merkle import MerkleTree
from commitkit.schemas.errors import CommitKitException
from commitkit_cli.commands.output import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    EXIT_VERIFICATION_FAILED,
    encode_items,
    print_json,
)


logger = logging.getLogger(__name__)


@dataclass
class ProofSummary:
    """Summary of a generated proof for CLI output."""
    root: str = ""
    leaf_index: int = 0
    leaf: str = ""
    steps: list[dict[str, Any]] = field(default_factory=list)
    verified: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def root_cmd(args: Namespace) -> int:
    """Execute the merkle root command."""
    try:
        tree = MerkleTree(encode_items(args.items))
    except CommitKitException as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    if args.json:
        print_json({"root": to_hex(tree.root), "leaves": len(tree), "depth": tree.depth})
    else:
        print(to_hex(tree.root))
    return EXIT_SUCCESS


def prove_cmd(args: Namespace) -> int:
    """Execute the merkle prove command."""
    try:
        tree = MerkleTree(encode_items(args.items))
        proof = tree.generate_proof(args.index)
    except CommitKitException as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    leaf = tree.leaves[args.index]
    summary = ProofSummary(
        root=to_hex(tree.root),
        leaf_index=args.index,
        leaf=to_hex(leaf),
        steps=[
            {"sibling": to_hex(step.sibling), "is_left": step.is_left}
            for step in proof
        ],
        verified=MerkleTree.verify_proof(tree.root, leaf, proof),
    )
    logger.info(f"Generated proof with {len(proof)} steps for leaf {args.index}")

    if args.json:
        print_json(summary.to_dict())
    else:
        print(f"root:  {summary.root}")
        print(f"leaf:  {summary.leaf} (index {summary.leaf_index})")
        for step in summary.steps:
            side = "right" if step["is_left"] else "left"
            print(f"  sibling on {side}: {step['sibling']}")
        print(f"verified: {'yes' if summary.verified else 'NO'}")

    return EXIT_SUCCESS if summary.verified else EXIT_VERIFICATION_FAILED

"""
CLI Merkle Mountain Range Command

Append items to a fresh mountain range and print its peaks and root.

Usage:
    commitkit mmr append [--bag-size K] ITEM... [--json]
"""

from __future__ import annotations

import sys
from argparse import Namespace

from commitkit.crypto.hashing import digest_hex
from commitkit.mmr import MerkleMountainRange
from commitkit.schemas.errors import CommitKitException
from commitkit_cli.commands.output import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    encode_items,
    print_json,
)


def append_cmd(args: Namespace) -> int:
    """Execute the mmr append command."""
    bag_size = args.bag_size
    if bag_size is None:
        bag_size = args.runtime_config.mmr.bag_size

    try:
        mmr = MerkleMountainRange(bag_size=bag_size)
    except CommitKitException as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    mmr.extend(encode_items(args.items))
    peaks = {
        height: digest_hex(peak)
        for height, peak in enumerate(mmr.peaks)
        if peak is not None
    }

    if args.json:
        print_json({
            "bag_size": mmr.bag_size,
            "leaves": len(mmr),
            "peaks": {str(h): p for h, p in peaks.items()},
            "root": mmr.root_hex(),
        })
    else:
        for height, peak in peaks.items():
            print(f"peak[{height}]: {peak}")
        print(f"root:    {mmr.root_hex() or '(empty)'}")

    return EXIT_SUCCESS

"""
Module 04 - Merkle Mountain Range
Append-only accumulator with windowed peak bagging.

Owner: Protocol/Crypto Engineer
Module ID: M04

Peak Array:
- Index is subtree height; a slot holds a digest or None (empty)
- A digest at height h is the root of 2**h consecutive leaves, until
  it is consumed by a carry-merge or by bagging

Append:
1. leaf = leaf_hash(data), recorded in the leaf log
2. Carry-merge from height 0: while the slot is occupied,
   node = pair_hash(peaks[h], node), clear the slot, h += 1
3. Write node at the first empty slot (extending the array if needed)
4. Run bag_peaks()

Bagging:
- Scan windows [i, i + bag_size) left to right, advancing i by one
- A window with every slot occupied collapses into
  peaks[i] = sha256(peaks[i] + ... + peaks[i + bag_size - 1]),
  the remaining window slots are cleared
- This is NOT the canonical "bag all peaks into one" fold; several
  peaks can stay live depending on bag_size and leaf count

Root:
- Fold occupied peaks from the highest index down:
  acc = peak for the first, then acc = pair_hash(peak, acc)
- None while no leaves have been appended

Inclusion proofs are not supported.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from commitkit.crypto.hashing import digest_hex, hash_concat, leaf_hash, pair_hash
from commitkit.schemas.errors import InvalidBagSize


logger = logging.getLogger(__name__)


DEFAULT_BAG_SIZE: int = 2


class MerkleMountainRange:
    """
    Append-only Merkle mountain range.

    Example:
        >>> mmr = MerkleMountainRange(bag_size=2)
        >>> mmr.extend([b"A", b"B", b"C", b"D"])
        >>> mmr.peak_count
        1
    """

    def __init__(self, bag_size: int = DEFAULT_BAG_SIZE) -> None:
        if isinstance(bag_size, bool) or not isinstance(bag_size, int) or bag_size < 2:
            raise InvalidBagSize(bag_size)
        self._bag_size = bag_size
        self._peaks: list[Optional[bytes]] = []
        self._leaves: list[bytes] = []

    @property
    def bag_size(self) -> int:
        return self._bag_size

    @property
    def peaks(self) -> tuple[Optional[bytes], ...]:
        """Peak slots by height; None marks an empty slot."""
        return tuple(self._peaks)

    @property
    def leaves(self) -> tuple[bytes, ...]:
        return tuple(self._leaves)

    @property
    def peak_count(self) -> int:
        """Number of occupied peak slots."""
        return sum(1 for peak in self._peaks if peak is not None)

    def __len__(self) -> int:
        return len(self._leaves)

    def append(self, data: bytes) -> None:
        """Append one item and update the peaks."""
        node = leaf_hash(data)
        self._leaves.append(node)

        height = 0
        while height < len(self._peaks) and self._peaks[height] is not None:
            node = pair_hash(self._peaks[height], node)
            self._peaks[height] = None
            height += 1

        if height == len(self._peaks):
            self._peaks.append(node)
        else:
            self._peaks[height] = node

        logger.debug(
            "MMR append #%d: peak written at height %d",
            len(self._leaves),
            height,
        )
        self.bag_peaks()

    def extend(self, items: Iterable[bytes]) -> None:
        """Append each item in order."""
        for item in items:
            self.append(item)

    def bag_peaks(self) -> None:
        """Collapse every fully occupied window of bag_size adjacent peaks."""
        i = 0
        while i + self._bag_size <= len(self._peaks):
            window = self._peaks[i:i + self._bag_size]
            if all(peak is not None for peak in window):
                self._peaks[i] = hash_concat(*window)
                for j in range(i + 1, i + self._bag_size):
                    self._peaks[j] = None
                logger.debug("MMR bagged peaks [%d, %d)", i, i + self._bag_size)
            i += 1

    def root(self) -> Optional[bytes]:
        """Aggregate root over the occupied peaks, or None if empty."""
        acc: Optional[bytes] = None
        for peak in reversed(self._peaks):
            if peak is None:
                continue
            if acc is None:
                acc = peak
            else:
                acc = pair_hash(peak, acc)
        return acc

    def root_hex(self) -> Optional[str]:
        """Root as lowercase hex text, or None if empty."""
        root = self.root()
        if root is None:
            return None
        return digest_hex(root)

    def __repr__(self) -> str:
        return (
            f"MerkleMountainRange(bag_size={self._bag_size}, "
            f"leaves={len(self._leaves)}, peaks={self.peak_count})"
        )


__all__ = [
    "DEFAULT_BAG_SIZE",
    "MerkleMountainRange",
]

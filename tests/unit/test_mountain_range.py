"""
Module 04 - Merkle Mountain Range Unit Tests
Tests for commitkit/mmr/mountain_range.py

Covers:
- Carry-merge on append
- Windowed peak bagging for bag_size 2 and 3
- Root folding and hex rendering
- bag_size validation
"""
import math

import pytest

from commitkit.crypto.hashing import hash_concat, leaf_hash, pair_hash
from commitkit.mmr import MerkleMountainRange
from commitkit.schemas.errors import InvalidBagSize
from fixtures.common import make_mmr


LETTERS = [c.encode() for c in "ABCDEFGH"]


class TestConstruction:
    """Tests for MMR construction."""

    def test_empty_mmr(self):
        mmr = MerkleMountainRange(bag_size=2)

        assert mmr.peaks == ()
        assert mmr.leaves == ()
        assert len(mmr) == 0
        assert mmr.peak_count == 0
        assert mmr.root() is None
        assert mmr.root_hex() is None

    def test_default_bag_size(self):
        assert MerkleMountainRange().bag_size == 2

    @pytest.mark.parametrize("bag_size", [1, 0, -3, True, 2.0])
    def test_invalid_bag_size_raises(self, bag_size):
        with pytest.raises(InvalidBagSize):
            MerkleMountainRange(bag_size=bag_size)


class TestAppend:
    """Tests for carry-merge and bagging on append."""

    def test_single_append(self):
        mmr = make_mmr(2, [b"A"])

        assert mmr.peaks == (leaf_hash(b"A"),)
        assert mmr.root() == leaf_hash(b"A")

    def test_carry_puts_existing_peak_first(self):
        mmr = make_mmr(3, [b"A", b"B"])

        assert mmr.peaks == (None, pair_hash(leaf_hash(b"A"), leaf_hash(b"B")))

    def test_bagging_collapses_full_window(self):
        """Third append with bag_size 2: [C, AB] bags into [H(C || AB), None]."""
        mmr = make_mmr(2, [b"A", b"B", b"C"])
        ab = pair_hash(leaf_hash(b"A"), leaf_hash(b"B"))

        assert mmr.peaks == (hash_concat(leaf_hash(b"C"), ab), None)

    def test_no_bagging_below_window(self):
        """bag_size 3 with [C, AB]: only two slots, nothing to bag."""
        mmr = make_mmr(3, [b"A", b"B", b"C"])
        ab = pair_hash(leaf_hash(b"A"), leaf_hash(b"B"))

        assert mmr.peaks == (leaf_hash(b"C"), ab)
        assert mmr.root() == pair_hash(leaf_hash(b"C"), ab)

    def test_four_appends_bag_size_three(self):
        mmr = make_mmr(3, [b"A", b"B", b"C", b"D"])
        ab = pair_hash(leaf_hash(b"A"), leaf_hash(b"B"))
        cd = pair_hash(leaf_hash(b"C"), leaf_hash(b"D"))

        assert mmr.peaks == (None, None, pair_hash(ab, cd))

    def test_leaf_log_records_every_append(self):
        mmr = make_mmr(2, LETTERS)

        assert mmr.leaves == tuple(leaf_hash(item) for item in LETTERS)
        assert len(mmr) == 8

    def test_peaks_array_never_shrinks(self):
        mmr = MerkleMountainRange(bag_size=3)
        previous = 0
        for i in range(40):
            mmr.append(str(i).encode())
            assert len(mmr.peaks) >= previous
            previous = len(mmr.peaks)

    def test_peaks_view_is_a_copy(self):
        mmr = make_mmr(2, [b"A"])
        peaks = mmr.peaks
        mmr.append(b"B")

        assert peaks == (leaf_hash(b"A"),)


class TestBagging:
    """Scenarios for windowed bagging."""

    def test_bag_size_two_eight_appends_one_peak(self):
        mmr = make_mmr(2, LETTERS)

        assert mmr.peak_count == 1

        root1 = mmr.root()
        mmr.append(b"I")
        assert mmr.root() != root1

    def test_bag_size_two_root_changes_every_append(self):
        mmr = MerkleMountainRange(bag_size=2)
        roots = set()
        for i in range(32):
            mmr.append(str(i).encode())
            roots.add(mmr.root())

        assert len(roots) == 32

    def test_bag_size_three_ten_appends(self):
        mmr = make_mmr(3, [str(i).encode() for i in range(10)])

        assert mmr.peak_count <= math.ceil(math.log2(10))

        root1 = mmr.root()
        mmr.append(b"10")
        assert mmr.root() != root1

    def test_manual_bag_peaks_is_idempotent_after_append(self):
        mmr = make_mmr(2, LETTERS[:5])
        before = mmr.peaks
        mmr.bag_peaks()

        assert mmr.peaks == before


class TestRoot:
    """Tests for root() and root_hex()."""

    def test_root_folds_from_highest_peak(self):
        mmr = make_mmr(3, [b"A", b"B", b"C"])
        low, high = mmr.peaks

        assert mmr.root() == pair_hash(low, high)

    def test_root_skips_empty_slots(self):
        mmr = make_mmr(3, [b"A", b"B", b"C", b"D", b"E"])
        peaks = mmr.peaks

        assert peaks[1] is None
        assert mmr.root() == pair_hash(peaks[0], peaks[2])

    def test_root_hex_is_lowercase_hex(self):
        mmr = make_mmr(2, [b"A", b"B"])
        root_hex = mmr.root_hex()

        assert root_hex == mmr.root().hex()
        assert root_hex == root_hex.lower()
        assert len(root_hex) == 64

    def test_same_sequence_same_root(self):
        assert make_mmr(3, LETTERS).root() == make_mmr(3, LETTERS).root()

    def test_different_sequence_different_root(self):
        assert make_mmr(2, LETTERS).root() != make_mmr(2, list(reversed(LETTERS))).root()

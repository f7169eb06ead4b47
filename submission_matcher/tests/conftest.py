"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from submission_matcher.matching import SegmentHasher


class ConstantHasher(SegmentHasher):
    """
    Hasher whose fingerprints always collide.

    Every window maps to 0, so callers must fall back on element-wise
    confirmation or agreement scoring to tell windows apart.
    """

    def fingerprint(self, start: int, length: int) -> int:
        super().fingerprint(start, length)
        return 0


@pytest.fixture
def constant_hasher() -> type[SegmentHasher]:
    """Hasher class whose fingerprints always collide."""
    return ConstantHasher


@pytest.fixture
def distinct_tokens():
    """
    Factory for runs of distinct, ascending tokens.

    Usage in tests:
        def test_something(distinct_tokens):
            a = distinct_tokens(1000, 50)  # array([1000, ..., 1049])
    """

    def _make(start: int, count: int) -> np.ndarray:
        return np.arange(start, start + count, dtype=np.int64)

    return _make


def used_positions(matches, size: int, side: str) -> np.ndarray:
    """
    Recompute a usage mask from reported matches.

    Raises AssertionError if any position is claimed twice.
    """
    mask = np.zeros(size, dtype=bool)
    for match in matches:
        start = match.start_a if side == "a" else match.start_b
        window = slice(start, start + match.length)
        assert not mask[window].any(), f"position reused by {match}"
        mask[window] = True
    return mask


@pytest.fixture
def usage_mask():
    """Recompute a usage mask from reported matches (see used_positions)."""
    return used_positions

"""Exact fragment detector with per-call usage masks."""

from __future__ import annotations

import logging

import numpy as np

from .config import MatcherConfig
from .hashing import SegmentHasher
from .models import ExactMatchReport, MatchCandidate, MatchKind

logger = logging.getLogger(__name__)


class ExactMatchDetector:
    """
    Finds non-overlapping exact fragments shared by two sequences.

    Fragment lengths are tried from max_exact_length down to
    min_exact_length, so longer fragments claim tokens before shorter ones
    compete for them. For each unclaimed window of A the first B window (in
    ascending offset order) that is unclaimed and equal wins.

    Each token position in either sequence belongs to at most one fragment.

    Usage:
        detector = ExactMatchDetector(MatcherConfig())
        report = detector.detect(tokens_a, tokens_b)
        # report.total_length = tokens covered by exact fragments
        # report.matches = fragments in discovery order
    """

    def __init__(self, config: MatcherConfig | None = None):
        self._config = config or MatcherConfig()

    def detect(self, tokens_a: np.ndarray, tokens_b: np.ndarray) -> ExactMatchReport:
        """
        Detect exact fragments between two normalised token arrays.

        Args:
            tokens_a: 1-D int64 array (sequence A)
            tokens_b: 1-D int64 array (sequence B)

        Returns:
            ExactMatchReport with the total fragment length and each fragment.
            Sequences shorter than min_exact_length yield an empty report.
        """
        config = self._config
        size_a, size_b = len(tokens_a), len(tokens_b)
        if min(size_a, size_b) < config.min_exact_length:
            return ExactMatchReport(total_length=0)

        used_a = np.zeros(size_a, dtype=bool)
        used_b = np.zeros(size_b, dtype=bool)
        hasher_a = SegmentHasher(tokens_a)
        hasher_b = SegmentHasher(tokens_b)

        matches: list[MatchCandidate] = []
        total = 0

        for length in range(config.max_exact_length, config.min_exact_length - 1, -1):
            if length > size_a or length > size_b:
                continue

            table_b = hasher_b.window_table(length)

            for start_a in range(size_a - length + 1):
                if used_a[start_a : start_a + length].any():
                    continue

                offsets = table_b.get(hasher_a.fingerprint(start_a, length))
                if not offsets:
                    continue

                start_b = self._first_confirmed(
                    tokens_a, tokens_b, used_b, start_a, offsets, length
                )
                if start_b is None:
                    continue

                used_a[start_a : start_a + length] = True
                used_b[start_b : start_b + length] = True
                total += length
                matches.append(
                    MatchCandidate(
                        start_a=start_a,
                        start_b=start_b,
                        length=length,
                        kind=MatchKind.EXACT,
                    )
                )

        logger.debug(
            f"Exact detection: {len(matches)} fragments, {total} tokens "
            f"(sizes {size_a}/{size_b})"
        )
        return ExactMatchReport(total_length=total, matches=tuple(matches))

    def _first_confirmed(
        self,
        tokens_a: np.ndarray,
        tokens_b: np.ndarray,
        used_b: np.ndarray,
        start_a: int,
        offsets: list[int],
        length: int,
    ) -> int | None:
        """
        Return the first B offset whose window is unclaimed and equal to A's.

        A fingerprint hit alone is never trusted.
        """
        window_a = tokens_a[start_a : start_a + length]
        for start_b in offsets:
            if used_b[start_b : start_b + length].any():
                continue
            if np.array_equal(window_a, tokens_b[start_b : start_b + length]):
                return start_b
        return None

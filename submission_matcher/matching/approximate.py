"""Long approximate match finder: contiguous-run DP with a hashed fallback scan."""

from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np

from .config import MatcherConfig
from .hashing import SegmentHasher
from .models import LongMatch, MatchCandidate, MatchKind, MatchStage

logger = logging.getLogger(__name__)


def agreement_ratio(
    tokens_a: np.ndarray,
    tokens_b: np.ndarray,
    start_a: int,
    start_b: int,
    length: int,
) -> float:
    """
    Fraction of positions where the two windows hold the same token.

    Raises:
        ValueError: If length is not positive or a window does not fit
    """
    if length < 1:
        raise ValueError(f"Window length must be >= 1, got {length}")
    if start_a + length > len(tokens_a) or start_b + length > len(tokens_b):
        raise ValueError("Window extends past the end of a sequence")
    window_a = tokens_a[start_a : start_a + length]
    window_b = tokens_b[start_b : start_b + length]
    return float(np.count_nonzero(window_a == window_b)) / length


class FallbackScanner:
    """
    Hashed sliding-window search for near-exact windows.

    B's windows (fixed size, spaced by the configured stride) are indexed by
    fingerprint. A is scanned with the same window and stride; every
    fingerprint collision is scored by its true agreement ratio and accepted
    at approximate_threshold or above.

    Which accepted window is kept depends on fallback_policy:
    - "first": the first accepted window in scan order
    - "best_ratio": the window with the highest ratio, earliest on ties
    """

    def __init__(
        self,
        config: MatcherConfig | None = None,
        hasher_factory: Callable[[np.ndarray], SegmentHasher] = SegmentHasher,
    ):
        self._config = config or MatcherConfig()
        self._hasher_factory = hasher_factory

    def scan(self, tokens_a: np.ndarray, tokens_b: np.ndarray) -> LongMatch:
        """Run the fallback scan. Returns an empty LongMatch when nothing is accepted."""
        config = self._config
        window = config.fallback_window
        stride = config.fallback_stride

        if len(tokens_a) < window or len(tokens_b) < window:
            return LongMatch()

        table_b = self._hasher_factory(tokens_b).window_table(window, stride)
        hasher_a = self._hasher_factory(tokens_a)

        best: MatchCandidate | None = None
        best_ratio = 0.0
        collisions = 0

        for start_a, fp in hasher_a.window_fingerprints(window, stride):
            for start_b in table_b.get(fp, ()):
                collisions += 1
                ratio = agreement_ratio(tokens_a, tokens_b, start_a, start_b, window)
                if ratio < config.approximate_threshold:
                    continue
                if best is None or (
                    config.fallback_policy == "best_ratio" and ratio > best_ratio
                ):
                    best = MatchCandidate(
                        start_a=start_a,
                        start_b=start_b,
                        length=window,
                        kind=MatchKind.APPROXIMATE,
                    )
                    best_ratio = ratio
            if best is not None and config.fallback_policy == "first":
                break

        logger.debug(
            f"Fallback scan: window={window} stride={stride} "
            f"collisions={collisions} accepted={best is not None}"
        )
        if best is None:
            return LongMatch()
        return LongMatch(candidate=best, stage=MatchStage.FALLBACK, agreement=best_ratio)


class LongMatchFinder:
    """
    Finds the single longest approximately-matching region.

    The primary pass is a two-row DP over contiguous runs (a mismatch resets
    the run to 0, so this is a longest common substring search, not a gapped
    LCS). A run qualifies at min_long_length tokens; only a strictly longer
    run replaces the current best, so the earliest run of the maximal length
    in row-major order is kept.

    The fallback scanner runs only when no run qualifies. A fallback hit
    shorter than min_long_length is discarded.

    Usage:
        finder = LongMatchFinder(MatcherConfig())
        long_match = finder.find(tokens_a, tokens_b)
        # long_match.length, long_match.start_a, long_match.start_b
    """

    def __init__(
        self,
        config: MatcherConfig | None = None,
        fallback: FallbackScanner | None = None,
    ):
        self._config = config or MatcherConfig()
        self._fallback = fallback or FallbackScanner(self._config)

    def find(self, tokens_a: np.ndarray, tokens_b: np.ndarray) -> LongMatch:
        """
        Find the longest qualifying region between two normalised token arrays.

        Returns:
            LongMatch from the DP stage, else from the fallback scan, else empty.
        """
        candidate = self.longest_run(tokens_a, tokens_b)
        if candidate is not None:
            logger.debug(
                f"DP run of {candidate.length} tokens at "
                f"({candidate.start_a}, {candidate.start_b})"
            )
            return LongMatch(candidate=candidate, stage=MatchStage.DP, agreement=1.0)

        logger.debug("No DP run qualified, running fallback scan")
        fallback = self._fallback.scan(tokens_a, tokens_b)
        if fallback.length < self._config.min_long_length:
            return LongMatch()
        return fallback

    def longest_run(
        self, tokens_a: np.ndarray, tokens_b: np.ndarray
    ) -> MatchCandidate | None:
        """
        Longest qualifying contiguous common run, or None.

        Uses two rolling rows of len(B) + 1 entries. Row i holds, for each j,
        the length of the common run ending at A[i - 1] and B[j - 1].
        """
        size_a, size_b = len(tokens_a), len(tokens_b)
        if min(size_a, size_b) < self._config.min_long_length:
            return None

        previous = np.zeros(size_b + 1, dtype=np.int64)
        current = np.zeros(size_b + 1, dtype=np.int64)
        best_length = 0
        best_end_a = best_end_b = 0

        for i in range(1, size_a + 1):
            equal = tokens_b == tokens_a[i - 1]
            current[0] = 0
            current[1:] = np.where(equal, previous[:-1] + 1, 0)

            # argmax returns the first j holding the row maximum
            j = int(np.argmax(current))
            run = int(current[j])
            if run > best_length and self._qualifies(run):
                best_length = run
                best_end_a, best_end_b = i, j

            previous, current = current, previous

        if best_length == 0:
            return None
        return MatchCandidate(
            start_a=best_end_a - best_length,
            start_b=best_end_b - best_length,
            length=best_length,
            kind=MatchKind.APPROXIMATE,
        )

    def _qualifies(self, run: int) -> bool:
        """A run qualifies when it reaches the floor and the agreement threshold."""
        config = self._config
        window = max(run, config.min_long_length)
        return run >= config.min_long_length and run >= window * config.approximate_threshold

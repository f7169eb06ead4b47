"""Factory functions and facade for the matching engine."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import numpy as np

from .approximate import FallbackScanner, LongMatchFinder
from .combiner import DecisionCombiner
from .config import MatcherConfig
from .exact import ExactMatchDetector
from .models import ComparisonReport, ComparisonResult
from .tokens import as_token_array

logger = logging.getLogger(__name__)


class SubmissionMatcher:
    """
    Facade for the complete comparison workflow.

    Combines ExactMatchDetector, LongMatchFinder and DecisionCombiner into a
    single interface. Holds no per-comparison state, so one instance can
    serve any number of calls, including concurrent ones.

    Usage:
        matcher = create_matcher()
        result = matcher.compare(tokens_a, tokens_b)
        if result.is_significant:
            print(f"Exact: {result.exact_match_length}")
    """

    def __init__(
        self,
        exact_detector: ExactMatchDetector,
        long_match_finder: LongMatchFinder,
        combiner: DecisionCombiner,
    ):
        """
        Initialize matcher with components.

        Prefer using create_matcher() factory.
        """
        self._exact_detector = exact_detector
        self._long_match_finder = long_match_finder
        self._combiner = combiner

    def compare(
        self,
        sequence_a: Iterable[int] | np.ndarray,
        sequence_b: Iterable[int] | np.ndarray,
    ) -> ComparisonResult:
        """
        Compare two token sequences.

        Raises:
            InvalidSequenceError: If either sequence is not a 1-D integer sequence
        """
        return self.explain(sequence_a, sequence_b).result

    def explain(
        self,
        sequence_a: Iterable[int] | np.ndarray,
        sequence_b: Iterable[int] | np.ndarray,
    ) -> ComparisonReport:
        """
        Compare two token sequences and keep the raw detector outputs.

        Raises:
            InvalidSequenceError: If either sequence is not a 1-D integer sequence
        """
        tokens_a = as_token_array(sequence_a, label="A")
        tokens_b = as_token_array(sequence_b, label="B")

        exact = self._exact_detector.detect(tokens_a, tokens_b)
        long_match = self._long_match_finder.find(tokens_a, tokens_b)
        result = self._combiner.combine(
            exact, long_match, len(tokens_a), len(tokens_b)
        )

        logger.debug(f"Compared sequences of {len(tokens_a)}/{len(tokens_b)} tokens: {result}")

        return ComparisonReport(
            result=result,
            exact=exact,
            long_match=long_match,
            length_a=len(tokens_a),
            length_b=len(tokens_b),
        )


def create_matcher(
    config: MatcherConfig | None = None, **overrides: Any
) -> SubmissionMatcher:
    """
    Create a matcher with custom configuration.

    This is the main entry point for the matching module.

    Args:
        config: Base configuration. Uses defaults if None.
        **overrides: MatcherConfig fields replacing values from config

    Returns:
        Configured SubmissionMatcher

    Raises:
        MatcherConfigError: If the resulting configuration is invalid

    Example:
        matcher = create_matcher(fallback_policy="best_ratio", report_raw=True)
        result = matcher.compare([1, 2, 3], [1, 2, 3])
    """
    if overrides:
        base = (config or MatcherConfig()).to_dict()
        base.update(overrides)
        config = MatcherConfig.from_dict(base)
    config = config or MatcherConfig()

    return SubmissionMatcher(
        exact_detector=ExactMatchDetector(config),
        long_match_finder=LongMatchFinder(config, FallbackScanner(config)),
        combiner=DecisionCombiner(config),
    )


def compare(
    sequence_a: Iterable[int] | np.ndarray,
    sequence_b: Iterable[int] | np.ndarray,
    config: MatcherConfig | None = None,
) -> ComparisonResult:
    """
    Compare two token sequences with the given (or default) configuration.

    Example:
        >>> compare(range(40), range(40)).as_tuple()
        (1, 40, 40, 0, 0)
    """
    return create_matcher(config).compare(sequence_a, sequence_b)

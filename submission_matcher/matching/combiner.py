"""Combines detector outputs into the final verdict."""

from __future__ import annotations

import logging

from .config import MatcherConfig
from .models import ComparisonResult, ExactMatchReport, LongMatch

logger = logging.getLogger(__name__)


class DecisionCombiner:
    """
    Applies significance thresholds to the detector outputs.

    With min_len = min(len(A), len(B)), a pair is significant when
        exact total >= int(min_len * exact_significance), or
        long match   >= int(min_len * long_significance)
    Both comparisons are inclusive and use the truncated threshold. An
    empty sequence (min_len == 0) is never significant; very short
    non-empty inputs have a threshold of 0 and are always significant.

    Non-significant pairs report only the flag unless report_raw is set.
    """

    def __init__(self, config: MatcherConfig | None = None):
        self._config = config or MatcherConfig()

    def combine(
        self,
        exact: ExactMatchReport,
        long_match: LongMatch,
        length_a: int,
        length_b: int,
    ) -> ComparisonResult:
        """
        Decide significance and assemble the comparison result.

        Args:
            exact: Exact detector output
            long_match: Long match finder output
            length_a: Length of sequence A
            length_b: Length of sequence B

        Returns:
            ComparisonResult with statistics reported per the configured policy
        """
        min_length = min(length_a, length_b)
        exact_threshold = int(min_length * self._config.exact_significance)
        long_threshold = int(min_length * self._config.long_significance)

        is_significant = min_length > 0 and (
            exact.total_length >= exact_threshold
            or long_match.length >= long_threshold
        )

        logger.debug(
            f"Combiner: exact={exact.total_length}/{exact_threshold} "
            f"long={long_match.length}/{long_threshold} significant={is_significant}"
        )

        if not is_significant and not self._config.report_raw:
            return ComparisonResult.not_significant()

        return ComparisonResult(
            is_significant=is_significant,
            exact_match_length=exact.total_length,
            long_match_length=long_match.length,
            long_match_start_a=long_match.start_a,
            long_match_start_b=long_match.start_b,
        )

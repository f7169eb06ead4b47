"""
Matching module for scoring similarity between two token sequences.

This module provides:
- Polynomial segment fingerprints used to prune candidate windows
- Exact fragment detection (10-20 tokens, longest first, no reuse of tokens)
- Long approximate match discovery (contiguous-run DP plus hashed fallback scan)
- Threshold-based combination into a single ComparisonResult

Usage:
    from submission_matcher.matching import compare, create_matcher

    result = compare(tokens_a, tokens_b)
    if result.is_significant:
        print(f"Exact tokens: {result.exact_match_length}")
        print(f"Longest run: {result.long_match_length} at "
              f"({result.long_match_start_a}, {result.long_match_start_b})")

    # Keep raw detector statistics even for non-significant pairs
    matcher = create_matcher(report_raw=True)
    report = matcher.explain(tokens_a, tokens_b)
"""

from .approximate import FallbackScanner, LongMatchFinder, agreement_ratio
from .combiner import DecisionCombiner
from .config import FALLBACK_POLICIES, MatcherConfig
from .errors import (
    InvalidSequenceError,
    MatcherConfigError,
    MatchingError,
    SegmentRangeError,
)
from .exact import ExactMatchDetector
from .factory import SubmissionMatcher, compare, create_matcher
from .hashing import BASE, MODULUS, SegmentHasher, segment_hash
from .models import (
    ComparisonReport,
    ComparisonResult,
    ExactMatchReport,
    LongMatch,
    MatchCandidate,
    MatchKind,
    MatchStage,
)
from .tokens import as_token_array

__all__ = [
    # Factory (main entry points)
    "compare",
    "create_matcher",
    # Config
    "MatcherConfig",
    "FALLBACK_POLICIES",
    # Models
    "ComparisonResult",
    "ComparisonReport",
    "ExactMatchReport",
    "LongMatch",
    "MatchCandidate",
    "MatchKind",
    "MatchStage",
    # Errors
    "MatchingError",
    "InvalidSequenceError",
    "SegmentRangeError",
    "MatcherConfigError",
    # Hashing
    "BASE",
    "MODULUS",
    "SegmentHasher",
    "segment_hash",
    # Components (for advanced usage/testing)
    "SubmissionMatcher",
    "ExactMatchDetector",
    "LongMatchFinder",
    "FallbackScanner",
    "DecisionCombiner",
    "agreement_ratio",
    "as_token_array",
]

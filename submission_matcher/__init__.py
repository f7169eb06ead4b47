"""Token sequence similarity scoring for copy detection."""

from .matching import ComparisonResult, MatcherConfig, compare, create_matcher

__version__ = "0.1.0"

__all__ = ["ComparisonResult", "MatcherConfig", "compare", "create_matcher"]

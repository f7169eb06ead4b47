"""Configuration for the matching engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import MatcherConfigError

FALLBACK_POLICIES = ("first", "best_ratio")

_INT_FIELDS = (
    "min_exact_length",
    "max_exact_length",
    "min_long_length",
    "fallback_window",
    "fallback_stride_divisor",
)
_FRACTION_FIELDS = ("approximate_threshold", "exact_significance", "long_significance")


@dataclass(frozen=True)
class MatcherConfig:
    """
    Tunable constants for one comparison.

    Defaults are the standard scoring constants. Instances are
    immutable and can be shared freely between calls.
    """

    min_exact_length: int = 10
    """Shortest exact fragment that counts towards the exact total."""

    max_exact_length: int = 20
    """Longest exact fragment length tried (lengths are tried longest first)."""

    min_long_length: int = 30
    """Minimum run length for a long approximate match."""

    approximate_threshold: float = 0.8
    """Token agreement ratio a run or window must reach (0.0-1.0 scale)."""

    fallback_window: int = 30
    """Window size of the hashed sliding-window fallback scan."""

    fallback_stride_divisor: int = 4
    """Fallback stride is fallback_window // fallback_stride_divisor (at least 1)."""

    fallback_policy: str = "first"
    """
    Which accepted fallback window is kept.
    "first" keeps the first accepted hit, "best_ratio" keeps the hit with the
    highest agreement ratio (earliest wins ties).
    """

    exact_significance: float = 0.2
    """Fraction of the shorter sequence the exact total must reach."""

    long_significance: float = 0.3
    """Fraction of the shorter sequence the long match must reach."""

    report_raw: bool = False
    """Report detector statistics even when the pair is not significant."""

    def __post_init__(self) -> None:
        """Validate configuration values."""
        for name in _INT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise MatcherConfigError(
                    f"{name} must be an integer, got {type(value).__name__} {value!r}"
                )
        for name in _FRACTION_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise MatcherConfigError(
                    f"{name} must be a number, got {type(value).__name__} {value!r}"
                )
        if not isinstance(self.report_raw, bool):
            raise MatcherConfigError(
                f"report_raw must be true or false, got "
                f"{type(self.report_raw).__name__} {self.report_raw!r}"
            )
        if not isinstance(self.fallback_policy, str):
            raise MatcherConfigError(
                f"fallback_policy must be a string, got {self.fallback_policy!r}"
            )

        if self.min_exact_length < 1:
            raise MatcherConfigError(
                f"min_exact_length must be >= 1, got {self.min_exact_length}"
            )
        if self.max_exact_length < self.min_exact_length:
            raise MatcherConfigError(
                f"max_exact_length ({self.max_exact_length}) must be >= "
                f"min_exact_length ({self.min_exact_length})"
            )
        if self.min_long_length < 1:
            raise MatcherConfigError(
                f"min_long_length must be >= 1, got {self.min_long_length}"
            )
        if self.fallback_window < 1:
            raise MatcherConfigError(
                f"fallback_window must be >= 1, got {self.fallback_window}"
            )
        if self.fallback_stride_divisor < 1:
            raise MatcherConfigError(
                f"fallback_stride_divisor must be >= 1, got {self.fallback_stride_divisor}"
            )
        if self.fallback_policy not in FALLBACK_POLICIES:
            raise MatcherConfigError(
                f"Unknown fallback_policy {self.fallback_policy!r}. "
                f"Expected one of: {', '.join(FALLBACK_POLICIES)}"
            )
        for name in _FRACTION_FIELDS:
            value = getattr(self, name)
            if not 0.0 < value <= 1.0:
                raise MatcherConfigError(f"{name} must be in (0, 1], got {value}")

    @property
    def fallback_stride(self) -> int:
        """Step between consecutive fallback windows."""
        return max(1, self.fallback_window // self.fallback_stride_divisor)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MatcherConfig:
        """
        Build a config from a mapping, ignoring None values.

        Raises:
            MatcherConfigError: If the mapping has unknown keys or invalid values
        """
        known = set(cls.__dataclass_fields__)
        unknown = sorted(set(data) - known)
        if unknown:
            raise MatcherConfigError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**{k: v for k, v in data.items() if v is not None})

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {name: getattr(self, name) for name in self.__dataclass_fields__}

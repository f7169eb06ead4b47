"""Data models for the matching module."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class MatchKind(str, Enum):
    """How a match candidate was found."""

    EXACT = "exact"
    APPROXIMATE = "approximate"


class MatchStage(str, Enum):
    """Which long match stage produced a result."""

    DP = "dp"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class MatchCandidate:
    """
    A matched region shared by both sequences.

    Offsets are zero-based starts in sequence A and sequence B.
    """

    start_a: int
    start_b: int
    length: int
    kind: MatchKind

    def __post_init__(self) -> None:
        """Validate offsets and length."""
        if self.start_a < 0 or self.start_b < 0:
            raise ValueError("MatchCandidate offsets must be non-negative")
        if self.length < 1:
            raise ValueError("MatchCandidate length must be positive")

    @property
    def end_a(self) -> int:
        """Exclusive end offset in sequence A."""
        return self.start_a + self.length

    @property
    def end_b(self) -> int:
        """Exclusive end offset in sequence B."""
        return self.start_b + self.length

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "start_a": self.start_a,
            "start_b": self.start_b,
            "length": self.length,
            "kind": self.kind.value,
        }


@dataclass(frozen=True)
class ExactMatchReport:
    """Output of the exact match detector."""

    total_length: int
    matches: tuple[MatchCandidate, ...] = ()

    @property
    def match_count(self) -> int:
        """Number of confirmed exact fragments."""
        return len(self.matches)


@dataclass(frozen=True)
class LongMatch:
    """
    Output of the long approximate match finder.

    candidate is None when neither the DP stage nor the fallback scan
    produced a qualifying region.
    """

    candidate: MatchCandidate | None = None
    stage: MatchStage | None = None
    """Stage that produced the candidate; None when nothing qualified."""

    agreement: float | None = None
    """Token agreement ratio of a fallback hit (DP runs always agree fully)."""

    @property
    def length(self) -> int:
        """Run length, 0 when no match."""
        return self.candidate.length if self.candidate else 0

    @property
    def start_a(self) -> int:
        """Start in sequence A, 0 when no match."""
        return self.candidate.start_a if self.candidate else 0

    @property
    def start_b(self) -> int:
        """Start in sequence B, 0 when no match."""
        return self.candidate.start_b if self.candidate else 0


@dataclass(frozen=True)
class ComparisonResult:
    """
    Outcome of comparing two token sequences.

    When no long match qualifies (or the pair is not significant and raw
    reporting is off) long_match_length and both offsets are 0.
    """

    is_significant: bool
    exact_match_length: int = 0
    long_match_length: int = 0
    long_match_start_a: int = 0
    long_match_start_b: int = 0

    @classmethod
    def not_significant(cls) -> ComparisonResult:
        """All-zero result."""
        return cls(is_significant=False)

    def as_tuple(self) -> tuple[int, int, int, int, int]:
        """Positional five-field form, significance as 0/1."""
        return (
            int(self.is_significant),
            self.exact_match_length,
            self.long_match_length,
            self.long_match_start_a,
            self.long_match_start_b,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "is_significant": self.is_significant,
            "exact_match_length": self.exact_match_length,
            "long_match_length": self.long_match_length,
            "long_match_start_a": self.long_match_start_a,
            "long_match_start_b": self.long_match_start_b,
        }


@dataclass(frozen=True)
class ComparisonReport:
    """A comparison result together with the raw detector outputs."""

    result: ComparisonResult
    exact: ExactMatchReport
    long_match: LongMatch
    length_a: int
    length_b: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "result": self.result.to_dict(),
            "exact_matches": [m.to_dict() for m in self.exact.matches],
            "long_match": (
                self.long_match.candidate.to_dict()
                if self.long_match.candidate
                else None
            ),
            "long_match_stage": (
                self.long_match.stage.value if self.long_match.stage else None
            ),
            "long_match_agreement": self.long_match.agreement,
            "length_a": self.length_a,
            "length_b": self.length_b,
        }

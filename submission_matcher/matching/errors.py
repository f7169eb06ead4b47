"""Custom exceptions for the matching module."""

from __future__ import annotations


class MatchingError(Exception):
    """Base exception for matching-related errors."""

    pass


class InvalidSequenceError(MatchingError):
    """
    Raised when a token sequence cannot be compared.

    This can happen when:
    - The sequence is None
    - The sequence is not one-dimensional
    - The sequence holds non-integer values (floats, strings, nested lists)
    """

    def __init__(self, message: str, label: str | None = None):
        super().__init__(message)
        self.label = label


class SegmentRangeError(MatchingError):
    """
    Raised when a hashed segment lies outside its sequence.

    This can happen when:
    - start or length is negative
    - start + length exceeds the sequence size
    """

    def __init__(self, message: str, start: int, length: int, size: int):
        super().__init__(message)
        self.start = start
        self.length = length
        self.size = size


class MatcherConfigError(MatchingError):
    """
    Raised when matcher configuration is invalid.

    This can happen when:
    - Exact match lengths are non-positive or inverted
    - A threshold falls outside (0, 1]
    - The fallback window or stride divisor is below 1
    - An unknown fallback policy is requested
    """

    pass

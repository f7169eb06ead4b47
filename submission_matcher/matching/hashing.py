"""
Polynomial fingerprints for contiguous token segments.

    fingerprint(start, length) = sum(token[start + i] * BASE**i) mod MODULUS

Fingerprints only prune candidates. Equal fingerprints do not prove equal
content, so every hit must be confirmed element-wise by the caller.

Python integers never overflow, so intermediate products are exact before
the modulus is applied.
"""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np

from .errors import SegmentRangeError

BASE = 31
MODULUS = 1_000_000_009
_BASE_INVERSE = pow(BASE, -1, MODULUS)


def _check_range(size: int, start: int, length: int) -> None:
    if start < 0 or length < 0 or start + length > size:
        raise SegmentRangeError(
            f"Segment [{start}, {start + length}) is outside sequence of size {size}",
            start=start,
            length=length,
            size=size,
        )


def segment_hash(tokens: np.ndarray, start: int, length: int) -> int:
    """
    Fingerprint tokens[start:start + length] directly in O(length).

    Raises:
        SegmentRangeError: If the segment does not fit in tokens
    """
    _check_range(len(tokens), start, length)
    value = 0
    power = 1
    for token in tokens[start : start + length].tolist():
        value = (value + token * power) % MODULUS
        power = (power * BASE) % MODULUS
    return value


class SegmentHasher:
    """
    Prefix-sum fingerprint table over one sequence.

    Builds the table once in O(n); every fingerprint afterwards is O(1) and
    equals segment_hash() for the same segment.

    Usage:
        hasher = SegmentHasher(tokens)
        hasher.fingerprint(5, 20)
        for start, fp in hasher.window_fingerprints(20):
            ...
    """

    def __init__(self, tokens: np.ndarray):
        self._size = len(tokens)
        prefix = [0] * (self._size + 1)
        inverse_powers = [1] * (self._size + 1)
        power = 1
        for i, token in enumerate(tokens.tolist()):
            prefix[i + 1] = (prefix[i] + token * power) % MODULUS
            power = (power * BASE) % MODULUS
            inverse_powers[i + 1] = (inverse_powers[i] * _BASE_INVERSE) % MODULUS
        self._prefix = prefix
        self._inverse_powers = inverse_powers

    @property
    def size(self) -> int:
        """Length of the hashed sequence."""
        return self._size

    def fingerprint(self, start: int, length: int) -> int:
        """
        Fingerprint of the segment [start, start + length).

        Raises:
            SegmentRangeError: If the segment does not fit in the sequence
        """
        _check_range(self._size, start, length)
        shifted = self._prefix[start + length] - self._prefix[start]
        return (shifted * self._inverse_powers[start]) % MODULUS

    def window_fingerprints(self, length: int, step: int = 1) -> Iterator[tuple[int, int]]:
        """
        Yield (start, fingerprint) for windows starting at 0, step, 2*step, ...

        Only windows that fit entirely inside the sequence are produced, so a
        length larger than the sequence yields nothing.
        """
        if length < 1 or step < 1:
            raise ValueError(f"length and step must be >= 1, got {length}, {step}")
        for start in range(0, self._size - length + 1, step):
            yield start, self.fingerprint(start, length)

    def window_table(self, length: int, step: int = 1) -> dict[int, list[int]]:
        """
        Map each window fingerprint to its start offsets in ascending order.
        """
        table: dict[int, list[int]] = {}
        for start, fp in self.window_fingerprints(length, step):
            table.setdefault(fp, []).append(start)
        return table

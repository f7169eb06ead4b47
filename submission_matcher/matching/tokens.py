"""Normalisation of token sequences before comparison."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from .errors import InvalidSequenceError

TOKEN_DTYPE = np.int64


def as_token_array(tokens: Iterable[int] | np.ndarray, label: str = "sequence") -> np.ndarray:
    """
    Validate and normalise a token sequence.

    Accepts lists, tuples, ranges, iterators and 1-D integer numpy arrays.
    Empty input is valid and yields an empty array.

    Args:
        tokens: Ordered integer tokens
        label: Name used in error messages (e.g. "A" or "B")

    Returns:
        1-D int64 numpy array. The caller's data is never modified.

    Raises:
        InvalidSequenceError: If tokens is None, not 1-D, or not integral
    """
    if tokens is None:
        raise InvalidSequenceError(f"Token {label} is None", label=label)

    if not isinstance(tokens, np.ndarray) and not hasattr(tokens, "__len__"):
        tokens = list(tokens)

    try:
        array = np.asarray(tokens)
    except (TypeError, ValueError) as e:
        raise InvalidSequenceError(
            f"Token {label} cannot be converted to an array: {e}", label=label
        ) from e

    if array.ndim != 1:
        raise InvalidSequenceError(
            f"Token {label} must be one-dimensional, got shape {array.shape}",
            label=label,
        )

    if array.size == 0:
        return np.zeros(0, dtype=TOKEN_DTYPE)

    # Booleans are kind "b", so they fall through to the error below
    if array.dtype.kind not in ("i", "u"):
        raise InvalidSequenceError(
            f"Token {label} must hold integers, got dtype {array.dtype}",
            label=label,
        )

    return array.astype(TOKEN_DTYPE, copy=True)

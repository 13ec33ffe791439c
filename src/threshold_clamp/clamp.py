"""
clamp.py — zero every value that exceeds its paired threshold (in place)

values[i] = 0 if values[i] > thresholds[i] else values[i]

Accepts either a Python mutable sequence (typically a list) or a
writable 1-D numpy array for `values`; `thresholds` is only read.
The list path writes the float 0.0, so a typed buffer that refuses floats
(e.g. array.array("i")) raises TypeError on its first zeroed slot. The numpy
path writes 0 in the array's own dtype.

Comparison follows IEEE ordering: anything compared with NaN is False, so a
NaN value (or a NaN threshold) never zeroes its slot. Equality keeps the value.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any, Sequence

import numpy as np


class ThresholdLengthError(ValueError):
    pass


def _check_lengths(n_values: int, n_thresholds: int) -> None:
    if n_values != n_thresholds:
        raise ThresholdLengthError(
            f"values and thresholds must have the same length "
            f"(got {n_values} values, {n_thresholds} thresholds)"
        )


def _clamp_array(values: np.ndarray, thresholds: Any) -> None:
    if values.ndim != 1:
        raise ValueError(f"values must be 1-D, got shape {values.shape}")
    if not values.flags.writeable:
        raise ValueError("values array is read-only")

    t = np.asarray(thresholds)
    if t.ndim != 1:
        raise ValueError(f"thresholds must be 1-D, got shape {t.shape}")
    _check_lengths(values.shape[0], t.shape[0])

    with np.errstate(invalid="ignore"):
        exceeds = values > t
    values[exceeds] = 0


def _clamp_sequence(values: MutableSequence, thresholds: Sequence[float]) -> None:
    n = len(values)
    _check_lengths(n, len(thresholds))

    # decide every index before writing, so a failing comparison leaves values untouched
    exceeds = [i for i in range(n) if values[i] > thresholds[i]]
    for i in exceeds:
        values[i] = 0.0


def clamp(values: MutableSequence | np.ndarray, thresholds: Sequence[float] | np.ndarray) -> None:
    """
    Zero, in place, each element of `values` strictly greater than the
    element of `thresholds` at the same index.

    Raises ThresholdLengthError (a ValueError) when the lengths differ and
    TypeError when `values` is not mutable. Nothing is written on error.
    """
    if isinstance(values, np.ndarray):
        _clamp_array(values, thresholds)
        return

    if not isinstance(values, MutableSequence):
        raise TypeError(
            f"values must be a mutable sequence or numpy array, got {type(values).__name__}"
        )

    if isinstance(thresholds, np.ndarray) and thresholds.ndim != 1:
        raise ValueError(f"thresholds must be 1-D, got shape {thresholds.shape}")

    _clamp_sequence(values, thresholds)


__all__ = ["ThresholdLengthError", "clamp"]

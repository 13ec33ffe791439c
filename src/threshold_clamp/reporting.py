from __future__ import annotations

from typing import List, Sequence

import numpy as np

from .clamp import ThresholdLengthError
from .types import ClampSummary


def summarize_clamp(values: Sequence[float], thresholds: Sequence[float]) -> ClampSummary:
    """
    Describe what clamp(values, thresholds) would zero. Reads only.
    """
    v = np.asarray(values, dtype=float)
    t = np.asarray(thresholds, dtype=float)
    if v.shape != t.shape:
        raise ThresholdLengthError(
            f"values and thresholds must have the same length (got {v.size} values, {t.size} thresholds)"
        )

    with np.errstate(invalid="ignore"):
        exceeds = v > t
    zeroed = [int(i) for i in np.flatnonzero(exceeds)]

    return ClampSummary(
        n=int(v.size),
        n_zeroed=len(zeroed),
        n_kept=int(v.size) - len(zeroed),
        n_nan=int(np.count_nonzero(np.isnan(v))),
        zeroed_indices=zeroed,
    )


def _fmt_indices(indices: List[int], limit: int = 10) -> str:
    if not indices:
        return "none"
    head = ", ".join(str(i) for i in indices[:limit])
    if len(indices) > limit:
        head += f", ... (+{len(indices) - limit})"
    return head


def summary_lines(summary: ClampSummary) -> List[str]:
    return [
        f"n: {summary.n}",
        f"zeroed: {summary.n_zeroed}",
        f"kept: {summary.n_kept}",
        f"nan: {summary.n_nan}",
        f"zeroed indices: {_fmt_indices(summary.zeroed_indices)}",
    ]


__all__ = ["summarize_clamp", "summary_lines"]

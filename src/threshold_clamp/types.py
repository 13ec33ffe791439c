"""
types.py — JSON-friendly result records

stdlib only, no side effects on import.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class ClampSummary:
    """
    What a clamp call did (or will do) to one pair of sequences.

    n_zeroed + n_kept == n. n_nan counts NaN entries in values; they are
    always among the kept ones.
    """
    n: int
    n_zeroed: int
    n_kept: int
    n_nan: int = 0
    zeroed_indices: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["ClampSummary"]

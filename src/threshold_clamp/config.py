"""
ThresholdClampConfig – settings for the threshold-clamp command line

The clamp operation itself takes no options; everything here controls how
the CLI reports and writes its result.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional


@dataclass
class ThresholdClampConfig:
    """
    Output and diagnostic settings for the CLI.

    Values are normalised in __post_init__ (indent clamped to >= 0,
    debug implies verbose).
    """

    # ─── Output ────────────────────────────────────────────────────────
    summary: bool = False
    indent: Optional[int] = 2

    # ─── Debugging ─────────────────────────────────────────────────────
    verbose: bool = False
    debug: bool = False

    def __post_init__(self) -> None:
        self._normalize()

    def _normalize(self) -> None:
        self.summary = bool(self.summary)
        self.debug = bool(self.debug)
        self.verbose = bool(self.verbose) or self.debug

        if self.indent is not None:
            self.indent = max(0, int(self.indent))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def update(self, **kwargs: Any) -> "ThresholdClampConfig":
        """
        Chainable update. Unknown keys are ignored.
        """
        valid_fields = {f.name for f in fields(self)}
        for key, value in kwargs.items():
            if key in valid_fields:
                setattr(self, key, value)

        self._normalize()
        return self


def get_default_config() -> ThresholdClampConfig:
    return ThresholdClampConfig()


__all__ = ["ThresholdClampConfig", "get_default_config"]

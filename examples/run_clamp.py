from __future__ import annotations

import numpy as np

from threshold_clamp import clamp
from threshold_clamp.reporting import summarize_clamp, summary_lines


def main() -> None:
    rng = np.random.default_rng(42)
    values = rng.normal(0.0, 1.0, size=12)
    thresholds = np.full(12, 0.5)
    values[3] = np.nan

    print("=== Before ===")
    print(np.round(values, 3))

    summary = summarize_clamp(values, thresholds)
    clamp(values, thresholds)

    print("\n=== After ===")
    print(np.round(values, 3))

    print("\n=== Summary ===")
    for line in summary_lines(summary):
        print(line)


if __name__ == "__main__":
    main()

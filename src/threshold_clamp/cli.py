from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .clamp import ThresholdLengthError, clamp
from .config import ThresholdClampConfig
from .io import ClampInputError, load_pair, render_result, write_result
from .reporting import summarize_clamp, summary_lines


EXIT_OK = 0
EXIT_INVALID_INPUT = 2


def _log(msg: str) -> None:
    print(f"[threshold-clamp] {msg}", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="threshold-clamp",
        description="Zero every value that exceeds its paired threshold",
    )

    subparsers = parser.add_subparsers(dest="command")

    app = subparsers.add_parser("apply", help="Clamp the values of an input file against its thresholds")
    app.add_argument("input", type=str, help="JSON or .npz file with 'values' and 'thresholds'")
    app.add_argument("--output", type=str, default=None, help="Write the result here instead of stdout")
    app.add_argument("--summary", action="store_true", help="Include a summary of zeroed indices in the output")
    app.add_argument("--indent", type=int, default=2, help="JSON indentation (negative for compact output)")
    app.add_argument("--verbose", action="store_true", help="Print progress to stderr")
    app.add_argument("--debug", action="store_true", help="Print input details to stderr (implies --verbose)")

    return parser


def _config_from_args(args: argparse.Namespace) -> ThresholdClampConfig:
    indent = args.indent if args.indent >= 0 else None
    return ThresholdClampConfig(
        summary=args.summary,
        indent=indent,
        verbose=args.verbose,
        debug=args.debug,
    )


def _run_apply(args: argparse.Namespace) -> int:
    cfg = _config_from_args(args)

    try:
        values, thresholds = load_pair(args.input)
    except ClampInputError as exc:
        _log(f"invalid input: {exc}")
        return EXIT_INVALID_INPUT

    if cfg.debug:
        _log(f"loaded {values.size} values, {thresholds.size} thresholds from {args.input}")

    summary = None
    try:
        if cfg.summary or cfg.verbose:
            summary = summarize_clamp(values, thresholds)
        clamp(values, thresholds)
    except ThresholdLengthError as exc:
        _log(f"invalid input: {exc}")
        return EXIT_INVALID_INPUT

    if cfg.verbose and summary is not None:
        for line in summary_lines(summary):
            _log(line)

    text = render_result(
        values,
        summary=summary.to_dict() if (cfg.summary and summary is not None) else None,
        indent=cfg.indent,
    )

    if args.output:
        p = write_result(text, args.output)
        if cfg.verbose:
            _log(f"wrote {p}")
    else:
        print(text)

    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "apply":
        return _run_apply(args)

    parser.print_help()
    return EXIT_INVALID_INPUT


if __name__ == "__main__":
    raise SystemExit(main())

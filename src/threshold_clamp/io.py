"""
io.py — read and write value/threshold pairs

Input is either a JSON object {"values": [...], "thresholds": [...]} or a
.npz archive holding arrays under the same two keys. JSON null reads as NaN
and NaN is written back as null.

JSON has no token for infinity, so infinite entries in `values` are refused
on load. Infinite thresholds are fine; they never reach the output.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Tuple
import json
import math
import zipfile

import numpy as np


REQUIRED_KEYS = ("values", "thresholds")


class ClampInputError(ValueError):
    pass


def _as_float_array(raw: Any, key: str, p: Path) -> np.ndarray:
    if not isinstance(raw, list):
        raise ClampInputError(f"'{key}' must be a list of numbers in {p}")

    out = []
    for i, x in enumerate(raw):
        if x is None:
            out.append(math.nan)
        elif isinstance(x, (int, float)) and not isinstance(x, bool):
            try:
                out.append(float(x))
            except OverflowError as exc:
                raise ClampInputError(f"'{key}[{i}]' is out of float range in {p}") from exc
        else:
            raise ClampInputError(f"'{key}[{i}]' is not a number in {p}: {x!r}")
    return np.asarray(out, dtype=np.float64)


def _check_finite_values(values: np.ndarray, p: Path) -> None:
    inf_idx = np.flatnonzero(np.isinf(values))
    if inf_idx.size:
        raise ClampInputError(f"'values[{int(inf_idx[0])}]' is infinite in {p}")


def _load_json(p: Path) -> Tuple[np.ndarray, np.ndarray]:
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ClampInputError(f"Invalid JSON in {p}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ClampInputError(f"Input is not UTF-8 text: {p}") from exc
    except OSError as exc:
        raise ClampInputError(f"Cannot read {p}: {exc}") from exc

    if not isinstance(data, dict):
        raise ClampInputError(f"Expected a JSON object in {p}")

    for k in REQUIRED_KEYS:
        if k not in data:
            raise ClampInputError(f"Missing required field '{k}' in {p}")

    return _as_float_array(data["values"], "values", p), _as_float_array(data["thresholds"], "thresholds", p)


def _read_npz_arrays(archive: Any, p: Path) -> Tuple[np.ndarray, np.ndarray]:
    arrays = []
    for k in REQUIRED_KEYS:
        if k not in archive.files:
            raise ClampInputError(f"Missing required array '{k}' in {p}")
        a = np.array(archive[k], dtype=np.float64)
        if a.ndim != 1:
            raise ClampInputError(f"'{k}' must be 1-D in {p}, got shape {a.shape}")
        arrays.append(a)
    return arrays[0], arrays[1]


def _load_npz(p: Path) -> Tuple[np.ndarray, np.ndarray]:
    try:
        loaded = np.load(p, allow_pickle=False)
    except (ValueError, OSError, EOFError, zipfile.BadZipFile) as exc:
        raise ClampInputError(f"Cannot read .npz archive {p}: {exc}") from exc

    if not isinstance(loaded, np.lib.npyio.NpzFile):
        raise ClampInputError(f"Expected a .npz archive with named arrays in {p}, got a single array")

    with loaded as archive:
        try:
            return _read_npz_arrays(archive, p)
        except ClampInputError:
            raise
        except (ValueError, TypeError, OSError, zipfile.BadZipFile) as exc:
            raise ClampInputError(f"Cannot read .npz archive {p}: {exc}") from exc


def load_pair(path: str | Path) -> Tuple[np.ndarray, np.ndarray]:
    """
    Load (values, thresholds) as writable float64 arrays.

    Lengths are not checked here; clamp() rejects a mismatch.
    """
    p = Path(path)
    if not p.exists():
        raise ClampInputError(f"Input file not found: {p}")

    if p.suffix.lower() == ".npz":
        values, thresholds = _load_npz(p)
    else:
        values, thresholds = _load_json(p)

    _check_finite_values(values, p)
    return values, thresholds


def _json_safe(values: np.ndarray) -> list:
    return [None if math.isnan(x) else x for x in (float(v) for v in values)]


def render_result(
    values: np.ndarray,
    summary: Optional[Dict[str, Any]] = None,
    indent: Optional[int] = 2,
) -> str:
    """
    Strict JSON. NaN becomes null; an infinite value raises ValueError.
    """
    doc: Dict[str, Any] = {"values": _json_safe(values)}
    if summary is not None:
        doc["summary"] = summary
    return json.dumps(doc, indent=indent, allow_nan=False)


def write_result(text: str, path: str | Path) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text + "\n", encoding="utf-8")
    return p


__all__ = ["REQUIRED_KEYS", "ClampInputError", "load_pair", "render_result", "write_result"]

"""Canonical serialization for conventions and error values.

canonical_bytes(obj) -> Ok[bytes] | Err[str]: deterministic JSON bytes.
load_convention(raw) -> Ok[DayCountConvention] | Err[InvalidValueError].

A convention serializes to its canonical spelling, so the stored form is
the same string from_str accepts, whether it appears as a value or as a
dict key. PascalCase variant names such as "ActAct", used by other
yearfrac ports, are read but never written.
"""

from __future__ import annotations

import dataclasses
import json
from datetime import date
from enum import Enum
from typing import Any

from yearfrac.core.config import PASCAL_CASE_NAMES
from yearfrac.core.daycount import DayCountConvention
from yearfrac.core.errors import InvalidValueError
from yearfrac.core.result import Err, Ok

_LOAD_SOURCE = "yearfrac.core.serialization.load_convention"


def _to_serializable(obj: object) -> Any:  # noqa: PLR0911
    """Recursively convert a value to a JSON-compatible Python value."""
    if obj is None:
        return None
    # bool before int (bool is subclass of int)
    if isinstance(obj, bool):
        return obj
    if isinstance(obj, (int, str)):
        return obj
    if isinstance(obj, float):
        if obj != obj or obj in (float("inf"), float("-inf")):
            msg = f"Cannot serialize non-finite float {obj}"
            raise TypeError(msg)
        return obj
    if isinstance(obj, date):
        return obj.isoformat()
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (tuple, list)):
        return [_to_serializable(x) for x in obj]
    if isinstance(obj, dict):
        converted: dict[str, Any] = {}
        for k, v in obj.items():
            key = _to_key(k)
            if key in converted:
                msg = f"Duplicate key {key!r} after conversion"
                raise TypeError(msg)
            converted[key] = _to_serializable(v)
        return dict(sorted(converted.items()))
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        result: dict[str, Any] = {"_type": type(obj).__name__}
        for name in sorted(f.name for f in dataclasses.fields(obj)):
            result[name] = _to_serializable(getattr(obj, name))
        return result
    msg = f"Cannot serialize {type(obj).__name__}"
    raise TypeError(msg)


def _to_key(k: object) -> str:
    """JSON object key: a string, an enum value or date, or a scalar in its JSON form."""
    key = _to_serializable(k)
    if isinstance(key, str):
        return key
    if isinstance(key, (bool, int, float)) or key is None:
        return json.dumps(key)
    msg = f"Cannot use {type(k).__name__} as a key"
    raise TypeError(msg)


def canonical_bytes(obj: object) -> Ok[bytes] | Err[str]:
    """Convert a value to canonical JSON bytes. Returns Err, never raises, on unsupported types."""
    try:
        serializable = _to_serializable(obj)
    except TypeError as e:
        return Err(f"Unsupported type in canonical serialization: {e}")
    return Ok(
        json.dumps(serializable, sort_keys=True, separators=(",", ":")).encode("utf-8")
    )


def _decode_selector(raw: bytes) -> Ok[int | str] | Err[InvalidValueError]:
    text = raw.decode("utf-8", errors="replace")
    try:
        decoded = json.loads(text)
    except (json.JSONDecodeError, RecursionError):
        return Err(InvalidValueError.create(text, source=_LOAD_SOURCE))
    if isinstance(decoded, bool) or not isinstance(decoded, (int, str)):
        return Err(InvalidValueError.create(text, source=_LOAD_SOURCE))
    if isinstance(decoded, str) and decoded in PASCAL_CASE_NAMES:
        return Ok(PASCAL_CASE_NAMES.index(decoded))
    return Ok(decoded)


def load_convention(raw: bytes) -> Ok[DayCountConvention] | Err[InvalidValueError]:
    """Decode a stored convention.

    Accepts a JSON string holding the canonical spelling ("act/act") or the
    PascalCase variant name ("ActAct"), or a JSON integer basis
    code. canonical_bytes always writes the canonical spelling.
    """
    return (
        _decode_selector(raw)
        .and_then(DayCountConvention.parse)
        .map_err(lambda e: e.with_context("stored convention"))
    )

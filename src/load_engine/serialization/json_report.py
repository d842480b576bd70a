"""JSON serialization for engine results.

Converts the frozen result dataclasses into JSON-compatible dicts:
string enums become their value, ordered (int) enums their lower-case name,
dates and datetimes ISO 8601 strings.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json
import math
from dataclasses import fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

# Derived properties worth exporting alongside the stored fields.
_EXTRA_PROPERTIES = {
    "AnalysisResult": ("needs_more_data",),
}


def to_json_dict(obj: Any) -> Any:
    """Convert a result object (or any nesting of them) to JSON-compatible data."""
    if is_dataclass(obj) and not isinstance(obj, type):
        result = {f.name: to_json_dict(getattr(obj, f.name)) for f in fields(obj)}
        for prop in _EXTRA_PROPERTIES.get(type(obj).__name__, ()):
            result[prop] = to_json_dict(getattr(obj, prop))
        return result
    if isinstance(obj, Enum):
        return _convert_enum(obj)
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if isinstance(obj, dict):
        return {_convert_key(k): to_json_dict(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_json_dict(item) for item in obj]
    if isinstance(obj, float):
        return _convert_float(obj)
    return obj


def to_json_string(obj: Any, indent: int = 2) -> str:
    """Convert a result object to a JSON string."""
    return json.dumps(to_json_dict(obj), indent=indent)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _convert_enum(member: Enum) -> Any:
    if isinstance(member.value, str):
        return member.value
    return member.name.lower()


def _convert_key(key: Any) -> Any:
    if isinstance(key, Enum):
        return _convert_enum(key)
    if isinstance(key, (str, int, float, bool)) or key is None:
        return key
    return str(key)


def _convert_float(value: float) -> float | None:
    """Round for display; NaN and infinities are not valid JSON."""
    if math.isnan(value) or math.isinf(value):
        return None
    return round(value, 2)

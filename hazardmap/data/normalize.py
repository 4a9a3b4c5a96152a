"""
Row normalization: raw CSV row → validated Point, or rejection.
"""
from __future__ import annotations

import math
import re
import uuid
from typing import Mapping, Optional

from hazardmap.config import (
    CATEGORIES, CATCH_ALL_CATEGORY, DEFAULT_SEVERITY, SEVERITY_MIN, SEVERITY_MAX,
)
from hazardmap.data.schemas import Point
from hazardmap.errors import RowRejected

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

TEXT_FIELDS = ("timestamp", "block", "school", "description", "photo_url", "reporter_type", "status")


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------

def _text(row: Mapping[str, object], key: str) -> str:
    """Cell value as a string, "" when the column or value is missing."""
    value = row.get(key)
    if value is None:
        return ""
    return str(value)


def _coordinate(value: str) -> Optional[float]:
    """Leading decimal number of the cell, None if there is none or it is non-finite.

    "36.3abc" → 36.3, "36_34" → 36.0, "abc" / "nan" / "inf" → None.
    """
    m = _LEADING_FLOAT_RE.match(value)
    if m is None:
        return None
    x = float(m.group(1))
    return x if math.isfinite(x) else None


def clamp(x: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, x))


def parse_severity(value: str) -> int:
    """Leading integer of the cell, clamped to the severity range.

    "2.7" → 2, "9" → 3, "0" → 1, "" or "high" → default (2).
    """
    m = _LEADING_INT_RE.match(value)
    sev = int(m.group(1)) if m else DEFAULT_SEVERITY
    return clamp(sev, SEVERITY_MIN, SEVERITY_MAX)


def normalize_category(value: str) -> str:
    """Known code as-is; anything else falls into the catch-all."""
    return value if value in CATEGORIES else CATCH_ALL_CATEGORY


def new_point_id() -> str:
    """Short random id for rows that arrive without one."""
    return "P" + uuid.uuid4().hex[:10]


# ---------------------------------------------------------------------------
# Row → Point
# ---------------------------------------------------------------------------

def normalize_row(row: Mapping[str, object]) -> Point:
    """Build a Point from one row or raise RowRejected."""
    lat = _coordinate(_text(row, "lat"))
    lng = _coordinate(_text(row, "lng"))
    if lat is None or lng is None:
        raise RowRejected("non-finite coordinates", dict(row))

    category = _text(row, "category").strip()
    if not category:
        raise RowRejected("empty category", dict(row))

    return Point(
        id=_text(row, "id").strip() or new_point_id(),
        lat=lat,
        lng=lng,
        category=normalize_category(category),
        severity=parse_severity(_text(row, "severity")),
        **{key: _text(row, key) for key in TEXT_FIELDS},
    )


def clean_row(row: Mapping[str, object]) -> Optional[Point]:
    """Point for a valid row, None for a rejected one. Never raises RowRejected."""
    try:
        return normalize_row(row)
    except RowRejected:
        return None

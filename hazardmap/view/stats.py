"""
Summary statistics — per-category counts for the stats panel.
"""
from __future__ import annotations

from typing import Sequence

import pandas as pd

from hazardmap.config import CATEGORIES
from hazardmap.data.schemas import Point


def category_counts(points: Sequence[Point]) -> dict[str, int]:
    """Count per category code, every code present (zero if unmatched)."""
    counts = pd.Series([p.category for p in points], dtype="object").value_counts()
    counts = counts.reindex(list(CATEGORIES), fill_value=0)
    return {code: int(n) for code, n in counts.items()}


def stats_rows(points: Sequence[Point]) -> list[dict]:
    """Rows for the stats panel, one per category in display order."""
    counts = category_counts(points)
    return [
        {"code": code, "label": label, "cls": cls, "count": counts[code]}
        for code, (label, cls) in CATEGORIES.items()
    ]


class StatsPanel:
    """Holds the rows currently shown in the summary panel."""

    def __init__(self) -> None:
        self.rows: list[dict] = stats_rows([])

    def update(self, points: Sequence[Point]) -> list[dict]:
        self.rows = stats_rows(points)
        return self.rows

    @property
    def total(self) -> int:
        return sum(r["count"] for r in self.rows)

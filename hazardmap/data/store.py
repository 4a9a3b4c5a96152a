"""
PointStore — the full hazard collection plus the currently filtered subset.

Populated once at startup; the full collection never changes afterwards.
The filtered subset is recomputed from scratch on every criteria change.
"""
from __future__ import annotations

import datetime as dt
from pathlib import Path
from typing import Optional

from hazardmap.config import CATEGORIES, DATA_SOURCE
from hazardmap.data.filters import filter_points
from hazardmap.data.loader import load_points
from hazardmap.data.schemas import FilterCriteria, LoadSummary, Point
from hazardmap.errors import DatasetLoadFailed


class PointStore:
    """In-memory hazard points with a derived, filtered view."""

    def __init__(self) -> None:
        self._points: tuple[Point, ...] = ()
        self._filtered: tuple[Point, ...] = ()
        self.summary: Optional[LoadSummary] = None
        self.loaded_at: Optional[dt.datetime] = None
        self._loaded = False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, source: str | Path = DATA_SOURCE) -> "PointStore":
        """Load and normalize the dataset. A failed load leaves the store empty."""
        if self._loaded:
            raise RuntimeError("PointStore is already populated; it loads once per session")

        print(f"Loading hazard data from {source}...")
        try:
            points, summary = load_points(source)
        except DatasetLoadFailed as exc:
            print(f"  ERROR: {exc}")
            points, summary = [], LoadSummary(source=str(source), error=str(exc))
        else:
            print(f"  {summary.rows_read:,} rows read → {summary.kept:,} points, {summary.rejected:,} rejected")
            if summary.kept == 0:
                print("  No valid hazard points — starting with an empty map")

        self._points = tuple(points)
        self._filtered = self._points
        self.summary = summary
        self.loaded_at = dt.datetime.now()
        self._loaded = True
        return self

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def load_error(self) -> Optional[str]:
        return self.summary.error if self.summary else None

    # ------------------------------------------------------------------
    # Filtering
    # ------------------------------------------------------------------

    @property
    def points(self) -> tuple[Point, ...]:
        return self._points

    @property
    def filtered(self) -> tuple[Point, ...]:
        return self._filtered

    def refilter(self, criteria: FilterCriteria) -> tuple[Point, ...]:
        """Replace the filtered subset with a fresh recomputation."""
        self._filtered = tuple(filter_points(self._points, criteria))
        return self._filtered

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def point_count(self) -> int:
        return len(self._points)

    def filtered_count(self) -> int:
        return len(self._filtered)

    def rejected_count(self) -> int:
        return self.summary.rejected if self.summary else 0

    def categories(self) -> list[dict]:
        """The fixed category table, in display order."""
        return [
            {"code": code, "label": label, "cls": cls}
            for code, (label, cls) in CATEGORIES.items()
        ]

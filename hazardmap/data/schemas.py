"""
Point model and filter criteria.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from hazardmap.config import CATEGORIES, SEVERITY_MIN


@dataclass(frozen=True)
class Point:
    """One hazard report. Immutable once built by the normalizer."""
    id: str
    lat: float
    lng: float
    category: str
    severity: int
    timestamp: str = ""
    block: str = ""
    school: str = ""
    description: str = ""
    photo_url: str = ""
    reporter_type: str = ""
    status: str = ""

    def properties(self) -> dict:
        """All non-geometry attributes, keyed by field name."""
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "block": self.block,
            "school": self.school,
            "category": self.category,
            "severity": self.severity,
            "description": self.description,
            "photo_url": self.photo_url,
            "reporter_type": self.reporter_type,
            "status": self.status,
        }

    def search_text(self) -> str:
        return f"{self.description} {self.status}".lower()


def _all_categories() -> frozenset[str]:
    return frozenset(CATEGORIES)


@dataclass(frozen=True)
class FilterCriteria:
    """What the user has chosen in the filter panel.

    An empty ``categories`` set matches nothing; it is not "no filter".
    """
    categories: frozenset[str] = field(default_factory=_all_categories)
    min_severity: int = SEVERITY_MIN
    search: str = ""

    def to_dict(self) -> dict:
        # Keep checkbox order stable for the UI
        return {
            "categories": [c for c in CATEGORIES if c in self.categories],
            "min_severity": self.min_severity,
            "search": self.search,
        }


@dataclass
class LoadSummary:
    """Outcome of one dataset load."""
    source: str
    rows_read: int = 0
    kept: int = 0
    rejected: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

"""
Filter engine — pure selection of the visible subset.
"""
from __future__ import annotations

from typing import Sequence

from hazardmap.data.schemas import FilterCriteria, Point


def matches(point: Point, criteria: FilterCriteria, query: str | None = None) -> bool:
    """True if one point passes category, severity and search predicates."""
    if query is None:
        query = criteria.search.lower()
    if point.category not in criteria.categories:
        return False
    if point.severity < criteria.min_severity:
        return False
    return not query or query in point.search_text()


def filter_points(points: Sequence[Point], criteria: FilterCriteria) -> list[Point]:
    """Points matching ``criteria``, in their original order.

    No side effects; running it again on its own output with the same
    criteria returns the same list.
    """
    query = criteria.search.lower()
    return [p for p in points if matches(p, criteria, query)]

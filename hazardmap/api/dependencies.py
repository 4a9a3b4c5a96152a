"""
FastAPI dependencies — controller singleton, criteria parsing.
"""
from __future__ import annotations

from fastapi import HTTPException

from hazardmap.config import CATEGORIES
from hazardmap.controller import HazardMapController
from hazardmap.data.schemas import FilterCriteria
from hazardmap.api.response_models import ApplyFiltersRequest

# ---------------------------------------------------------------------------
# Global controller singleton (set during startup)
# ---------------------------------------------------------------------------
_controller: HazardMapController | None = None


def set_controller(controller: HazardMapController | None) -> None:
    global _controller
    _controller = controller


def get_controller() -> HazardMapController:
    if _controller is None or not _controller.store.is_loaded:
        raise HTTPException(503, "Data not loaded yet")
    return _controller


# ---------------------------------------------------------------------------
# Request body → FilterCriteria
# ---------------------------------------------------------------------------

def parse_criteria(req: ApplyFiltersRequest) -> FilterCriteria:
    """Build FilterCriteria from an apply-filters body."""
    unknown = [c for c in req.categories if c not in CATEGORIES]
    if unknown:
        raise HTTPException(400, f"Unknown category code(s): {unknown}. Valid: {list(CATEGORIES)}")
    return FilterCriteria(
        categories=frozenset(req.categories),
        min_severity=req.min_severity,
        search=req.search,
    )

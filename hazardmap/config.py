"""
Hazard Map — Configuration: data source, map defaults, category table.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths: override with HAZARD_MAP_DATA (path or URL) for deployment
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_SOURCE = os.environ.get("HAZARD_MAP_DATA", str(PROJECT_ROOT / "data" / "hazards.csv"))
EXPORT_FOLDER = Path(os.environ.get("HAZARD_MAP_EXPORT_DIR", str(Path.cwd() / "exports")))
STATIC_FOLDER = Path(__file__).parent / "static"

# ---------------------------------------------------------------------------
# Map defaults (Ashikaga city hall, roughly)
# ---------------------------------------------------------------------------
DEFAULT_CENTER = (36.3407, 139.4495)
DEFAULT_ZOOM = 13
LOCATE_MAX_ZOOM = 17

TILE_URL = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
TILE_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
)

CLUSTER_OPTIONS = {
    "showCoverageOnHover": False,
    "maxClusterRadius": 48,
}

# ---------------------------------------------------------------------------
# Input columns
# ---------------------------------------------------------------------------
REQUIRED_COLUMNS = ["lat", "lng", "category"]

# ---------------------------------------------------------------------------
# Severity
# ---------------------------------------------------------------------------
SEVERITY_MIN = 1
SEVERITY_MAX = 3
DEFAULT_SEVERITY = 2

# ---------------------------------------------------------------------------
# Category table: code → (display label, visual class key).
# Order here is the order of checkboxes and stats rows.
# ---------------------------------------------------------------------------
CATEGORIES = {
    "sidewalk": ("No sidewalk / narrow sidewalk", "cat-sidewalk"),
    "crossing": ("Hard to cross / long signal wait", "cat-crossing"),
    "blind":    ("Poor visibility / blind spot", "cat-blind"),
    "speed":    ("Speeding / cut-through traffic", "cat-speed"),
    "signal":   ("Missing signals or signs", "cat-signal"),
    "dark":     ("Dark at night / poor lighting", "cat-dark"),
    "nearmiss": ("Frequent near misses", "cat-nearmiss"),
    "other":    ("Other", "cat-other"),
}

CATCH_ALL_CATEGORY = "other"

# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------
EXPORT_FILENAME = "hazard_map_filtered.geojson"
EXPORT_MEDIA_TYPE = "application/geo+json"

"""Data loading, normalization, filtering, and the in-memory point store."""
from .schemas import Point, FilterCriteria, LoadSummary
from .normalize import clean_row, normalize_row
from .loader import read_rows, load_points
from .filters import filter_points
from .store import PointStore

"""
Root conftest.py — sys.path and shared fixtures.
"""

import os
import sys

import pandas as pd
import pytest

# Add project root to sys.path so 'hazardmap' is importable without installing
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from hazardmap.controller import HazardMapController  # noqa: E402


@pytest.fixture
def two_point_rows():
    """The blind/speed pair used in the end-to-end scenario."""
    return [
        {"lat": "36.34", "lng": "139.45", "category": "blind", "severity": "1"},
        {"lat": "36.35", "lng": "139.44", "category": "speed", "severity": "3"},
    ]


@pytest.fixture
def mixed_rows():
    return [
        {"id": "A", "lat": "36.34", "lng": "139.45", "category": "blind", "severity": "1",
         "description": "Hedge hides the corner", "status": "open"},
        {"id": "B", "lat": "36.35", "lng": "139.44", "category": "speed", "severity": "3",
         "description": "Cars cut through", "status": "Police notified"},
        {"id": "C", "lat": "abc", "lng": "139.40", "category": "dark", "severity": "2"},
        {"id": "D", "lat": "36.36", "lng": "139.43", "category": "parking", "severity": "9",
         "description": "Trucks parked on the route", "status": ""},
        {"id": "E", "lat": "36.37", "lng": "139.42", "category": "dark", "severity": "",
         "description": "No street lights", "status": "FIXED"},
        {"id": "F", "lat": "36.38", "lng": "inf", "category": "speed", "severity": "2"},
        {"id": "G", "lat": "36.39", "lng": "139.41", "category": "  ", "severity": "2"},
    ]


@pytest.fixture
def write_csv(tmp_path):
    """Factory fixture: write rows to a CSV file and return its path."""
    def _write(rows, name="hazards.csv"):
        path = tmp_path / name
        pd.DataFrame(rows).to_csv(path, index=False)
        return path
    return _write


@pytest.fixture
def loaded_controller(write_csv, mixed_rows):
    return HazardMapController().load(write_csv(mixed_rows))

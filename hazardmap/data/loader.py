"""
CSV loading: one file (path or URL) → list of normalized Points.
"""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Optional

import pandas as pd

from hazardmap.config import DATA_SOURCE, REQUIRED_COLUMNS
from hazardmap.data.normalize import clean_row
from hazardmap.data.schemas import LoadSummary, Point
from hazardmap.errors import DatasetLoadFailed


def read_rows(source: str | Path = DATA_SOURCE, bad_lines: Optional[list] = None) -> list[dict]:
    """Read the CSV into header-keyed rows of strings.

    Every cell comes back as ``str``; empty and short rows give "" cells.
    A line with more fields than the header is dropped and, when ``bad_lines``
    is given, appended to it. Raises DatasetLoadFailed if the file cannot be
    fetched, decoded or parsed at all.
    """
    def _drop(fields: list[str]) -> None:
        if bad_lines is not None:
            bad_lines.append(fields)
        return None

    try:
        df = pd.read_csv(
            source,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding="utf-8-sig",
            engine="python",
            on_bad_lines=_drop,
        )
    except pd.errors.EmptyDataError:
        # Zero bytes / no header: a readable file with nothing in it
        return []
    except (OSError, ValueError, csv.Error) as exc:
        raise DatasetLoadFailed(str(source), exc) from exc

    df.rename(columns={c: str(c).strip() for c in df.columns}, inplace=True)

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        print(f"  Warning: {source} is missing required column(s) {missing}; every row will be dropped")

    df = df.fillna("")
    return df.to_dict(orient="records")


def load_points(source: str | Path = DATA_SOURCE) -> tuple[list[Point], LoadSummary]:
    """Read and normalize every row; malformed rows and lines are dropped, not fatal."""
    bad_lines: list = []
    rows = read_rows(source, bad_lines)
    if bad_lines:
        print(f"  Skipped {len(bad_lines):,} line(s) with more fields than the header")

    points: list[Point] = []
    for row in rows:
        point = clean_row(row)
        if point is not None:
            points.append(point)

    rows_read = len(rows) + len(bad_lines)
    summary = LoadSummary(
        source=str(source),
        rows_read=rows_read,
        kept=len(points),
        rejected=rows_read - len(points),
    )
    return points, summary

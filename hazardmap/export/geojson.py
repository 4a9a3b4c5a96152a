"""
GeoJSON export of the filtered subset.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from hazardmap.config import EXPORT_FILENAME, EXPORT_MEDIA_TYPE
from hazardmap.data.schemas import Point


@dataclass(frozen=True)
class GeoJSONExport:
    """A ready-to-save export: fixed filename plus encoded body."""
    filename: str
    content: bytes
    feature_count: int
    media_type: str = EXPORT_MEDIA_TYPE


def point_feature(p: Point) -> dict:
    # GeoJSON positions are [longitude, latitude]
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [p.lng, p.lat]},
        "properties": p.properties(),
    }


def feature_collection(points: Sequence[Point]) -> dict:
    return {
        "type": "FeatureCollection",
        "features": [point_feature(p) for p in points],
    }


def dumps(points: Sequence[Point]) -> str:
    return json.dumps(feature_collection(points), ensure_ascii=False, indent=2)


def build_export(points: Sequence[Point], filename: str = EXPORT_FILENAME) -> GeoJSONExport:
    return GeoJSONExport(
        filename=filename,
        content=dumps(points).encode("utf-8"),
        feature_count=len(points),
    )


def write_geojson(points: Sequence[Point], output_dir: str | Path, filename: str = EXPORT_FILENAME) -> Path:
    """Write the export under ``output_dir`` and return its path."""
    out_dir = Path(output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    export = build_export(points, filename)
    path = out_dir / export.filename
    path.write_bytes(export.content)
    return path

"""GeoJSON serialization and file output."""
from .geojson import GeoJSONExport, point_feature, feature_collection, dumps, build_export, write_geojson

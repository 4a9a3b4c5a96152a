"""
Hazard Map
==========

Geotagged school-route hazard reports on an interactive map.

- Data loading, normalization and filtering live in `hazardmap.data`.
- Marker layer and stats panel sync is in `hazardmap.view`.
- GeoJSON export is in `hazardmap.export`.
- `hazardmap.controller` ties them together; `hazardmap.main` serves it.
"""

__version__ = "1.0.0"

"""
View synchronizer — keeps the marker layer and stats panel in step with a subset.

It only ever sees the subset it is handed; how that subset was chosen is not
its concern.
"""
from __future__ import annotations

from typing import Optional, Sequence

from hazardmap.data.schemas import Point
from hazardmap.view.markers import MarkerLayer, build_marker
from hazardmap.view.stats import StatsPanel


class ViewSynchronizer:
    def __init__(self, layer: Optional[MarkerLayer] = None, panel: Optional[StatsPanel] = None) -> None:
        self.layer = layer if layer is not None else MarkerLayer()
        self.panel = panel if panel is not None else StatsPanel()
        self.revision = 0

    def render(self, points: Sequence[Point]) -> None:
        """Rebuild the whole layer and the stats for ``points``."""
        self.layer.clear()
        self.layer.add_many(build_marker(p) for p in points)
        self.panel.update(points)
        self.revision += 1

    def snapshot(self) -> dict:
        return {
            "revision": self.revision,
            "markers": [m.to_dict() for m in self.layer.markers],
            "stats": self.panel.rows,
        }

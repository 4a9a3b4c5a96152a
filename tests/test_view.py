"""
Marker encoding, stats panel, and whole-layer synchronization.
"""

import pytest

from hazardmap.config import CATEGORIES
from hazardmap.data.normalize import clean_row
from hazardmap.data.schemas import Point
from hazardmap.view.markers import MarkerLayer, build_marker, marker_style, popup_html
from hazardmap.view.stats import StatsPanel, category_counts, stats_rows
from hazardmap.view.sync import ViewSynchronizer


def _points(rows):
    return [p for p in (clean_row(r) for r in rows) if p is not None]


class TestMarkerStyle:
    def test_category_sets_class_and_severity_sets_tier(self):
        style = marker_style("speed", 3)
        assert style.category_class == "cat-speed"
        assert style.severity_class == "sev-3"
        assert style.css == "marker-dot cat-speed sev-3"

    @pytest.mark.parametrize("category", ["parking", "", "SPEED"])
    def test_unknown_category_uses_catch_all_style(self, category):
        assert marker_style(category, 2).category_class == "cat-other"

    @pytest.mark.parametrize("severity,tier", [(0, "sev-1"), (7, "sev-3"), (2, "sev-2")])
    def test_severity_tier_is_clamped(self, severity, tier):
        assert marker_style("blind", severity).severity_class == tier

    def test_every_category_and_tier_renders(self):
        for code in CATEGORIES:
            for sev in (1, 2, 3):
                assert marker_style(code, sev).label


class TestPopup:
    def test_text_is_escaped(self):
        p = Point(id="X", lat=1.0, lng=2.0, category="blind", severity=2,
                  description="<script>alert(1)</script>", status="a & b")
        body = popup_html(p)
        assert "<script>" not in body
        assert "&lt;script&gt;" in body
        assert "a &amp; b" in body

    def test_only_web_photo_urls_are_linked(self):
        safe = Point(id="X", lat=1.0, lng=2.0, category="blind", severity=2, photo_url="https://example.org/a.jpg")
        unsafe = Point(id="Y", lat=1.0, lng=2.0, category="blind", severity=2, photo_url="javascript:alert(1)")
        assert 'href="https://example.org/a.jpg"' in popup_html(safe)
        assert "href" not in popup_html(unsafe)

    def test_place_line_joins_block_and_school(self):
        p = Point(id="X", lat=1.0, lng=2.0, category="dark", severity=1, block="Block 3", school="East")
        assert "Block 3 / East" in popup_html(p)


class TestStats:
    def test_all_categories_listed_with_zero_counts(self, two_point_rows):
        points = _points(two_point_rows)[1:]
        counts = category_counts(points)
        assert list(counts) == list(CATEGORIES)
        assert counts["speed"] == 1
        assert all(n == 0 for code, n in counts.items() if code != "speed")

    def test_counts_sum_to_subset_size(self, mixed_rows):
        points = _points(mixed_rows)
        rows = stats_rows(points)
        assert len(rows) == 8
        assert all(r["count"] >= 0 for r in rows)
        assert sum(r["count"] for r in rows) == len(points)

    def test_empty_subset(self):
        rows = stats_rows([])
        assert len(rows) == 8
        assert all(r["count"] == 0 for r in rows)

    def test_counts_are_plain_ints(self, mixed_rows):
        assert all(type(n) is int for n in category_counts(_points(mixed_rows)).values())

    def test_panel_total(self, mixed_rows):
        panel = StatsPanel()
        panel.update(_points(mixed_rows))
        assert panel.total == 4


class TestSynchronizer:
    def test_layer_is_replaced_not_patched(self, mixed_rows):
        points = _points(mixed_rows)
        sync = ViewSynchronizer()
        sync.render(points)
        assert len(sync.layer) == 4

        sync.render(points[1:2])
        assert [m.id for m in sync.layer.markers] == ["B"]
        assert sum(r["count"] for r in sync.panel.rows) == 1
        assert sync.revision == 2

    def test_empty_subset_clears_everything(self, mixed_rows):
        sync = ViewSynchronizer()
        sync.render(_points(mixed_rows))
        sync.render([])
        assert len(sync.layer) == 0
        assert all(r["count"] == 0 for r in sync.panel.rows)

    def test_snapshot_shape(self, two_point_rows):
        sync = ViewSynchronizer()
        sync.render(_points(two_point_rows))
        snap = sync.snapshot()
        assert snap["revision"] == 1
        assert len(snap["markers"]) == 2
        assert snap["markers"][1]["css"] == "marker-dot cat-speed sev-3"
        assert len(snap["stats"]) == 8

    def test_marker_layer_clear(self):
        layer = MarkerLayer()
        layer.add(build_marker(Point(id="X", lat=1.0, lng=2.0, category="dark", severity=1)))
        layer.clear()
        assert layer.markers == []

    def test_injected_empty_collaborators_are_kept(self, two_point_rows):
        layer, panel = MarkerLayer(), StatsPanel()
        sync = ViewSynchronizer(layer=layer, panel=panel)
        assert sync.layer is layer
        assert sync.panel is panel

        sync.render(_points(two_point_rows))
        assert [m.id for m in layer.markers] == [m.id for m in sync.layer.markers]
        assert len(layer) == 2
        assert panel.total == 2

"""
Controller commands and the end-to-end scenarios.
"""

import json

import pytest

from hazardmap.config import CATEGORIES, LOCATE_MAX_ZOOM
from hazardmap.controller import HazardMapController
from hazardmap.data.schemas import FilterCriteria
from hazardmap.data.store import PointStore
from hazardmap.errors import GeolocationUnavailable
from hazardmap.view.markers import MarkerLayer
from hazardmap.view.sync import ViewSynchronizer


class TestEndToEnd:
    def test_min_severity_two_keeps_only_speed_point(self, write_csv, two_point_rows):
        controller = HazardMapController().load(write_csv(two_point_rows))
        state = controller.apply_filters(FilterCriteria(min_severity=2))

        assert state["count"] == 1
        assert [(m["lat"], m["lng"]) for m in state["markers"]] == [(36.35, 139.44)]

        counts = {r["code"]: r["count"] for r in state["stats"]}
        assert counts["speed"] == 1
        assert all(n == 0 for code, n in counts.items() if code != "speed")
        assert len(counts) == 8

        fc = json.loads(controller.export().content)
        assert len(fc["features"]) == 1
        assert fc["features"][0]["geometry"]["coordinates"] == [139.44, 36.35]
        assert fc["features"][0]["properties"]["category"] == "speed"

    def test_single_bad_row_loads_empty(self, write_csv):
        controller = HazardMapController().load(write_csv([{"lat": "abc", "lng": "139.4", "category": "dark"}]))
        assert controller.store.load_error is None
        assert controller.store.point_count() == 0
        state = controller.state()
        assert state["markers"] == []
        assert len(state["stats"]) == 8


class TestCommands:
    def test_initial_view_shows_everything(self, loaded_controller):
        state = loaded_controller.state()
        assert state["count"] == state["total"] == 4
        assert state["criteria"]["categories"] == list(CATEGORIES)

    def test_apply_is_idempotent(self, loaded_controller):
        criteria = FilterCriteria(categories=frozenset({"speed", "dark"}), search="l")
        first = loaded_controller.apply_filters(criteria)
        second = loaded_controller.apply_filters(criteria)
        assert first["markers"] == second["markers"]
        assert first["stats"] == second["stats"]

    def test_empty_category_set_gives_empty_view(self, loaded_controller):
        state = loaded_controller.apply_filters(FilterCriteria(categories=frozenset()))
        assert state["count"] == 0
        assert state["markers"] == []
        assert json.loads(loaded_controller.export().content)["features"] == []

    def test_reset_restores_defaults(self, loaded_controller):
        loaded_controller.apply_filters(FilterCriteria(categories=frozenset({"dark"}), min_severity=3, search="x"))
        state = loaded_controller.reset_filters()
        assert state["criteria"] == {"categories": list(CATEGORIES), "min_severity": 1, "search": ""}
        assert state["count"] == 4

    def test_export_follows_current_filter(self, loaded_controller):
        loaded_controller.apply_filters(FilterCriteria(categories=frozenset({"other"})))
        fc = json.loads(loaded_controller.export().content)
        assert [f["properties"]["id"] for f in fc["features"]] == ["D"]

    def test_filtering_never_changes_full_collection(self, loaded_controller):
        before = loaded_controller.store.points
        loaded_controller.apply_filters(FilterCriteria(min_severity=3))
        loaded_controller.reset_filters()
        assert loaded_controller.store.points is before

    def test_locate(self, loaded_controller):
        target = loaded_controller.locate(True)
        assert target.set_view is True
        assert target.max_zoom == LOCATE_MAX_ZOOM

    def test_locate_unavailable_does_not_touch_view(self, loaded_controller):
        loaded_controller.apply_filters(FilterCriteria(min_severity=3))
        with pytest.raises(GeolocationUnavailable):
            loaded_controller.locate(False)
        assert loaded_controller.state()["count"] == 2

    def test_failed_load_gives_valid_empty_view(self, tmp_path):
        controller = HazardMapController().load(tmp_path / "missing.csv")
        assert controller.store.load_error
        state = controller.apply_filters(FilterCriteria())
        assert state["count"] == 0
        assert json.loads(controller.export().content) == {"type": "FeatureCollection", "features": []}

    def test_injected_store_and_view_are_used(self, write_csv, two_point_rows):
        store, layer = PointStore(), MarkerLayer()
        view = ViewSynchronizer(layer=layer)
        controller = HazardMapController(store=store, view=view)
        assert controller.store is store
        assert controller.view is view

        controller.load(write_csv(two_point_rows))
        assert store.point_count() == 2
        assert len(layer) == 2

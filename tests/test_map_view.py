"""
Tests for map rendering state
File: tests/test_map_view.py
"""

import folium
import pytest

from map_view import MapRenderer
from origin_index import build_index
from conftest import make_row


def dataset(rows):
    index, _ = build_index(rows)
    return index


class TestMarkers:

    def setup_method(self):
        self.renderer = MapRenderer()
        self.index = dataset([
            make_row(),
            make_row(dest_city="Denver", dest_state="CO", dest_lat="39.74", dest_lng="-104.99"),
            make_row(origin_city="Chicago", origin_state="IL", orig_lat="41.88", orig_lng="-87.63"),
        ])

    def test_one_marker_per_origin(self):
        self.renderer.render_markers(self.index)

        assert [m.origin_key for m in self.renderer.markers] == ["Dallas, TX", "Chicago, IL"]
        dallas = self.renderer.markers[0]
        assert dallas.location == (pytest.approx(32.78), pytest.approx(-96.80))
        assert dallas.count == 2
        assert dallas.popup_html == "<strong>Dallas, TX</strong><br>2 loads"

    def test_render_markers_is_idempotent(self):
        self.renderer.render_markers(self.index)
        first = [(m.origin_key, m.location, m.count) for m in self.renderer.markers]
        self.renderer.render_markers(self.index)
        second = [(m.origin_key, m.location, m.count) for m in self.renderer.markers]

        assert first == second
        assert len(self.renderer.markers) == 2

    def test_old_markers_discarded(self):
        self.renderer.render_markers(self.index)
        self.renderer.render_markers(dataset([make_row(origin_city="Reno", origin_state="NV")]))

        assert [m.origin_key for m in self.renderer.markers] == ["Reno, NV"]

    def test_click_without_handler_draws_routes(self):
        self.renderer.render_markers(self.index)

        assert self.renderer.click("Chicago, IL") is True
        assert self.renderer.route_origin == "Chicago, IL"
        assert len(self.renderer.routes["features"]) == 1

    def test_click_calls_bound_handler(self):
        calls = []
        renderer = MapRenderer(on_select=lambda key, ships: calls.append((key, len(ships))))
        renderer.render_markers(self.index)
        renderer.click("Dallas, TX")

        assert calls == [("Dallas, TX", 2)]

    def test_click_unknown_origin_ignored(self):
        self.renderer.render_markers(self.index)

        assert self.renderer.click("Nowhere, ZZ") is False
        assert self.renderer.routes is None

    def test_marker_at(self):
        self.renderer.render_markers(self.index)

        assert self.renderer.marker_at(41.88, -87.63) == "Chicago, IL"
        assert self.renderer.marker_at(0.0, 0.0) is None


class TestRoutes:

    def setup_method(self):
        self.renderer = MapRenderer()
        self.index = dataset([
            make_row(),
            make_row(dest_city="Denver", dest_state="CO", dest_lat="39.74", dest_lng="-104.99"),
            make_row(origin_city="Chicago", origin_state="IL", orig_lat="41.88", orig_lng="-87.63"),
        ])

    def test_one_segment_per_shipment_in_lng_lat_order(self):
        group = self.index.get("Dallas, TX")
        self.renderer.render_routes(group.key, group.shipments)

        features = self.renderer.routes["features"]
        assert len(features) == 2
        assert features[0]["geometry"] == {
            "type": "LineString",
            "coordinates": [[-96.80, 32.78], [-84.39, 33.75]],
        }
        assert features[0]["properties"]["label"] == "To Atlanta, GA"
        assert features[1]["properties"]["label"] == "To Denver, CO"

    def test_new_selection_replaces_overlay(self):
        dallas = self.index.get("Dallas, TX")
        chicago = self.index.get("Chicago, IL")
        self.renderer.render_routes(dallas.key, dallas.shipments)
        self.renderer.render_routes(chicago.key, chicago.shipments)

        assert self.renderer.route_origin == "Chicago, IL"
        assert len(self.renderer.routes["features"]) == 1

    def test_clear_routes(self):
        dallas = self.index.get("Dallas, TX")
        self.renderer.render_routes(dallas.key, dallas.shipments)
        self.renderer.clear_routes()

        assert self.renderer.routes is None
        assert self.renderer.route_origin is None


class TestFolium:

    def test_folium_map_holds_markers_and_overlay(self):
        renderer = MapRenderer()
        index = dataset([make_row(), make_row(origin_city="Chicago", origin_state="IL")])
        renderer.render_markers(index)
        renderer.click("Dallas, TX")

        fmap = renderer.to_folium()
        children = list(fmap._children.values())

        assert isinstance(fmap, folium.Map)
        assert sum(isinstance(c, folium.Marker) for c in children) == 2
        assert sum(isinstance(c, folium.GeoJson) for c in children) == 1

    def test_fresh_map_each_call(self):
        renderer = MapRenderer()
        renderer.render_markers(dataset([make_row()]))

        assert renderer.to_folium() is not renderer.to_folium()

    def test_empty_dataset_renders_bare_map(self):
        renderer = MapRenderer()
        renderer.render_markers(dataset([]))
        children = list(renderer.to_folium()._children.values())

        assert not any(isinstance(c, (folium.Marker, folium.GeoJson)) for c in children)

# map_view.py
"""Map rendering for origin markers and the selected origin's routes.

The renderer keeps plain view state (marker specs and a GeoJSON overlay) and
materializes a fresh ``folium.Map`` from it on every Streamlit pass, so nothing
drawn in an earlier pass can linger on the page.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import folium

from constants import MAP_CENTER, MAP_TILES, MAP_ZOOM, ROUTE_STYLE
from models import Shipment
from origin_index import OriginIndex

logger = logging.getLogger(__name__)

SelectHandler = Callable[[str, List[Shipment]], None]


@dataclass
class MarkerView:
    origin_key: str
    location: Tuple[float, float]  # (lat, lng)
    count: int
    on_click: Callable[[], None]

    @property
    def popup_html(self) -> str:
        return f"<strong>{self.origin_key}</strong><br>{self.count} loads"


class MapRenderer:
    def __init__(self, on_select: Optional[SelectHandler] = None) -> None:
        self.on_select = on_select
        self.markers: List[MarkerView] = []
        self.routes: Optional[Dict[str, Any]] = None
        self.route_origin: Optional[str] = None

    def render_markers(self, dataset: OriginIndex) -> None:
        self.markers = []
        for group in dataset.groups():
            self.markers.append(
                MarkerView(
                    origin_key=group.key,
                    location=group.coords,
                    count=len(group),
                    on_click=self._bind(group.key, list(group.shipments)),
                )
            )
        logger.debug("Rendered %d origin markers", len(self.markers))

    def _bind(self, key: str, shipments: List[Shipment]) -> Callable[[], None]:
        def select() -> None:
            if self.on_select is not None:
                self.on_select(key, shipments)
            else:
                self.render_routes(key, shipments)
        return select

    def render_routes(self, origin_key: str, shipments: Sequence[Shipment]) -> None:
        self.clear_routes()
        features = [
            {
                "type": "Feature",
                "geometry": {
                    "type": "LineString",
                    # GeoJSON wants (lng, lat)
                    "coordinates": [
                        [s.origin_lng, s.origin_lat],
                        [s.dest_lng, s.dest_lat],
                    ],
                },
                "properties": {
                    "label": f"To {s.destination_label}",
                    "dest_city": s.dest_city,
                    "dest_state": s.dest_state,
                },
            }
            for s in shipments
        ]
        self.routes = {"type": "FeatureCollection", "features": features}
        self.route_origin = origin_key

    def clear_routes(self) -> None:
        self.routes = None
        self.route_origin = None

    def click(self, origin_key: str) -> bool:
        for marker in self.markers:
            if marker.origin_key == origin_key:
                marker.on_click()
                return True
        logger.debug("Click on unknown origin %r ignored", origin_key)
        return False

    def marker_at(self, lat: float, lng: float, tol: float = 1e-6) -> Optional[str]:
        for marker in self.markers:
            m_lat, m_lng = marker.location
            if abs(m_lat - lat) <= tol and abs(m_lng - lng) <= tol:
                return marker.origin_key
        return None

    def to_folium(self) -> folium.Map:
        fmap = folium.Map(location=list(MAP_CENTER), zoom_start=MAP_ZOOM, tiles=MAP_TILES)
        for marker in self.markers:
            folium.Marker(
                location=list(marker.location),
                tooltip=marker.origin_key,
                popup=folium.Popup(marker.popup_html),
            ).add_to(fmap)

        if self.routes and self.routes["features"]:
            folium.GeoJson(
                self.routes,
                name=f"Routes from {self.route_origin}",
                style_function=lambda _feature: dict(ROUTE_STYLE),
                tooltip=folium.GeoJsonTooltip(fields=["label"], labels=False),
            ).add_to(fmap)
        return fmap

# session.py
"""Per-browser-session controller.

Owns the origin dataset and every view derived from it. All mutation goes
through ``ingest``/``select``; the UI layer only reads.
"""
from __future__ import annotations
import logging
import threading
from typing import Any, List, Optional, Sequence

from data_io import IngestionError, read_rows
from drop_zone import DropZone
from map_view import MapRenderer
from models import Shipment
from origin_index import OriginIndex, build_index
from sidebar import SidebarRenderer

logger = logging.getLogger(__name__)


class ShipmentMapSession:
    def __init__(self) -> None:
        self.dataset = OriginIndex()
        self.map = MapRenderer(on_select=self.select)
        self.sidebar = SidebarRenderer()
        self.drop_zone = DropZone(on_file=self.ingest)
        self.selected: Optional[str] = None
        self.source_name: Optional[str] = None
        self.rejected = 0
        self.generation = 0
        self._lock = threading.Lock()

    def drop(self, files: Optional[Sequence[Any]]) -> bool:
        return self.drop_zone.drop(files)

    def ingest(self, file) -> OriginIndex:
        name = getattr(file, "name", str(file))
        try:
            rows = read_rows(file)
        except Exception as e:
            logger.exception("Failed to parse %s", name)
            raise IngestionError(f"Could not read {name}: {e}") from e

        # parse and group outside the lock; swap in only a complete index
        index, rejected = build_index(rows)
        with self._lock:
            self.dataset = index
            self.rejected = rejected
            self.source_name = name
            self.generation += 1
            self.selected = None
            self.map.clear_routes()
            self.map.render_markers(self.dataset)
            self.sidebar.reset()

        logger.info(
            "Loaded %s: %d origins, %d shipments, %d rejected rows",
            name, len(index), index.shipment_count(), rejected,
        )
        return index

    def select(self, origin_key: str, shipments: List[Shipment]) -> None:
        with self._lock:
            self.selected = origin_key
            self.map.render_routes(origin_key, shipments)
            self.sidebar.render(origin_key, shipments)

    def click(self, origin_key: str) -> bool:
        return self.map.click(origin_key)

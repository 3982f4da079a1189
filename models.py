# models.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from constants import PLACEHOLDER_LINK


@dataclass(frozen=True)
class Shipment:
    """One validated origin -> destination freight movement.

    Coordinates are always finite floats; rows that cannot satisfy that never
    become a Shipment (see ``normalizer.normalize``).
    """
    origin_city: str
    origin_state: str
    origin_lat: float
    origin_lng: float
    dest_city: str
    dest_state: str
    dest_lat: float
    dest_lng: float
    booking_url: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def origin_key(self) -> str:
        return f"{self.origin_city}, {self.origin_state}"

    @property
    def destination_label(self) -> str:
        return f"{self.dest_city}, {self.dest_state}"

    @property
    def link(self) -> str:
        return self.booking_url or PLACEHOLDER_LINK


@dataclass
class OriginGroup:
    key: str
    coords: Tuple[float, float]  # (lat, lng) of the first shipment seen
    shipments: List[Shipment] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.shipments)

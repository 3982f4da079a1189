# origin_index.py
from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from models import OriginGroup, Shipment
from normalizer import normalize

logger = logging.getLogger(__name__)


class OriginIndex:
    """Shipments grouped by origin key, in first-seen order."""

    def __init__(self) -> None:
        self._groups: Dict[str, OriginGroup] = {}

    def reset(self) -> None:
        self._groups = {}

    def add(self, shipment: Shipment) -> OriginGroup:
        key = shipment.origin_key
        group = self._groups.get(key)
        if group is None:
            # first shipment for a key fixes the marker position
            group = OriginGroup(key=key, coords=(shipment.origin_lat, shipment.origin_lng))
            self._groups[key] = group
        group.shipments.append(shipment)
        return group

    def get(self, key: str) -> Optional[OriginGroup]:
        return self._groups.get(key)

    def groups(self) -> List[OriginGroup]:
        return list(self._groups.values())

    def keys(self) -> List[str]:
        return list(self._groups)

    def shipment_count(self) -> int:
        return sum(len(g) for g in self._groups.values())

    def __contains__(self, key: object) -> bool:
        return key in self._groups

    def __iter__(self) -> Iterator[OriginGroup]:
        return iter(self.groups())

    def __len__(self) -> int:
        return len(self._groups)


def build_index(rows: Iterable[Mapping[str, Any]]) -> Tuple[OriginIndex, int]:
    """Normalize raw rows into a fresh index; returns (index, rejected_count)."""
    index = OriginIndex()
    rejected = 0
    for row in rows:
        shipment = normalize(row)
        if shipment is None:
            rejected += 1
            continue
        index.add(shipment)
    if rejected:
        logger.warning("Removed %d rows with invalid coordinates", rejected)
    return index, rejected

# normalizer.py
from __future__ import annotations
import logging
import math
from typing import Any, Mapping, Optional

from constants import BOOKING_URL_COLS, COORD_COLS, DEST_TEXT_COLS, ORIGIN_TEXT_COLS
from models import Shipment

logger = logging.getLogger(__name__)

_KNOWN_COLS = set(ORIGIN_TEXT_COLS + DEST_TEXT_COLS + COORD_COLS + BOOKING_URL_COLS)


def parse_coordinate(value: Any) -> Optional[float]:
    """Parse a coordinate cell; None for blanks, text, NaN and infinities."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value or "_" in value:
            return None
    try:
        num = float(value)
    except (TypeError, ValueError):
        return None
    return num if math.isfinite(num) else None


def _text(row: Mapping[str, Any], col: str) -> str:
    value = row.get(col)
    return "" if value is None else str(value)


def _booking_url(row: Mapping[str, Any]) -> Optional[str]:
    for col in BOOKING_URL_COLS:
        value = row.get(col)
        if value is not None and str(value).strip():
            return str(value).strip()
    return None


def normalize(row: Mapping[str, Any]) -> Optional[Shipment]:
    coords = [parse_coordinate(row.get(col)) for col in COORD_COLS]
    if any(c is None for c in coords):
        logger.warning("Skipping invalid row: %s", dict(row))
        return None

    o_lat, o_lng, d_lat, d_lng = coords
    return Shipment(
        origin_city=_text(row, "origin_city"),
        origin_state=_text(row, "origin_state"),
        origin_lat=o_lat,
        origin_lng=o_lng,
        dest_city=_text(row, "dest_city"),
        dest_state=_text(row, "dest_state"),
        dest_lat=d_lat,
        dest_lng=d_lng,
        booking_url=_booking_url(row),
        extra={k: v for k, v in row.items() if k not in _KNOWN_COLS},
    )

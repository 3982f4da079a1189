# sidebar.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence

from constants import BOOKING_LINK_TEXT, SIDEBAR_PLACEHOLDER
from models import Shipment


@dataclass
class DestinationEntry:
    label: str
    link: str


class SidebarRenderer:
    """Destination list for the selected origin, or the instructional hint."""

    def __init__(self) -> None:
        self.heading: Optional[str] = None
        self.entries: List[DestinationEntry] = []

    @property
    def is_placeholder(self) -> bool:
        return self.heading is None

    def reset(self) -> None:
        self.heading = None
        self.entries = []

    def render(self, origin_key: str, shipments: Sequence[Shipment]) -> None:
        self.heading = f"From {origin_key}"
        self.entries = [DestinationEntry(s.destination_label, s.link) for s in shipments]

    def show(self, container) -> None:
        if self.is_placeholder:
            container.markdown(f"*{SIDEBAR_PLACEHOLDER}*")
            return
        container.subheader(self.heading)
        for entry in self.entries:
            container.markdown(f"**{entry.label}**  \n[{BOOKING_LINK_TEXT}]({entry.link})")

# drop_zone.py
from __future__ import annotations
import logging
from typing import Any, Callable, Optional, Sequence

logger = logging.getLogger(__name__)

IDLE = "idle"
HOVERING = "hovering"

_ENTER_EVENTS = ("dragenter", "dragover")
_LEAVE_EVENTS = ("dragleave", "drop")


class DropZone:
    """Hover state of the drop target; forwards the first dropped file."""

    def __init__(self, on_file: Callable[[Any], None]) -> None:
        self.on_file = on_file
        self.state = IDLE

    @property
    def hovering(self) -> bool:
        return self.state == HOVERING

    def handle(self, event: str, files: Optional[Sequence[Any]] = None) -> bool:
        """Apply one drag event; returns True when default handling is suppressed."""
        if event in _ENTER_EVENTS:
            self.state = HOVERING
            return True
        if event not in _LEAVE_EVENTS:
            raise ValueError(f"Unknown drop-zone event: {event}")

        self.state = IDLE
        if event == "dragleave":
            return False

        if not files:
            return True
        if len(files) > 1:
            logger.debug("Ignoring %d extra dropped files", len(files) - 1)
        self.on_file(files[0])
        return True

    def drop(self, files: Optional[Sequence[Any]]) -> bool:
        return self.handle("drop", files)

"""Cursor, selection and viewport overlay markers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

CURSOR = "c"
SELECTION = "s"
VISIBLE = "v"
BLANK = " "


@dataclass(frozen=True)
class Frame:
    """A directionless range of buffer lines; ``top`` may exceed ``bottom``."""

    top: int = 0
    bottom: int = 0

    def contains(self, offset: float, scale: float) -> bool:
        """True when the frame intersects the row window ``[offset, offset + scale)``."""
        low = min(self.top, self.bottom)
        high = max(self.top, self.bottom)
        return low < int(offset + scale) and high >= int(offset)


@dataclass(frozen=True)
class Modifier:
    """Per-row marker source, rebuilt on every sync or resize."""

    cursor: int = 0
    visible_frame: Frame = field(default_factory=Frame)
    select_frame: Optional[Frame] = None

    def marker(self, row: int, length: int, height: int) -> str:
        """Marker for display *row*: cursor, then selection, then viewport."""
        if length <= 0 or height <= 0:
            return BLANK

        scale = length / height
        offset = row * scale

        if int(offset) <= self.cursor < offset + scale:
            return CURSOR

        if self.select_frame is not None and self.select_frame.contains(offset, scale):
            return SELECTION

        if self.visible_frame.contains(offset, scale):
            return VISIBLE

        return BLANK

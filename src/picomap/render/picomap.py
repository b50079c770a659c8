"""Row formatter: two glyph columns, two intensities and a marker."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from picomap.config.schema import Smoothing
from picomap.highlight.models import Highlights
from picomap.render.frame import Modifier
from picomap.render.line import Cell, Line


def format_row(change: Cell, diag: Cell, marker: str) -> str:
    """``change_glyph diag_glyph change_nn diag_nn marker`` with no separators."""
    return f"{change[0].glyph}{diag[0].glyph}{change[1]:02d}{diag[1]:02d}{marker}"


@dataclass
class Picomap:
    """One render's worth of state. Nothing here outlives ``to_strings``."""

    changes: Highlights = field(default_factory=list)
    diags: Highlights = field(default_factory=list)
    modifier: Modifier = field(default_factory=Modifier)
    smoothing: Smoothing = "forward"

    def to_strings(self, length: int, height: int) -> List[str]:
        if length <= 0 or height <= 0 or not self.changes or not self.diags:
            return []

        change_line = Line.from_highlights(self.changes).scale(height, self.smoothing)
        diag_line = Line.from_highlights(self.diags).scale(height, self.smoothing)

        return [
            format_row(
                change_line[row],
                diag_line[row],
                self.modifier.marker(row, length, height),
            )
            for row in range(height)
        ]

"""Aggregated lines: pairwise block folding and downsampling.

A ``Line`` holds one ``(Block, Highlight)`` cell per position. Built from a
dense highlight array, cell ``i`` folds buffer lines ``i - 1`` (top half) and
``i`` (bottom half), so odd and even lines stay distinguishable at twice the
vertical density. ``scale`` then reduces the cells to a fixed row count,
OR-ing blocks and keeping the highest intensity so no signal is averaged
away.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple

from picomap.config.schema import Smoothing
from picomap.highlight.models import Highlight
from picomap.render.block import Block

Cell = Tuple[Block, Highlight]


@dataclass
class Line:
    cells: List[Cell] = field(default_factory=list)

    @classmethod
    def from_highlights(cls, highlights: Sequence[Highlight]) -> Line:
        """Fold each line with its predecessor into a half-character block."""
        if not highlights:
            return cls()

        first = highlights[0]
        cells: List[Cell] = [(Block.FULL, first) if first > 0 else (Block.NONE, 0)]

        for prev, curr in zip(highlights, highlights[1:]):
            block = Block.from_halves(prev > 0, curr > 0)
            # the current line wins over the previous one
            if curr > 0:
                value = curr
            elif prev > 0:
                value = prev
            else:
                value = 0
            cells.append((block, value))

        return cls(cells)

    def scale(self, height: int, smoothing: Smoothing = "forward") -> Line:
        """Downsample (or replicate) the cells into exactly *height* rows.

        Row ``r`` covers cells ``[floor(r * k), floor((r + 1) * k))`` with
        ``k = len / height``; the cell at the window start always seeds the
        fold, so a zoomed-in row with an empty window repeats that cell.
        Bounds use integer division so the last window always ends at
        ``len``.
        """
        length = len(self.cells)
        if length == 0 or height <= 0:
            return Line()

        rows: List[Cell] = []

        for row in range(height):
            offset = min(row * length // height, length - 1)
            limit = (row + 1) * length // height
            block, value = self.cells[offset]
            for other_block, other_value in self.cells[offset:limit]:
                block |= other_block
                value = max(value, other_value)
            rows.append((block, value))

        return Line(_smooth(rows, smoothing))

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    @property
    def blocks(self) -> List[Block]:
        return [block for block, _ in self.cells]

    @property
    def highlights(self) -> List[Highlight]:
        return [value for _, value in self.cells]


def _smooth(rows: List[Cell], smoothing: Smoothing) -> List[Cell]:
    """Join runs of same-direction half blocks into full blocks.

    Adjacent ``BOTTOM`` rows always merge (the later one becomes ``FULL``).
    Adjacent ``TOP`` rows merge only with ``smoothing="symmetric"`` (the
    earlier one becomes ``FULL``). Comparisons use the blocks as they were
    before any promotion.
    """
    before = [block for block, _ in rows]
    result = list(rows)

    for i in range(1, len(rows)):
        if before[i - 1] is Block.BOTTOM and before[i] is Block.BOTTOM:
            result[i] = (Block.FULL, rows[i][1])

    if smoothing == "symmetric":
        for i in range(len(rows) - 2, -1, -1):
            if before[i + 1] is Block.TOP and before[i] is Block.TOP:
                result[i] = (Block.FULL, rows[i][1])

    return result

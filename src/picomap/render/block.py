"""Half-character blocks: which of two folded lines carry signal."""

from __future__ import annotations

from enum import Enum


class Block(Enum):
    """One display position covering a top and a bottom half-line.

    ``TOP`` is the previous buffer line, ``BOTTOM`` the current one.
    """

    NONE = 0
    TOP = 1
    BOTTOM = 2
    FULL = 3

    def combine(self, other: Block) -> Block:
        """Union of the halves set in either block."""
        return Block(self.value | other.value)

    def __or__(self, other: Block) -> Block:
        if not isinstance(other, Block):
            return NotImplemented
        return self.combine(other)

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]

    @classmethod
    def from_halves(cls, top: bool, bottom: bool) -> Block:
        block = cls.NONE
        if top:
            block |= cls.TOP
        if bottom:
            block |= cls.BOTTOM
        return block

    def __str__(self) -> str:
        return self.glyph


_GLYPHS = {
    Block.NONE: " ",
    Block.TOP: "▘",
    Block.BOTTOM: "▖",
    Block.FULL: "▌",
}

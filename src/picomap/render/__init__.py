"""Rendering: block folding, scaling, overlay markers, row formatting."""

from picomap.render.block import Block
from picomap.render.frame import Frame, Modifier
from picomap.render.line import Line
from picomap.render.picomap import Picomap, format_row

__all__ = ["Block", "Frame", "Line", "Modifier", "Picomap", "format_row"]

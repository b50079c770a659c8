"""Highlighters: sparse diagnostics and changes to dense intensities."""

from picomap.highlight.highlighter import (
    ChangeHighlighter,
    DiagnosticsHighlighter,
    Highlighter,
)
from picomap.highlight.models import (
    Change,
    Diagnostic,
    DiagnosticLevel,
    Highlight,
    Highlights,
)

__all__ = [
    "Change",
    "ChangeHighlighter",
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticsHighlighter",
    "Highlight",
    "Highlighter",
    "Highlights",
]

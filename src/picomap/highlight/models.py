"""Data models for per-line highlight events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

Highlight = int
Highlights = List[Highlight]


class DiagnosticLevel(str, Enum):
    NONE = "none"
    WARNING = "warning"
    DANGER = "danger"

    @property
    def code(self) -> Highlight:
        """Numeric intensity used by the renderer."""
        return _LEVEL_CODES[self]


_LEVEL_CODES = {
    DiagnosticLevel.NONE: 0,
    DiagnosticLevel.WARNING: 1,
    DiagnosticLevel.DANGER: 2,
}


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single-line annotation produced by a linter or compiler."""

    line: int  # 0-based buffer line
    text: str = ""
    level: DiagnosticLevel = DiagnosticLevel.NONE


@dataclass(frozen=True, slots=True)
class Change:
    """A contiguous run of changed lines starting at ``start``."""

    start: int  # 0-based buffer line
    length: int

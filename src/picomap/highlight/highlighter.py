"""Stateful converters from sparse events to dense per-line intensities.

Each highlighter keeps the array produced by its last ``sync``. A sync
always replaces the whole array: it is resized to the buffer length, reset
to the empty value and then refilled from the events. Nothing is diffed
between syncs.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterable, List

from picomap.highlight.models import Change, Diagnostic, DiagnosticLevel, Highlights

log = logging.getLogger(__name__)


class Highlighter(ABC):
    """Common read side of the diagnostics and change highlighters."""

    @abstractmethod
    def highlight(self) -> Highlights:
        """Return a dense snapshot, one intensity per buffer line."""

    @abstractmethod
    def __len__(self) -> int: ...


class DiagnosticsHighlighter(Highlighter):
    def __init__(self) -> None:
        self._values: List[DiagnosticLevel] = []

    def __len__(self) -> int:
        return len(self._values)

    def sync(self, length: int, diagnostics: Iterable[Diagnostic]) -> None:
        """Rebuild the array for a buffer of *length* lines.

        Later diagnostics on the same line overwrite earlier ones. Lines past
        the end of the buffer are dropped without error.
        """
        length = max(0, length)
        self._values = [DiagnosticLevel.NONE] * length

        dropped = 0
        for diag in diagnostics:
            if not 0 <= diag.line < length:
                dropped += 1
                continue
            self._values[diag.line] = diag.level

        if dropped:
            log.debug("dropped %d diagnostic(s) outside %d lines", dropped, length)

    def highlight(self) -> Highlights:
        return [level.code for level in self._values]


class ChangeHighlighter(Highlighter):
    def __init__(self) -> None:
        self._values: List[bool] = []

    def __len__(self) -> int:
        return len(self._values)

    def sync(self, length: int, changes: Iterable[Change]) -> None:
        """Rebuild the array for a buffer of *length* lines.

        Every line in ``[change.start, change.start + change.length)`` is
        marked; the start index is used as-is.
        """
        length = max(0, length)
        self._values = [False] * length

        for change in changes:
            first = max(0, change.start)
            last = min(length, change.start + change.length)
            for i in range(first, last):
                self._values[i] = True

    def highlight(self) -> Highlights:
        return [1 if changed else 0 for changed in self._values]

"""Render session: owns the highlighters and dispatches host events.

Calls into a session must be serialized by the caller; a render never
observes a half-applied sync because everything here runs synchronously.
"""

from __future__ import annotations

import logging
import time
from typing import List, Optional

from picomap.config.schema import PicomapConfig
from picomap.highlight.highlighter import ChangeHighlighter, DiagnosticsHighlighter
from picomap.protocol.decoder import (
    decode_sync,
    decode_view,
    to_changes,
    to_diagnostics,
    to_modifier,
)
from picomap.protocol.models import Message, MessageKind, SyncPayload, ViewPayload
from picomap.render.frame import Modifier
from picomap.render.picomap import Picomap

log = logging.getLogger(__name__)


class Session:
    def __init__(self, config: Optional[PicomapConfig] = None) -> None:
        self.config = config or PicomapConfig()
        self.diags = DiagnosticsHighlighter()
        self.changes = ChangeHighlighter()
        self.length = 0
        self.height = 0
        self.shown = False
        self.lines: List[str] = []

    def sync(self, payload: SyncPayload) -> List[str]:
        """Replace both highlighters from *payload* and render."""
        self.length = payload.length
        self.diags.sync(payload.length, to_diagnostics(payload.locations))
        self.changes.sync(payload.length, to_changes(payload.hunks))
        log.info(
            "sync: %d lines, %d location(s), %d hunk(s)",
            payload.length,
            len(payload.locations),
            len(payload.hunks),
        )
        return self._render(to_modifier(payload.view), payload.view.height)

    def resize(self, view: ViewPayload) -> List[str]:
        """Render the last synced state for new window geometry."""
        return self._render(to_modifier(view), view.height)

    def handle(self, message: Message) -> Optional[List[str]]:
        """Dispatch one host event. Returns the new lines, if any were rendered.

        Raises ``DecodeError`` when the event arguments are malformed.
        """
        if message.kind is MessageKind.SYNC:
            return self.sync(decode_sync(message.args))
        if message.kind is MessageKind.RESIZE:
            return self.resize(decode_view(message.args))
        if message.kind is MessageKind.SHOW:
            self.shown = True
            log.debug("show")
            return None
        if message.kind is MessageKind.CLOSE:
            self.shown = False
            log.debug("close")
            return None

        log.warning("unknown message: %s", message.name)
        return None

    def _render(self, modifier: Modifier, height: int) -> List[str]:
        start = time.perf_counter()
        picomap = Picomap(
            changes=self.changes.highlight(),
            diags=self.diags.highlight(),
            modifier=modifier,
            smoothing=self.config.render.smoothing,
        )
        self.height = height
        self.lines = picomap.to_strings(self.length, height)
        log.debug(
            "rendered %d row(s) in %.2fms",
            len(self.lines),
            (time.perf_counter() - start) * 1000,
        )
        return self.lines

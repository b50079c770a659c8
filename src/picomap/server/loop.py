"""JSON-lines event loop standing in for the editor RPC transport.

Each input line is one ``{"event": ..., "args": {...}}`` envelope. Each
render is answered with ``{"event": ..., "lines": [...]}``; a malformed
event is answered with ``{"event": ..., "error": ...}`` and the loop goes on.
The loop ends at end of input.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterable, TextIO

from picomap.protocol.decoder import DecodeError, decode_message
from picomap.server.session import Session

log = logging.getLogger(__name__)


def _write(out: TextIO, obj: Dict[str, Any]) -> None:
    out.write(json.dumps(obj, ensure_ascii=False) + "\n")
    out.flush()


def serve(session: Session, lines_in: Iterable[str], out: TextIO) -> int:
    """Process events until *lines_in* is exhausted. Returns the event count."""
    log.info("start event loop")
    count = 0

    for raw_line in lines_in:
        raw_line = raw_line.strip()
        if not raw_line:
            continue
        count += 1

        name = None
        try:
            try:
                raw = json.loads(raw_line)
            except json.JSONDecodeError as exc:
                raise DecodeError(f"invalid json: {exc.msg}") from exc
            except RecursionError as exc:
                raise DecodeError("invalid json: nested too deeply") from exc
            message = decode_message(raw)
            name = message.name
            lines = session.handle(message)
        except DecodeError as exc:
            log.error("failed to handle event %s: %s", name or "?", exc)
            _write(out, {"event": name, "error": str(exc)})
            continue

        if lines is not None:
            _write(out, {"event": name, "lines": lines})

    log.info("exit event loop after %d event(s)", count)
    return count

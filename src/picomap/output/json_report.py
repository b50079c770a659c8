"""JSON reporter for scripting and host integrations."""

from __future__ import annotations

import json
from typing import Any, Dict

from picomap.server.session import Session


def to_dict(session: Session) -> Dict[str, Any]:
    """Convert the last render of *session* to a JSON-serialisable dict."""
    return {
        "version": "1.0",
        "length": session.length,
        "height": session.height,
        "smoothing": session.config.render.smoothing,
        "lines": list(session.lines),
    }


def render(session: Session) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(session), indent=2, ensure_ascii=False)

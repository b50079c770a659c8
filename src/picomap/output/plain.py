"""Plain reporter: the rendered rows exactly as a host would write them."""

from __future__ import annotations

from picomap.server.session import Session


def render(session: Session) -> str:
    return "\n".join(session.lines)

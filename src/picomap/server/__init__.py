"""Server: render session and the JSON-lines event loop."""

from picomap.server.loop import serve
from picomap.server.session import Session

__all__ = ["Session", "serve"]

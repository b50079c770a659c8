"""Typed records decoded from host event payloads.

Line numbers in these records are exactly what the host sent (1-based).
Conversion to 0-based buffer indices happens in ``picomap.protocol.decoder``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class MessageKind(str, Enum):
    SYNC = "sync"
    SHOW = "show"
    RESIZE = "resize"
    CLOSE = "close"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, name: str) -> MessageKind:
        for kind in cls:
            if kind is not cls.UNKNOWN and kind.value == name:
                return kind
        return cls.UNKNOWN


@dataclass(frozen=True)
class Message:
    """One event from the host: its name and undecoded arguments."""

    kind: MessageKind
    name: str
    args: Dict[str, Any] = field(default_factory=dict)


class LocationType(str, Enum):
    UNKNOWN = "unknown"
    WARNING = "W"
    ERROR = "E"

    @classmethod
    def parse(cls, value: str) -> LocationType:
        if value == cls.WARNING.value:
            return cls.WARNING
        if value == cls.ERROR.value:
            return cls.ERROR
        return cls.UNKNOWN


@dataclass(frozen=True, slots=True)
class Location:
    """A location-list entry (linter or compiler message)."""

    lnum: int
    type: LocationType
    text: str


@dataclass(frozen=True, slots=True)
class Hunk:
    """A VCS hunk on the current side of the diff."""

    lnum: int
    length: int


@dataclass(frozen=True)
class ViewPayload:
    """Window geometry and positions needed to place the overlay markers."""

    height: int
    cursor: int
    top: int
    bottom: int
    selection: Optional[Tuple[int, int]] = None  # set in visual mode


@dataclass(frozen=True)
class SyncPayload:
    length: int
    view: ViewPayload
    locations: List[Location] = field(default_factory=list)
    hunks: List[Hunk] = field(default_factory=list)

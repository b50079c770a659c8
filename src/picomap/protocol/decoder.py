"""Decode host payloads into typed records and core events.

The host speaks in 1-based line numbers; everything handed to the
highlighters and the modifier is 0-based.

Expected shapes::

    {"event": "sync", "args": {
        "len": 120,
        "height": 40, "cursor": 12, "top": 1, "bottom": 41,
        "selection": [12, 20],                      # optional
        "locations": [{"lnum": 3, "type": "E", "text": "..."}],
        "hunks": [[10, 0, 11, 2]],                  # from, from_count, to, to_count
    }}
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Tuple

from picomap.highlight.models import Change, Diagnostic, DiagnosticLevel
from picomap.protocol.models import (
    Hunk,
    Location,
    LocationType,
    Message,
    MessageKind,
    SyncPayload,
    ViewPayload,
)
from picomap.render.frame import Frame, Modifier


class DecodeError(ValueError):
    """Raised when a host payload is missing a field or has the wrong shape."""


_MISSING = object()


def _require(fields: Mapping[str, Any], name: str, context: str) -> Any:
    value = fields.get(name, _MISSING)
    if value is _MISSING:
        raise DecodeError(f"missing {context} {name}")
    return value


def _as_int(value: Any, name: str, context: str) -> int:
    # bool is an int subclass; a host sending true/false here is a bug
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"invalid {context} {name}: {value!r}")
    if value < 0:
        raise DecodeError(f"invalid {context} {name}: {value!r} is negative")
    return value


def _as_mapping(value: Any, context: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise DecodeError(f"invalid {context} value")
    return value


def _as_list(value: Any, context: str) -> List[Any]:
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise DecodeError(f"invalid {context} field")
    return list(value)


def decode_message(raw: Any) -> Message:
    """Split a raw ``{"event": ..., "args": ...}`` envelope."""
    fields = _as_mapping(raw, "message")
    name = _require(fields, "event", "message")
    if not isinstance(name, str):
        raise DecodeError(f"invalid message event: {name!r}")
    args = fields.get("args")
    if args is None:
        args = {}
    return Message(
        kind=MessageKind.parse(name),
        name=name,
        args=dict(_as_mapping(args, "message args")),
    )


def decode_location(raw: Any) -> Location:
    fields = _as_mapping(raw, "location")
    text = _require(fields, "text", "location")
    typ = _require(fields, "type", "location")
    if not isinstance(text, str):
        raise DecodeError("invalid location text")
    if not isinstance(typ, str):
        raise DecodeError("invalid location type")
    return Location(
        lnum=_as_int(_require(fields, "lnum", "location"), "lnum", "location"),
        type=LocationType.parse(typ),
        text=text,
    )


def decode_hunk(raw: Any) -> Hunk:
    values = _as_list(raw, "hunk")
    if len(values) < 4:
        raise DecodeError(f"invalid hunk value: expected 4 items, got {len(values)}")
    return Hunk(
        lnum=_as_int(values[2], "lnum", "hunk"),
        length=_as_int(values[3], "len", "hunk"),
    )


def _decode_selection(raw: Any) -> Optional[Tuple[int, int]]:
    if raw is None:
        return None
    values = _as_list(raw, "selection")
    if len(values) != 2:
        raise DecodeError("invalid selection: expected [start, end]")
    return (
        _as_int(values[0], "start", "selection"),
        _as_int(values[1], "end", "selection"),
    )


def decode_view(raw: Any) -> ViewPayload:
    fields = _as_mapping(raw, "view")
    return ViewPayload(
        height=_as_int(_require(fields, "height", "view"), "height", "view"),
        cursor=_as_int(_require(fields, "cursor", "view"), "cursor", "view"),
        top=_as_int(_require(fields, "top", "view"), "top", "view"),
        bottom=_as_int(_require(fields, "bottom", "view"), "bottom", "view"),
        selection=_decode_selection(fields.get("selection")),
    )


def _decode_each(raw: Any, decode, context: str) -> list:
    items = []
    for index, item in enumerate(_as_list(raw, context)):
        try:
            items.append(decode(item))
        except DecodeError as exc:
            raise DecodeError(f"{context}[{index}]: {exc}") from exc
    return items


def decode_sync(raw: Any) -> SyncPayload:
    fields = _as_mapping(raw, "sync")
    return SyncPayload(
        length=_as_int(_require(fields, "len", "sync"), "len", "sync"),
        view=decode_view(fields),
        locations=_decode_each(fields.get("locations", []), decode_location, "locations"),
        hunks=_decode_each(fields.get("hunks", []), decode_hunk, "hunks"),
    )


# --- Conversion to core events ---


def _to_index(lnum: int) -> int:
    return max(lnum - 1, 0)


_LEVELS = {
    LocationType.WARNING: DiagnosticLevel.WARNING,
    LocationType.ERROR: DiagnosticLevel.DANGER,
    LocationType.UNKNOWN: DiagnosticLevel.NONE,
}


def to_diagnostic(loc: Location) -> Diagnostic:
    return Diagnostic(line=_to_index(loc.lnum), text=loc.text, level=_LEVELS[loc.type])


def to_change(hunk: Hunk) -> Change:
    # lnum 0 is a deletion above the first line
    return Change(start=_to_index(hunk.lnum), length=hunk.length)


def to_diagnostics(locations: Iterable[Location]) -> List[Diagnostic]:
    return [to_diagnostic(loc) for loc in locations]


def to_changes(hunks: Iterable[Hunk]) -> List[Change]:
    return [to_change(hunk) for hunk in hunks]


def to_modifier(view: ViewPayload) -> Modifier:
    select_frame = None
    if view.selection is not None:
        start, end = view.selection
        select_frame = Frame(top=_to_index(start), bottom=_to_index(end))
    return Modifier(
        cursor=_to_index(view.cursor),
        visible_frame=Frame(top=_to_index(view.top), bottom=_to_index(view.bottom)),
        select_frame=select_frame,
    )

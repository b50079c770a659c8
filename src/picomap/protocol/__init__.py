"""Host protocol: event envelopes, payload models, decoding."""

from picomap.protocol.decoder import (
    DecodeError,
    decode_hunk,
    decode_location,
    decode_message,
    decode_sync,
    decode_view,
    to_change,
    to_changes,
    to_diagnostic,
    to_diagnostics,
    to_modifier,
)
from picomap.protocol.models import (
    Hunk,
    Location,
    LocationType,
    Message,
    MessageKind,
    SyncPayload,
    ViewPayload,
)

__all__ = [
    "DecodeError",
    "Hunk",
    "Location",
    "LocationType",
    "Message",
    "MessageKind",
    "SyncPayload",
    "ViewPayload",
    "decode_hunk",
    "decode_location",
    "decode_message",
    "decode_sync",
    "decode_view",
    "to_change",
    "to_changes",
    "to_diagnostic",
    "to_diagnostics",
    "to_modifier",
]

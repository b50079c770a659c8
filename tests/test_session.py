"""Tests for the render session and the JSON-lines event loop."""

import io
import json

import pytest

from picomap.config.schema import PicomapConfig, RenderConfig
from picomap.protocol.decoder import DecodeError, decode_sync
from picomap.protocol.models import Message, MessageKind
from picomap.server.loop import serve
from picomap.server.session import Session


def _sync(args) -> Message:
    return Message(kind=MessageKind.SYNC, name="sync", args=args)


def _resize(args) -> Message:
    return Message(kind=MessageKind.RESIZE, name="resize", args=args)


class TestSync:
    def test_renders_rows(self, sample_sync_args, sample_sync_rows):
        session = Session()
        assert session.handle(_sync(sample_sync_args)) == sample_sync_rows
        assert session.lines == sample_sync_rows
        assert session.length == 10
        assert session.height == 5

    def test_highlighters_synced(self, sample_sync_args):
        session = Session()
        session.sync(decode_sync(sample_sync_args))
        assert session.changes.highlight() == [0, 1, 1, 1, 0, 0, 0, 0, 0, 0]
        assert session.diags.highlight() == [0, 0, 2, 0, 0, 0, 0, 1, 0, 0]

    def test_out_of_range_events_dropped(self, sample_sync_args):
        sample_sync_args["locations"].append({"lnum": 400, "type": "E", "text": ""})
        sample_sync_args["hunks"].append([0, 0, 9, 20])
        session = Session()
        session.handle(_sync(sample_sync_args))
        assert len(session.diags) == 10
        assert session.changes.highlight()[8:] == [1, 1]

    def test_empty_buffer(self, sample_sync_args):
        sample_sync_args["len"] = 0
        assert Session().handle(_sync(sample_sync_args)) == []

    def test_zero_height(self, sample_sync_args):
        sample_sync_args["height"] = 0
        assert Session().handle(_sync(sample_sync_args)) == []

    def test_malformed_args_raise(self):
        with pytest.raises(DecodeError):
            Session().handle(_sync({"len": "ten"}))


class TestResize:
    def test_rerenders_last_sync(self, sample_sync_args):
        session = Session()
        session.handle(_sync(sample_sync_args))
        lines = session.handle(_resize({"height": 10, "cursor": 1, "top": 1, "bottom": 5}))
        assert len(lines) == 10
        assert lines[0] == "  0000c"
        assert lines[2] == "▌▖0102v"
        assert lines[7] == " ▖0001 "

    def test_fresh_modifier(self, sample_sync_args):
        session = Session()
        session.handle(_sync(sample_sync_args))
        lines = session.handle(_resize({
            "height": 10, "cursor": 10, "top": 1, "bottom": 5, "selection": [7, 9],
        }))
        assert [row[-1] for row in lines] == ["v", "v", "v", "v", "v", " ", "s", "s", "s", "c"]

    def test_before_any_sync(self):
        session = Session()
        assert session.handle(_resize({"height": 10, "cursor": 1, "top": 1, "bottom": 5})) == []


class TestLifecycle:
    def test_show_and_close(self):
        session = Session()
        assert session.handle(Message(kind=MessageKind.SHOW, name="show")) is None
        assert session.shown is True
        assert session.handle(Message(kind=MessageKind.CLOSE, name="close")) is None
        assert session.shown is False

    def test_unknown_is_ignored(self, caplog):
        session = Session()
        with caplog.at_level("WARNING"):
            result = session.handle(Message(kind=MessageKind.UNKNOWN, name="scroll"))
        assert result is None
        assert "scroll" in caplog.text

    def test_smoothing_from_config(self):
        cfg = PicomapConfig(render=RenderConfig(smoothing="symmetric"))
        session = Session(cfg)
        lines = session.handle(_sync({
            "len": 2, "height": 4, "cursor": 1, "top": 1, "bottom": 1, "hunks": [[0, 0, 1, 1]],
        }))
        assert [row[0] for row in lines] == ["▌", "▌", "▌", "▘"]


class TestServe:
    def test_event_stream(self, sample_sync_args, sample_sync_rows):
        events = [
            {"event": "show"},
            {"event": "sync", "args": sample_sync_args},
            {"event": "resize", "args": {"height": 2, "cursor": 1, "top": 1, "bottom": 5}},
            {"event": "close"},
        ]
        stdin = io.StringIO("\n".join(json.dumps(e) for e in events) + "\n")
        stdout = io.StringIO()

        count = serve(Session(), stdin, stdout)

        replies = [json.loads(line) for line in stdout.getvalue().splitlines()]
        assert count == 4
        assert [r["event"] for r in replies] == ["sync", "resize"]
        assert replies[0]["lines"] == sample_sync_rows
        assert len(replies[1]["lines"]) == 2

    def test_errors_are_reported_and_loop_continues(self, sample_sync_args):
        stdin = io.StringIO(
            "not json\n"
            '{"event": "sync", "args": {"len": -1}}\n'
            "\n"
            + json.dumps({"event": "sync", "args": sample_sync_args})
            + "\n"
        )
        stdout = io.StringIO()

        count = serve(Session(), stdin, stdout)

        replies = [json.loads(line) for line in stdout.getvalue().splitlines()]
        assert count == 3
        assert replies[0]["event"] is None
        assert "invalid json" in replies[0]["error"]
        assert replies[1]["event"] == "sync"
        assert "len" in replies[1]["error"]
        assert len(replies[2]["lines"]) == 5

    def test_deeply_nested_line_is_reported(self, sample_sync_args):
        stdin = io.StringIO(
            "[" * 100000
            + "\n"
            + json.dumps({"event": "sync", "args": sample_sync_args})
            + "\n"
        )
        stdout = io.StringIO()

        count = serve(Session(), stdin, stdout)

        replies = [json.loads(line) for line in stdout.getvalue().splitlines()]
        assert count == 2
        assert replies[0]["event"] is None
        assert "nested too deeply" in replies[0]["error"]
        assert len(replies[1]["lines"]) == 5

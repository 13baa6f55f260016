"""Tests for event script parsing."""

from __future__ import annotations

import json

import pytest

from world_graph.core.events import (
    NodeEnter,
    PointerMove,
    ResetView,
    WheelEvent,
    load_events,
    parse_events,
)
from world_graph.core.exceptions import EventScriptError


class TestParseEvents:
    def test_discriminated_by_kind(self):
        events = parse_events(
            [
                {"kind": "wheel", "delta_y": -120},
                {"kind": "pointer_move", "x": 3, "y": 4},
                {"kind": "node_enter", "node_id": "a"},
                {"kind": "reset_view"},
            ]
        )

        assert isinstance(events[0], WheelEvent)
        assert events[0].delta_y == -120
        assert isinstance(events[1], PointerMove)
        assert events[1].pos == (3, 4)
        assert events[2] == NodeEnter(node_id="a")
        assert isinstance(events[3], ResetView)

    def test_empty_script(self):
        assert parse_events([]) == []

    @pytest.mark.parametrize(
        "bad",
        [
            [{"kind": "teleport"}],
            [{"kind": "wheel"}],
            [{"kind": "node_enter"}],
            {"kind": "wheel", "delta_y": 1},
        ],
    )
    def test_invalid_scripts(self, bad):
        with pytest.raises(EventScriptError) as exc_info:
            parse_events(bad)
        assert exc_info.value.context["errors"]


class TestLoadEvents:
    def test_load_from_file(self, tmp_path):
        path = tmp_path / "events.json"
        path.write_text(json.dumps([{"kind": "zoom_in"}, {"kind": "pointer_up"}]))

        events = load_events(path)

        assert [e.kind for e in events] == ["zoom_in", "pointer_up"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(EventScriptError):
            load_events(tmp_path / "missing.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "events.json"
        path.write_text("[{")

        with pytest.raises(EventScriptError):
            load_events(path)

import dataclasses
import logging

import pytest

from avlstep.tracing import (
    REPLACE,
    ROTATE_LEFT_RIGHT,
    TraceEvent,
    TraceRecorder,
)


def test_messages_match_step_kind():
    assert TraceEvent.inserted(5).message == "✅ Inserting 5"
    assert TraceEvent.traversed(5, 9, "left").message == "🔍 Traversing left from 9"
    assert TraceEvent.duplicate(5).message == "⚠️ 5 already exists"
    assert TraceEvent.deleting(5).message == "🗑️ Deleting 5"
    assert TraceEvent.replaced(20, 25).message == "🔄 Replacing 20 with 25"
    assert TraceEvent.rotated("Right", 30).message == "🔄 Right rotation at 30"
    assert TraceEvent.not_found(5).message == "❌ 5 not found"


def test_to_dict_only_carries_kind_fields():
    assert TraceEvent.inserted(5).to_dict() == {
        "type": "insert",
        "value": 5,
        "message": "✅ Inserting 5",
    }
    assert TraceEvent.traversed(5, 9, "right").to_dict() == {
        "type": "traverse",
        "value": 5,
        "node": 9,
        "direction": "right",
        "message": "🔍 Traversing right from 9",
    }
    assert TraceEvent.replaced(20, 25).to_dict() == {
        "type": "replace",
        "from": 20,
        "to": 25,
        "message": "🔄 Replacing 20 with 25",
    }
    assert TraceEvent.rotated(ROTATE_LEFT_RIGHT, 30).to_dict() == {
        "type": "rotation",
        "rotation": "Left-Right",
        "node": 30,
        "message": "🔄 Left-Right rotation at 30",
    }


def test_focus_key_prefers_node_then_key():
    assert TraceEvent.traversed(5, 9, "left").focus_key == 9
    assert TraceEvent.rotated("Left", 0).focus_key == 0
    assert TraceEvent.inserted(5).focus_key == 5
    assert TraceEvent.replaced(20, 25).focus_key is None


def test_events_are_immutable():
    event = TraceEvent.inserted(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.key = 2


@pytest.mark.parametrize(
    "build",
    [
        lambda: TraceEvent("split"),
        lambda: TraceEvent.traversed(1, 2, "up"),
        lambda: TraceEvent.rotated("Double", 2),
    ],
)
def test_unknown_vocabulary_is_rejected(build):
    with pytest.raises(ValueError):
        build()


def test_recorder_keeps_emission_order():
    rec = TraceRecorder()
    rec.deleting(20)
    rec.replaced(20, 25)
    rec.rotated("Left", 30)

    assert [e.kind for e in rec] == ["delete", REPLACE, "rotation"]
    assert len(rec) == 3
    assert rec.rotation_count == 1


def test_recorder_events_is_a_copy():
    rec = TraceRecorder()
    rec.inserted(1)

    events = rec.events
    events.append(TraceEvent.inserted(2))

    assert len(rec) == 1


def test_recorder_dump_logs_each_event(caplog):
    rec = TraceRecorder()
    rec.traversed(3, 7, "left")
    rec.inserted(3)

    with caplog.at_level(logging.INFO, logger="avlstep.tracing.recorder"):
        rec.dump()

    assert "TraceRecorder: 2 events, 0 rotations" in caplog.text
    assert "E0" in caplog.text and "Traversing left from 7" in caplog.text
    assert "E1" in caplog.text and "Inserting 3" in caplog.text

"""
avlstep.tracing.events — the step vocabulary emitted by the tree engine.

Each :class:`TraceEvent` describes one decision taken during an insert or a
delete. Only the fields relevant to an event's ``kind`` are set::

    insert     key
    traverse   key, node, direction
    duplicate  key
    delete     key
    replace    from_key, to_key
    rotation   rotation, node
    notfound   key
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

__all__ = [
    "DELETE",
    "DIRECTIONS",
    "DUPLICATE",
    "EVENT_KINDS",
    "INSERT",
    "LEFT",
    "NOTFOUND",
    "REPLACE",
    "RIGHT",
    "ROTATE_LEFT",
    "ROTATE_LEFT_RIGHT",
    "ROTATE_RIGHT",
    "ROTATE_RIGHT_LEFT",
    "ROTATION",
    "ROTATION_KINDS",
    "TRAVERSE",
    "TraceEvent",
]

INSERT = "insert"
TRAVERSE = "traverse"
DUPLICATE = "duplicate"
DELETE = "delete"
REPLACE = "replace"
ROTATION = "rotation"
NOTFOUND = "notfound"

EVENT_KINDS = frozenset({INSERT, TRAVERSE, DUPLICATE, DELETE, REPLACE, ROTATION, NOTFOUND})

LEFT = "left"
RIGHT = "right"

DIRECTIONS = frozenset({LEFT, RIGHT})

ROTATE_RIGHT = "Right"
ROTATE_LEFT = "Left"
ROTATE_LEFT_RIGHT = "Left-Right"
ROTATE_RIGHT_LEFT = "Right-Left"

ROTATION_KINDS = frozenset(
    {ROTATE_RIGHT, ROTATE_LEFT, ROTATE_LEFT_RIGHT, ROTATE_RIGHT_LEFT}
)


@dataclass(frozen=True)
class TraceEvent:
    """One recorded micro-step of a tree mutation.

    Attributes
    ----------
    kind : str
        One of :data:`EVENT_KINDS`.
    key : Any
        The key being inserted, searched for or deleted.
    node : Any
        Key of the node the step happened at (``traverse`` and ``rotation``).
    direction : str | None
        ``"left"`` or ``"right"`` for ``traverse``.
    rotation : str | None
        One of :data:`ROTATION_KINDS` for ``rotation``.
    from_key, to_key : Any
        Old and new key of the overwritten node for ``replace``.
    message : str
        Human-readable description shown during playback.
    """

    kind: str
    key: Any = None
    node: Any = None
    direction: Optional[str] = None
    rotation: Optional[str] = None
    from_key: Any = None
    to_key: Any = None
    message: str = ""

    def __post_init__(self):
        if self.kind not in EVENT_KINDS:
            raise ValueError(f"Unknown event kind {self.kind!r}")

    # ---- constructors ----------------------------------------------------

    @classmethod
    def inserted(cls, key: Any) -> TraceEvent:
        return cls(INSERT, key=key, message=f"✅ Inserting {key}")

    @classmethod
    def traversed(cls, key: Any, node: Any, direction: str) -> TraceEvent:
        if direction not in DIRECTIONS:
            raise ValueError(f"Unknown direction {direction!r}")
        return cls(
            TRAVERSE,
            key=key,
            node=node,
            direction=direction,
            message=f"🔍 Traversing {direction} from {node}",
        )

    @classmethod
    def duplicate(cls, key: Any) -> TraceEvent:
        return cls(DUPLICATE, key=key, message=f"⚠️ {key} already exists")

    @classmethod
    def deleting(cls, key: Any) -> TraceEvent:
        return cls(DELETE, key=key, message=f"🗑️ Deleting {key}")

    @classmethod
    def replaced(cls, from_key: Any, to_key: Any) -> TraceEvent:
        return cls(
            REPLACE,
            from_key=from_key,
            to_key=to_key,
            message=f"🔄 Replacing {from_key} with {to_key}",
        )

    @classmethod
    def rotated(cls, rotation: str, node: Any) -> TraceEvent:
        if rotation not in ROTATION_KINDS:
            raise ValueError(f"Unknown rotation kind {rotation!r}")
        return cls(
            ROTATION,
            node=node,
            rotation=rotation,
            message=f"🔄 {rotation} rotation at {node}",
        )

    @classmethod
    def not_found(cls, key: Any) -> TraceEvent:
        return cls(NOTFOUND, key=key, message=f"❌ {key} not found")

    # ---- views -----------------------------------------------------------

    @property
    def focus_key(self) -> Any:
        """Key of the node a renderer should highlight for this step."""
        if self.node is not None:
            return self.node
        return self.key

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form: ``type`` plus the fields this kind carries."""
        out: dict[str, Any] = {"type": self.kind}
        if self.kind == REPLACE:
            out["from"] = self.from_key
            out["to"] = self.to_key
        elif self.kind == ROTATION:
            out["rotation"] = self.rotation
            out["node"] = self.node
        else:
            out["value"] = self.key
            if self.kind == TRAVERSE:
                out["node"] = self.node
                out["direction"] = self.direction
        out["message"] = self.message
        return out

    def __repr__(self) -> str:
        return f"TraceEvent({self.kind}: {self.message})"

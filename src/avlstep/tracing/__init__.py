"""Step events and the per-call trace recorder."""

from .events import (
    DELETE,
    DIRECTIONS,
    DUPLICATE,
    EVENT_KINDS,
    INSERT,
    LEFT,
    NOTFOUND,
    REPLACE,
    RIGHT,
    ROTATE_LEFT,
    ROTATE_LEFT_RIGHT,
    ROTATE_RIGHT,
    ROTATE_RIGHT_LEFT,
    ROTATION,
    ROTATION_KINDS,
    TRAVERSE,
    TraceEvent,
)
from .recorder import TraceRecorder

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
    "TraceRecorder",
]

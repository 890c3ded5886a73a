from __future__ import annotations

import logging
from typing import Any, Iterator

from .events import ROTATION, TraceEvent

logger = logging.getLogger(__name__)

__all__ = ["TraceRecorder"]


class TraceRecorder:
    """
    Ordered sink for the events of a single insert or delete call.

    A fresh recorder is created per call and passed down the recursion; the
    caller takes ownership of :attr:`events` once the call returns.
    """

    def __init__(self):
        self._events: list[TraceEvent] = []

    def record(self, event: TraceEvent) -> TraceEvent:
        self._events.append(event)
        return event

    # ---- one helper per event kind -----------------------------------------

    def inserted(self, key: Any) -> TraceEvent:
        return self.record(TraceEvent.inserted(key))

    def traversed(self, key: Any, node: Any, direction: str) -> TraceEvent:
        return self.record(TraceEvent.traversed(key, node, direction))

    def duplicate(self, key: Any) -> TraceEvent:
        return self.record(TraceEvent.duplicate(key))

    def deleting(self, key: Any) -> TraceEvent:
        return self.record(TraceEvent.deleting(key))

    def replaced(self, from_key: Any, to_key: Any) -> TraceEvent:
        return self.record(TraceEvent.replaced(from_key, to_key))

    def rotated(self, rotation: str, node: Any) -> TraceEvent:
        return self.record(TraceEvent.rotated(rotation, node))

    def not_found(self, key: Any) -> TraceEvent:
        return self.record(TraceEvent.not_found(key))

    # ---- access --------------------------------------------------------------

    @property
    def events(self) -> list[TraceEvent]:
        return list(self._events)

    @property
    def rotation_count(self) -> int:
        return sum(1 for e in self._events if e.kind == ROTATION)

    def dump(self) -> None:
        """Log the recorded sequence, one line per step."""
        bar = "═" * 60
        logger.info("\n%s", bar)
        logger.info(
            "TraceRecorder: %d events, %d rotations",
            len(self._events),
            self.rotation_count,
        )
        logger.info("%s\n", bar)
        for i, event in enumerate(self._events):
            logger.info("E%d  %-9s %s", i, event.kind, event.message)

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[TraceEvent]:
        return iter(self._events)

    def __repr__(self) -> str:
        return f"TraceRecorder({len(self._events)} events)"

"""
avlstep.playback — headless step-by-step replay of tree traces.

A :class:`Session` mirrors what an interactive front end does with the
engine: validate the typed key, mutate the tree, then hand the resulting
trace to a :class:`StepPlayer` which the front end advances on its own
timer (``PlaybackConfig.speed_ms`` is carried for that purpose only).

Example::

    session = Session()
    session.insert("30")
    session.insert("20")
    session.insert("10")
    while (event := session.player.advance()) is not None:
        print(event.message, session.player.highlight_key)
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from .tracing import ROTATION, TraceEvent
from .tree import AVLTree

logger = logging.getLogger(__name__)

__all__ = [
    "PlaybackConfig",
    "PlaybackStats",
    "Session",
    "StepPlayer",
    "parse_key",
]


@dataclass
class PlaybackConfig:
    """Playback speed and the key range accepted by :func:`parse_key`."""

    speed_ms: int = 1000
    min_key: int = 0
    max_key: int = 99


@dataclass
class PlaybackStats:
    height: int
    current_step: int
    total_steps: int
    rotations: int
    playing: bool


def parse_key(raw: Any, config: PlaybackConfig | None = None, bounded: bool = True) -> int:
    """
    Turn user input into an integer key.

    With ``bounded`` the key must also fall inside
    ``[config.min_key, config.max_key]``. Raises ``ValueError`` otherwise.
    """
    cfg = config or PlaybackConfig()
    if bounded:
        message = f"Please enter a valid number between {cfg.min_key} and {cfg.max_key}"
    else:
        message = "Please enter a valid number"

    if isinstance(raw, bool):
        raise ValueError(message)
    if isinstance(raw, int):
        value = raw
    else:
        try:
            value = int(str(raw).strip())
        except ValueError as exc:
            raise ValueError(message) from exc

    if bounded and not cfg.min_key <= value <= cfg.max_key:
        raise ValueError(message)
    return value


class StepPlayer:
    """Cursor over one trace; the caller decides when to call :meth:`advance`."""

    def __init__(self, config: PlaybackConfig | None = None):
        self.config = config or PlaybackConfig()
        self.events: list[TraceEvent] = []
        self.current_step = 0
        self.playing = False
        self.current: Optional[TraceEvent] = None

    def load(self, events: Sequence[TraceEvent]) -> None:
        self.events = list(events)
        self.current_step = 0
        self.current = None
        self.playing = True

    def clear(self) -> None:
        self.events = []
        self.current_step = 0
        self.current = None
        self.playing = False

    def advance(self) -> Optional[TraceEvent]:
        """Show the next step, or stop and return ``None`` when paused or done."""
        if not self.playing or self.finished:
            self.stop()
            return None
        event = self.events[self.current_step]
        self.current = event
        self.current_step += 1
        return event

    def toggle(self) -> bool:
        self.playing = not self.playing
        return self.playing

    def stop(self) -> None:
        self.playing = False
        self.current = None

    @property
    def finished(self) -> bool:
        return self.current_step >= len(self.events)

    @property
    def total_steps(self) -> int:
        return len(self.events)

    @property
    def rotation_count(self) -> int:
        return sum(1 for e in self.events if e.kind == ROTATION)

    @property
    def highlight_key(self) -> Any:
        return self.current.focus_key if self.current is not None else None

    @property
    def message(self) -> str:
        return self.current.message if self.current is not None else ""

    def __repr__(self) -> str:
        return f"StepPlayer({self.current_step}/{self.total_steps}, playing={self.playing})"


class Session:
    """An :class:`AVLTree` plus the player replaying its latest trace."""

    def __init__(self, config: PlaybackConfig | None = None, rng: random.Random | None = None):
        self.config = config or PlaybackConfig()
        self.tree = AVLTree()
        self.player = StepPlayer(self.config)
        self._rng = rng or random.Random()

    def insert(self, raw: Any) -> list[TraceEvent]:
        try:
            key = parse_key(raw, self.config, bounded=True)
        except ValueError:
            logger.warning("Session.insert: rejected input %r", raw)
            raise
        events = self.tree.insert(key)
        self.player.load(events)
        logger.info("Session.insert: key=%d steps=%d", key, len(events))
        return events

    def delete(self, raw: Any) -> list[TraceEvent]:
        try:
            key = parse_key(raw, self.config, bounded=False)
        except ValueError:
            logger.warning("Session.delete: rejected input %r", raw)
            raise
        events = self.tree.delete(key)
        self.player.load(events)
        logger.info("Session.delete: key=%d steps=%d", key, len(events))
        return events

    def random_key(self) -> int:
        return self._rng.randint(self.config.min_key, self.config.max_key)

    def reset(self) -> None:
        self.tree = AVLTree()
        self.player.clear()
        logger.info("Session.reset: tree cleared")

    def stats(self) -> PlaybackStats:
        return PlaybackStats(
            height=self.tree.height,
            current_step=self.player.current_step,
            total_steps=self.player.total_steps,
            rotations=self.player.rotation_count,
            playing=self.player.playing,
        )

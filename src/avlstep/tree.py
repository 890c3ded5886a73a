"""
avlstep.tree — AVL tree engine with step tracing.

Every mutation threads a :class:`~avlstep.tracing.TraceRecorder` through the
recursion and returns the rebuilt subtree root, so each call produces::

    (new_root, [TraceEvent, ...])

The events are appended in the exact order the engine acts on the tree.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from .tracing import (
    LEFT,
    RIGHT,
    ROTATE_LEFT,
    ROTATE_LEFT_RIGHT,
    ROTATE_RIGHT,
    ROTATE_RIGHT_LEFT,
    TraceEvent,
    TraceRecorder,
)

logger = logging.getLogger(__name__)

__all__ = [
    "AVLNode",
    "AVLTree",
    "balance_factor",
    "delete",
    "height",
    "insert",
    "min_value_node",
    "rotate_left",
    "rotate_right",
]


@dataclass(eq=False)
class AVLNode:
    """A tree node. ``height`` counts nodes on the longest downward path."""

    key: Any
    left: Optional[AVLNode] = None
    right: Optional[AVLNode] = None
    height: int = 1

    def __repr__(self) -> str:
        return f"AVLNode(key={self.key!r}, height={self.height})"


# ---------------------------------------------------------------------------
# Read-only queries
# ---------------------------------------------------------------------------


def height(node: Optional[AVLNode]) -> int:
    return node.height if node is not None else 0


def balance_factor(node: Optional[AVLNode]) -> int:
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def _update_height(node: AVLNode) -> None:
    node.height = 1 + max(height(node.left), height(node.right))


def min_value_node(node: AVLNode) -> AVLNode:
    current = node
    while current.left is not None:
        current = current.left
    return current


# ---------------------------------------------------------------------------
# Rotations
# ---------------------------------------------------------------------------


def rotate_right(y: AVLNode) -> AVLNode:
    """Promote ``y.left``; returns the new subtree root."""
    x = y.left
    t2 = x.right
    x.right = y
    y.left = t2
    _update_height(y)
    _update_height(x)
    return x


def rotate_left(x: AVLNode) -> AVLNode:
    """Promote ``x.right``; returns the new subtree root."""
    y = x.right
    t2 = y.left
    y.left = x
    x.right = t2
    _update_height(x)
    _update_height(y)
    return y


# ---------------------------------------------------------------------------
# Insert
# ---------------------------------------------------------------------------


def _insert(node: Optional[AVLNode], key: Any, rec: TraceRecorder) -> AVLNode:
    if node is None:
        rec.inserted(key)
        return AVLNode(key)

    if key < node.key:
        rec.traversed(key, node.key, LEFT)
        node.left = _insert(node.left, key, rec)
    elif key > node.key:
        rec.traversed(key, node.key, RIGHT)
        node.right = _insert(node.right, key, rec)
    else:
        # Matched node is left untouched; only ancestors get re-heighted.
        rec.duplicate(key)
        return node

    _update_height(node)
    balance = balance_factor(node)

    if balance > 1 and key < node.left.key:
        rec.rotated(ROTATE_RIGHT, node.key)
        return rotate_right(node)

    if balance < -1 and key > node.right.key:
        rec.rotated(ROTATE_LEFT, node.key)
        return rotate_left(node)

    if balance > 1 and key > node.left.key:
        rec.rotated(ROTATE_LEFT_RIGHT, node.key)
        node.left = rotate_left(node.left)
        return rotate_right(node)

    if balance < -1 and key < node.right.key:
        rec.rotated(ROTATE_RIGHT_LEFT, node.key)
        node.right = rotate_right(node.right)
        return rotate_left(node)

    return node


def insert(root: Optional[AVLNode], key: Any) -> tuple[AVLNode, list[TraceEvent]]:
    """Insert *key* below *root*; returns the new root and the call's trace."""
    rec = TraceRecorder()
    new_root = _insert(root, key, rec)
    logger.debug(
        "insert %r: %d events, %d rotations", key, len(rec), rec.rotation_count
    )
    return new_root, rec.events


# ---------------------------------------------------------------------------
# Delete
# ---------------------------------------------------------------------------


def _delete(node: Optional[AVLNode], key: Any, rec: TraceRecorder) -> Optional[AVLNode]:
    if node is None:
        rec.not_found(key)
        return None

    if key < node.key:
        rec.traversed(key, node.key, LEFT)
        node.left = _delete(node.left, key, rec)
    elif key > node.key:
        rec.traversed(key, node.key, RIGHT)
        node.right = _delete(node.right, key, rec)
    else:
        rec.deleting(key)
        if node.left is None or node.right is None:
            node = node.left if node.left is not None else node.right
        else:
            successor = min_value_node(node.right)
            rec.replaced(node.key, successor.key)
            # Key overwrite: the successor node is the one that gets unlinked.
            node.key = successor.key
            node.right = _delete(node.right, successor.key, rec)

    if node is None:
        return None

    _update_height(node)
    balance = balance_factor(node)

    if balance > 1 and balance_factor(node.left) >= 0:
        rec.rotated(ROTATE_RIGHT, node.key)
        return rotate_right(node)

    if balance > 1 and balance_factor(node.left) < 0:
        rec.rotated(ROTATE_LEFT_RIGHT, node.key)
        node.left = rotate_left(node.left)
        return rotate_right(node)

    if balance < -1 and balance_factor(node.right) <= 0:
        rec.rotated(ROTATE_LEFT, node.key)
        return rotate_left(node)

    if balance < -1 and balance_factor(node.right) > 0:
        rec.rotated(ROTATE_RIGHT_LEFT, node.key)
        node.right = rotate_right(node.right)
        return rotate_left(node)

    return node


def delete(root: Optional[AVLNode], key: Any) -> tuple[Optional[AVLNode], list[TraceEvent]]:
    """Remove *key* from below *root*; returns the new root and the call's trace."""
    rec = TraceRecorder()
    new_root = _delete(root, key, rec)
    logger.debug(
        "delete %r: %d events, %d rotations", key, len(rec), rec.rotation_count
    )
    return new_root, rec.events


# ---------------------------------------------------------------------------
# AVLTree — owner of the root link
# ---------------------------------------------------------------------------


class AVLTree:
    """
    Owns the root of an AVL tree.

    ``insert`` and ``delete`` are the only mutators; each returns the list of
    :class:`TraceEvent` produced by that call.
    """

    def __init__(self):
        self.root: Optional[AVLNode] = None

    def insert(self, key: Any) -> list[TraceEvent]:
        self.root, events = insert(self.root, key)
        return events

    def delete(self, key: Any) -> list[TraceEvent]:
        self.root, events = delete(self.root, key)
        return events

    @property
    def height(self) -> int:
        return height(self.root)

    @property
    def is_empty(self) -> bool:
        return self.root is None

    def __repr__(self) -> str:
        root = self.root.key if self.root is not None else None
        return f"AVLTree(root={root!r}, height={self.height})"

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from ..tree import AVLNode, balance_factor
from .types import RenderConfig


def compute_positions(
    root: Optional[AVLNode], width: float, config: RenderConfig | None = None
) -> dict[Any, np.ndarray]:
    """
    Place every node on a 2D canvas, keyed by node key.

    The root sits at ``(width / 2, top_margin)``. Each level moves down by
    ``vertical_gap`` and children are offset sideways by
    ``horizontal_gap / level_shrink ** level`` so deeper levels pack tighter.
    """
    cfg = config or RenderConfig()
    positions: dict[Any, np.ndarray] = {}
    if root is None:
        return positions

    stack: list[tuple[AVLNode, np.ndarray, int]] = [
        (root, np.array([width / 2.0, cfg.top_margin]), 0)
    ]
    while stack:
        node, pos, level = stack.pop()
        positions[node.key] = pos
        gap = cfg.horizontal_gap / cfg.level_shrink**level
        if node.right is not None:
            stack.append((node.right, pos + np.array([gap, cfg.vertical_gap]), level + 1))
        if node.left is not None:
            stack.append((node.left, pos + np.array([-gap, cfg.vertical_gap]), level + 1))
    return positions


def tree_edges(root: Optional[AVLNode]) -> list[tuple[Any, Any]]:
    """Parent/child key pairs in pre-order, left edge before right edge."""
    edges: list[tuple[Any, Any]] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                edges.append((node.key, child.key))
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return edges


def node_color(
    node: AVLNode, highlight_key: Any = None, config: RenderConfig | None = None
) -> str:
    # Highlight is matched by key; keys are unique within a tree.
    cfg = config or RenderConfig()
    if highlight_key is not None and node.key == highlight_key:
        return cfg.highlight_color
    if abs(balance_factor(node)) > 1:
        return cfg.unbalanced_color
    return cfg.balanced_color

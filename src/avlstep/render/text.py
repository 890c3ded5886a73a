from __future__ import annotations

from typing import Any, Optional

from ..tree import AVLNode, balance_factor
from .types import CURRENT_MARKER, EMPTY_LABEL


def render_tree_text(
    root: Optional[AVLNode],
    highlight_key: Any = None,
    indent: int = 0,
    prefix: str = "",
) -> str:
    if root is None and not prefix:
        return " " * indent + EMPTY_LABEL
    return "\n".join(_render_lines(root, highlight_key, indent, prefix))


def _render_lines(
    node: Optional[AVLNode], highlight_key: Any, indent: int, prefix: str
) -> list[str]:
    pad = " " * indent
    if node is None:
        return [f"{pad}{prefix}∅"]

    marker = CURRENT_MARKER if highlight_key is not None and node.key == highlight_key else ""
    lines = [
        f"{pad}{prefix}({node.key}) BF:{balance_factor(node)} H:{node.height}{marker}"
    ]
    if node.left is None and node.right is None:
        return lines
    lines.extend(_render_lines(node.left, highlight_key, indent + 4, "left: "))
    lines.extend(_render_lines(node.right, highlight_key, indent + 4, "right: "))
    return lines

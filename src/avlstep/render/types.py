from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RenderConfig:
    """Layout spacing and node decoration colours for tree drawings."""

    horizontal_gap: float = 100.0
    vertical_gap: float = 100.0
    top_margin: float = 60.0
    level_shrink: float = 1.5
    highlight_color: str = "#fbbf24"
    unbalanced_color: str = "#ef4444"
    balanced_color: str = "#22c55e"
    edge_color: str = "#667eea"


CURRENT_MARKER = "  ◀━━ CURRENT"
EMPTY_LABEL = "(empty tree)"

__version__ = "0.1.0"

from .tracing import (
    EVENT_KINDS,
    ROTATION_KINDS,
    TraceEvent,
    TraceRecorder,
)
from .tree import (
    AVLNode,
    AVLTree,
    balance_factor,
    delete,
    height,
    insert,
    min_value_node,
    rotate_left,
    rotate_right,
)
from .playback import (
    PlaybackConfig,
    PlaybackStats,
    Session,
    StepPlayer,
    parse_key,
)
from .render import (
    RenderConfig,
    compute_positions,
    node_color,
    render_tree_text,
    tree_edges,
)

__all__ = [
    "AVLNode",
    "AVLTree",
    "EVENT_KINDS",
    "PlaybackConfig",
    "PlaybackStats",
    "ROTATION_KINDS",
    "RenderConfig",
    "Session",
    "StepPlayer",
    "TraceEvent",
    "TraceRecorder",
    "balance_factor",
    "compute_positions",
    "delete",
    "height",
    "insert",
    "min_value_node",
    "node_color",
    "parse_key",
    "render_tree_text",
    "rotate_left",
    "rotate_right",
    "tree_edges",
]

from .layout import compute_positions, node_color, tree_edges
from .text import render_tree_text
from .types import RenderConfig

__all__ = [
    'RenderConfig',
    'compute_positions',
    'node_color',
    'render_tree_text',
    'tree_edges',
]

from __future__ import annotations

from .backend import DrawBackend, render_with
from .graph_renderer import draw_graph

__all__ = ["DrawBackend", "render_with", "draw_graph"]

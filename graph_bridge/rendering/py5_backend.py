from __future__ import annotations

import logging

from py5 import Sketch

from graph_bridge.config import RenderStyle
from graph_bridge.errors import RenderBackendError
from graph_bridge.layout import GeometrySnapshot, ScreenLayout, compute_screen_layout
from graph_bridge.rendering.graph_renderer import draw_graph

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Graph draw py5"


class GraphSketch(Sketch):
    def __init__(self, snapshot: GeometrySnapshot, style: RenderStyle, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._snapshot = snapshot
        self._style = style
        self._layout: ScreenLayout | None = None
        self._last_size: tuple[int, int] = (-1, -1)

    def settings(self) -> None:
        width, height = self._style.window_size
        self.size(width, height, self.P2D)

    def setup(self) -> None:
        """Initialize the window and enable user resizing."""
        self.window_title(WINDOW_TITLE)
        self.window_resizable(True)
        self.frame_rate(self._style.frame_rate)

    def draw(self) -> None:
        """Repaint the graph, rebuilding the pixel layout on resize."""
        self._ensure_layout()

        assert self._layout is not None
        draw_graph(self, self._layout, self._style)

    def _ensure_layout(self) -> None:
        """Project the snapshot onto the window, reusing the projection until the size changes."""
        size = (self.width, self.height)
        if self._layout is not None and size == self._last_size:
            return

        self._last_size = size
        self._layout = compute_screen_layout(size[0], size[1], self._snapshot)


def run(snapshot: GeometrySnapshot, style: RenderStyle) -> None:
    """Show the snapshot in a py5 window and block until it is closed.

    py5 reports errors from settings, setup and draw itself and returns normally,
    so the sketch's error flag is checked once the window is gone.

    Args:
        snapshot: Geometry to show.
        style: Paint settings.

    Raises:
        RenderBackendError: If the sketch cannot be started or stopped with an error.
    """
    sketch = GraphSketch(snapshot, style)
    logger.debug("Starting py5 sketch with %d dots", len(snapshot.dots))
    try:
        sketch.run_sketch(block=True)
    except Exception as exc:
        raise RenderBackendError(str(exc)) from exc

    if sketch.is_dead_from_error:
        raise RenderBackendError("py5 sketch stopped with an error")
    logger.debug("py5 sketch closed")

from __future__ import annotations

from typing import Protocol

from graph_bridge.config import RenderStyle
from graph_bridge.layout import ScreenLayout


class _GraphSketch(Protocol):
    """Minimal sketch protocol for the drawing operations used by the renderer."""
    def background(self, *args) -> None: ...
    def fill(self, *args) -> None: ...
    def no_fill(self) -> None: ...
    def stroke(self, *args) -> None: ...
    def no_stroke(self) -> None: ...
    def stroke_weight(self, weight: float) -> None: ...
    def circle(self, x: float, y: float, d: float) -> None: ...
    def line(self, x1: float, y1: float, x2: float, y2: float) -> None: ...


def draw_graph(sketch: _GraphSketch, layout: ScreenLayout, style: RenderStyle) -> None:
    """Paint one frame: background, then dots, then lines.

    Args:
        sketch: The py5 sketch (or compatible protocol).
        layout: Dot and line positions in pixels for the current window size.
        style: Colors, dot radius and stroke weight.
    """
    sketch.background(*style.background)

    # Dots
    sketch.no_stroke()
    sketch.fill(*style.foreground)
    for (x, y) in layout.dots_px:
        sketch.circle(x, y, style.dot_diameter)
    sketch.no_fill()

    # Lines
    sketch.stroke(*style.foreground)
    sketch.stroke_weight(style.stroke_weight)
    for (a_px, b_px) in layout.lines_px:
        sketch.line(a_px[0], a_px[1], b_px[0], b_px[1])

from __future__ import annotations

import logging
import random

from graph_bridge.config import RenderStyle
from graph_bridge.errors import DotIndexError, RenderBackendError
from graph_bridge.graph.base import Graph
from graph_bridge.layout import Coord, GeometrySnapshot
from graph_bridge.rendering import DrawBackend, render_with

logger = logging.getLogger(__name__)


class DrawingCollector:
    """Accumulate randomly placed dots and the line segments between them."""

    def __init__(self, rng: random.Random) -> None:
        """Create a collector.

        Args:
            rng: Random number generator used to place dots.
        """
        self._rng = rng
        self._dots: list[Coord] = []
        self._lines: list[tuple[Coord, Coord]] = []

    def draw_dot(self) -> Coord:
        """Place a new dot uniformly in [0, 1) x [0, 1).

        Returns:
            The coordinate assigned to the dot.
        """
        x = self._rng.random()
        y = self._rng.random()
        coord = Coord(x, y)

        self._dots.append(coord)
        return coord

    def draw_edge(self, start: Coord, end: Coord) -> None:
        self._lines.append((start, end))

    def snapshot(self) -> GeometrySnapshot:
        """Freeze everything collected so far."""
        return GeometrySnapshot(dots=tuple(self._dots), lines=tuple(self._lines))


def collect_geometry(graph: Graph, rng: random.Random | None = None) -> GeometrySnapshot:
    """Walk the graph once, placing every dot and recording every enumerated edge.

    Args:
        graph: Graph to read. It is not modified.
        rng: Random number generator. A fresh unseeded one is used when omitted.

    Returns:
        A GeometrySnapshot with graph.dot_count() dots and one line per enumerated edge.

    Raises:
        DotIndexError: If an edge references a dot outside 0..dot_count()-1.
    """
    collector = DrawingCollector(rng if rng is not None else random.Random())
    dot_coords = [collector.draw_dot() for _ in range(graph.dot_count())]

    def _record_edge(from_dot: int, to_dot: int) -> None:
        collector.draw_edge(_lookup(dot_coords, from_dot), _lookup(dot_coords, to_dot))

    graph.for_each_edge(_record_edge)
    return collector.snapshot()


def draw(
    graph: Graph,
    backend: DrawBackend,
    rng: random.Random | None = None,
    style: RenderStyle | None = None,
) -> None:
    """Collect the graph's geometry and show it with the selected backend.

    A backend that fails to start is logged and does not propagate.

    Args:
        graph: Graph to draw.
        backend: GUI toolkit used for the window.
        rng: Random number generator for dot placement.
        style: Paint settings. Defaults to RenderStyle().
    """
    snapshot = collect_geometry(graph, rng)
    logger.debug("Collected %d dots and %d lines", len(snapshot.dots), len(snapshot.lines))

    try:
        render_with(backend, snapshot, style or RenderStyle())
    except RenderBackendError as err:
        logger.error("%s backend failed with %s", backend.value, err)


def _lookup(dot_coords: list[Coord], index: int) -> Coord:
    if not 0 <= index < len(dot_coords):
        raise DotIndexError(index, len(dot_coords))
    return dot_coords[index]

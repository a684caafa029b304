from __future__ import annotations

from typing import Iterator

from graph_bridge.graph.base import Edge, EdgeVisitor


class EdgeListGraph:
    """Graph stored as a set of touched dots plus the edges in insertion order."""

    def __init__(self) -> None:
        self._dots: set[int] = set()
        self._edges: list[Edge] = []

    @classmethod
    def with_dots_count(cls, count: int) -> EdgeListGraph:
        """Create a graph whose dots 0..count-1 exist before any edge is added.

        Args:
            count: Number of pre-registered dots.

        Returns:
            An EdgeListGraph without edges.
        """
        graph = cls()
        graph._dots.update(range(count))
        return graph

    def dot_count(self) -> int:
        return len(self._dots)

    def add_edge(self, from_dot: int, to_dot: int) -> None:
        """Register both endpoints and append the edge.

        Args:
            from_dot: Start dot index.
            to_dot: End dot index.
        """
        self._dots.add(from_dot)
        self._dots.add(to_dot)
        self._edges.append((from_dot, to_dot))

    def iter_edges(self) -> Iterator[Edge]:
        """Iterate over stored edges in insertion order and original orientation."""
        yield from self._edges

    def for_each_edge(self, visit: EdgeVisitor) -> None:
        for from_dot, to_dot in self.iter_edges():
            visit(from_dot, to_dot)

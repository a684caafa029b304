from __future__ import annotations

from typing import Iterator

from graph_bridge.graph.base import Edge, EdgeVisitor


class MatrixGraph:
    """Graph stored as a square boolean adjacency matrix that grows on demand.

    Only the upper triangle (including the diagonal) is enumerated, so an edge
    added as (from, to) with from > to is stored but never visited.
    """

    def __init__(self) -> None:
        self._matrix: list[list[bool]] = []

    @classmethod
    def with_dots_count(cls, count: int) -> MatrixGraph:
        """Create a graph backed by a count x count matrix with no edges.

        Args:
            count: Initial matrix dimension.

        Returns:
            A MatrixGraph without edges.
        """
        graph = cls()
        graph._matrix = [[False] * count for _ in range(count)]
        return graph

    def dot_count(self) -> int:
        return len(self._matrix)

    def add_edge(self, from_dot: int, to_dot: int) -> None:
        """Set cell [from_dot][to_dot], growing the matrix to fit both indices.

        Args:
            from_dot: Row index.
            to_dot: Column index.

        Raises:
            ValueError: If either index is negative.
        """
        if from_dot < 0 or to_dot < 0:
            raise ValueError(f"Dot indices must be non-negative, got ({from_dot}, {to_dot}).")

        self._ensure_dimension(max(from_dot, to_dot) + 1)
        self._matrix[from_dot][to_dot] = True

    def iter_edges(self) -> Iterator[Edge]:
        """Iterate over set cells of the upper triangle, row by row.

        Yields:
            (from, to) pairs with from <= to.
        """
        size = len(self._matrix)
        for from_dot in range(size):
            row = self._matrix[from_dot]
            for to_dot in range(from_dot, size):
                if row[to_dot]:
                    yield (from_dot, to_dot)

    def for_each_edge(self, visit: EdgeVisitor) -> None:
        for from_dot, to_dot in self.iter_edges():
            visit(from_dot, to_dot)

    def _ensure_dimension(self, dimension: int) -> None:
        """Grow rows and every row's length so the matrix is at least dimension x dimension."""
        if dimension <= len(self._matrix):
            return

        for row in self._matrix:
            row.extend([False] * (dimension - len(row)))
        while len(self._matrix) < dimension:
            self._matrix.append([False] * dimension)

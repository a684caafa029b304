from __future__ import annotations

from enum import Enum

from graph_bridge.graph.base import Graph
from graph_bridge.graph.edge_list import EdgeListGraph
from graph_bridge.graph.matrix import MatrixGraph


class GraphBackend(Enum):
    """Selectable graph storage variants."""
    EDGE_LIST = "edges"
    MATRIX = "matrix"


_GRAPH_TYPES: dict[GraphBackend, type[EdgeListGraph] | type[MatrixGraph]] = {
    GraphBackend.EDGE_LIST: EdgeListGraph,
    GraphBackend.MATRIX: MatrixGraph,
}


def with_dots_count(backend: GraphBackend, count: int) -> Graph:
    """Create an empty graph of the selected variant with count dots.

    Args:
        backend: Storage variant to build.
        count: Number of dots the graph starts with.

    Returns:
        A graph with no edges.
    """
    return _GRAPH_TYPES[backend].with_dots_count(count)

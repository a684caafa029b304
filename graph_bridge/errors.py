from __future__ import annotations


class GraphBridgeError(Exception):
    """Base class for errors raised by graph_bridge."""


class RenderBackendError(GraphBridgeError):
    """The selected GUI toolkit could not be loaded or its window could not start."""


class DotIndexError(GraphBridgeError, IndexError):
    """An edge references a dot index that has no drawn coordinate."""

    def __init__(self, index: int, dot_count: int) -> None:
        super().__init__(f"Dot {index} is out of range for a graph with {dot_count} dots.")
        self.index = index
        self.dot_count = dot_count

from __future__ import annotations

from .drawing import DrawingCollector, collect_geometry, draw
from .graph import EdgeListGraph, GraphBackend, MatrixGraph, with_dots_count
from .layout import Coord, GeometrySnapshot
from .rendering import DrawBackend

__version__ = "0.1.0"

__all__ = [
    "Coord",
    "DrawBackend",
    "DrawingCollector",
    "EdgeListGraph",
    "GeometrySnapshot",
    "GraphBackend",
    "MatrixGraph",
    "collect_geometry",
    "draw",
    "with_dots_count",
]

from .backend import GraphBackend, with_dots_count
from .base import EdgeVisitor, Graph
from .edge_list import EdgeListGraph
from .matrix import MatrixGraph

__all__ = ["Graph", "EdgeVisitor", "EdgeListGraph", "MatrixGraph", "GraphBackend", "with_dots_count"]

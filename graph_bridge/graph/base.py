from __future__ import annotations

from typing import Callable, Iterator, Protocol, TypeAlias

Edge: TypeAlias = tuple[int, int]
EdgeVisitor: TypeAlias = Callable[[int, int], None]


class Graph(Protocol):
    """Storage interface shared by every graph variant."""

    def dot_count(self) -> int: ...
    def add_edge(self, from_dot: int, to_dot: int) -> None: ...
    def iter_edges(self) -> Iterator[Edge]: ...
    def for_each_edge(self, visit: EdgeVisitor) -> None: ...

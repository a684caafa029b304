from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

Point: TypeAlias = tuple[float, float]


@dataclass(frozen=True, slots=True)
class Coord:
    """Position normalized to the drawing surface; both components lie in [0, 1)."""
    x: float
    y: float

    def scaled(self, width: float, height: float) -> Point:
        """Project onto a surface of the given pixel size.

        Args:
            width: Surface width in pixels.
            height: Surface height in pixels.

        Returns:
            (x * width, y * height) in pixels.
        """
        return (self.x * width, self.y * height)


@dataclass(frozen=True, slots=True)
class GeometrySnapshot:
    """Dots and line segments collected from one graph, ready to hand to a renderer."""
    dots: tuple[Coord, ...] = ()
    lines: tuple[tuple[Coord, Coord], ...] = ()

from __future__ import annotations

from dataclasses import dataclass

from .geometry import GeometrySnapshot, Point


@dataclass(frozen=True, slots=True)
class ScreenLayout:
    """A geometry snapshot resolved to pixel positions for one surface size."""

    width: int
    height: int
    dots_px: tuple[Point, ...]
    lines_px: tuple[tuple[Point, Point], ...]


def compute_screen_layout(width: int, height: int, snapshot: GeometrySnapshot) -> ScreenLayout:
    """Scale every coordinate of the snapshot by the surface size.

    Args:
        width: Surface width in pixels.
        height: Surface height in pixels.
        snapshot: Normalized geometry to project.

    Returns:
        A ScreenLayout with one pixel point per dot and one point pair per line.
    """
    width = max(0, width)
    height = max(0, height)

    dots_px = tuple(dot.scaled(width, height) for dot in snapshot.dots)
    lines_px = tuple(
        (start.scaled(width, height), end.scaled(width, height))
        for (start, end) in snapshot.lines
    )

    return ScreenLayout(width=width, height=height, dots_px=dots_px, lines_px=lines_px)

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

Rgb: TypeAlias = tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class RenderStyle:
    """Immutable paint settings shared by every render backend."""

    background: Rgb = (0x20, 0x20, 0x20)
    foreground: Rgb = (0xFF, 0xFF, 0xFF)
    dot_radius: float = 5.0
    stroke_weight: float = 1.0
    window_size: tuple[int, int] = (800, 600)
    frame_rate: int = 60

    @property
    def dot_diameter(self) -> float:
        """Circle diameter in pixels, as expected by diameter-based APIs."""
        return 2.0 * self.dot_radius

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DemoConfig:
    """Graph contents built by the command-line demo."""
    dots_count: int = 10
    edges: tuple[tuple[int, int], ...] = ((0, 1), (1, 2), (2, 0), (0, 4))

from .geometry import Coord, GeometrySnapshot, Point
from .screen_layout import ScreenLayout, compute_screen_layout

__all__ = ["Coord", "GeometrySnapshot", "Point", "ScreenLayout", "compute_screen_layout"]

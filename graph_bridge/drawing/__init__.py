from .collector import DrawingCollector, collect_geometry, draw

__all__ = ["DrawingCollector", "collect_geometry", "draw"]

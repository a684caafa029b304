from __future__ import annotations

from .render_config import RenderStyle
from .run_config import DemoConfig

__all__ = ["RenderStyle", "DemoConfig"]

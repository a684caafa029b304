from __future__ import annotations

import importlib
from enum import Enum

from graph_bridge.config import RenderStyle
from graph_bridge.errors import RenderBackendError
from graph_bridge.layout import GeometrySnapshot


class DrawBackend(Enum):
    """Selectable GUI toolkits."""
    PY5 = "py5"
    PYGAME = "pygame"


_BACKEND_MODULES = {
    DrawBackend.PY5: "graph_bridge.rendering.py5_backend",
    DrawBackend.PYGAME: "graph_bridge.rendering.pygame_backend",
}


def render_with(backend: DrawBackend, snapshot: GeometrySnapshot, style: RenderStyle) -> None:
    """Open a window with the selected toolkit and show the snapshot until it is closed.

    The toolkit module is imported here so that only the chosen toolkit gets loaded.

    Args:
        backend: Toolkit to use.
        snapshot: Geometry to show. The backend keeps it for the lifetime of the window.
        style: Paint settings.

    Raises:
        RenderBackendError: If the toolkit cannot be loaded or its window cannot start.
    """
    module_name = _BACKEND_MODULES[backend]
    try:
        module = importlib.import_module(module_name)
    except (ImportError, RuntimeError) as exc:
        raise RenderBackendError(f"could not load {backend.value}: {exc}") from exc

    module.run(snapshot, style)

from __future__ import annotations

import logging

import pygame

from graph_bridge.config import RenderStyle
from graph_bridge.errors import RenderBackendError
from graph_bridge.layout import GeometrySnapshot, ScreenLayout, compute_screen_layout

logger = logging.getLogger(__name__)

WINDOW_TITLE = "pygame-based graphs"


def paint_layout(surface: pygame.Surface, layout: ScreenLayout, style: RenderStyle) -> None:
    """Paint background, dots and lines onto a surface.

    Args:
        surface: Target surface, normally sized like the layout.
        layout: Dot and line positions in pixels.
        style: Colors, dot radius and stroke weight.
    """
    surface.fill(style.background)

    for center in layout.dots_px:
        pygame.draw.circle(surface, style.foreground, center, style.dot_radius)

    line_width = max(1, round(style.stroke_weight))
    for (start, end) in layout.lines_px:
        pygame.draw.line(surface, style.foreground, start, end, line_width)


class CachedGraphView:
    """Keeps the painted graph in an off-screen surface and repaints only when invalidated."""

    def __init__(self, snapshot: GeometrySnapshot, style: RenderStyle) -> None:
        self._snapshot = snapshot
        self._style = style
        self._cache: pygame.Surface | None = None

    def invalidate(self) -> None:
        self._cache = None

    def surface_for(self, size: tuple[int, int]) -> pygame.Surface:
        """Return the painted graph for a window of the given size.

        Args:
            size: Window size in pixels.

        Returns:
            The cached surface, repainted first if it is missing or sized differently.
        """
        size = (size[0], size[1])
        if self._cache is None or self._cache.get_size() != size:
            self._cache = self._render(size)
        return self._cache

    def _render(self, size: tuple[int, int]) -> pygame.Surface:
        layout = compute_screen_layout(size[0], size[1], self._snapshot)
        surface = pygame.Surface(size)
        paint_layout(surface, layout, self._style)
        return surface


def run(snapshot: GeometrySnapshot, style: RenderStyle) -> None:
    """Show the snapshot in a resizable pygame window and block until it is closed.

    Args:
        snapshot: Geometry to show.
        style: Paint settings.

    Raises:
        RenderBackendError: If the display cannot be initialized.
    """
    try:
        pygame.init()
        pygame.display.set_mode(style.window_size, pygame.RESIZABLE)
    except pygame.error as exc:
        pygame.quit()
        raise RenderBackendError(str(exc)) from exc

    pygame.display.set_caption(WINDOW_TITLE)
    view = CachedGraphView(snapshot, style)
    clock = pygame.time.Clock()
    logger.debug("Started pygame window with %d dots", len(snapshot.dots))

    try:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    view.invalidate()

            screen = pygame.display.get_surface()
            screen.blit(view.surface_for(screen.get_size()), (0, 0))
            pygame.display.flip()
            clock.tick(style.frame_rate)
    finally:
        pygame.quit()
        logger.debug("pygame window closed")

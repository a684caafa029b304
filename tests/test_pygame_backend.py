import logging

import pytest

pygame = pytest.importorskip("pygame")

from graph_bridge.config import RenderStyle
from graph_bridge.drawing import draw
from graph_bridge.errors import RenderBackendError
from graph_bridge.graph import EdgeListGraph
from graph_bridge.rendering import DrawBackend
from graph_bridge.rendering import pygame_backend
from graph_bridge.layout import Coord, GeometrySnapshot, compute_screen_layout
from graph_bridge.rendering.pygame_backend import CachedGraphView, paint_layout

BACKGROUND = (0x20, 0x20, 0x20)
FOREGROUND = (0xFF, 0xFF, 0xFF)


def rgb_at(surface, pos):
    return tuple(surface.get_at(pos))[:3]


@pytest.fixture
def snapshot():
    left = Coord(0.1, 0.1)
    right = Coord(0.9, 0.1)
    center = Coord(0.5, 0.5)
    return GeometrySnapshot(dots=(left, right, center), lines=((left, right),))


class TestPaintLayout:
    def test_background_and_dots(self, snapshot):
        surface = pygame.Surface((100, 100))
        paint_layout(surface, compute_screen_layout(100, 100, snapshot), RenderStyle())

        assert rgb_at(surface, (50, 50)) == FOREGROUND
        assert rgb_at(surface, (0, 99)) == BACKGROUND
        assert rgb_at(surface, (99, 99)) == BACKGROUND

    def test_line_is_drawn(self, snapshot):
        surface = pygame.Surface((100, 100))
        paint_layout(surface, compute_screen_layout(100, 100, snapshot), RenderStyle())

        assert rgb_at(surface, (30, 10)) == FOREGROUND
        assert rgb_at(surface, (30, 40)) == BACKGROUND

    def test_custom_colors(self):
        style = RenderStyle(background=(10, 20, 30), foreground=(200, 100, 50))
        surface = pygame.Surface((40, 40))
        paint_layout(surface, compute_screen_layout(40, 40, GeometrySnapshot(dots=(Coord(0.5, 0.5),))), style)

        assert rgb_at(surface, (20, 20)) == (200, 100, 50)
        assert rgb_at(surface, (0, 0)) == (10, 20, 30)


class TestCachedGraphView:
    def test_same_size_reuses_surface(self, snapshot):
        view = CachedGraphView(snapshot, RenderStyle())
        first = view.surface_for((64, 48))
        assert view.surface_for((64, 48)) is first
        assert first.get_size() == (64, 48)

    def test_resize_repaints(self, snapshot):
        view = CachedGraphView(snapshot, RenderStyle())
        first = view.surface_for((64, 48))
        second = view.surface_for((128, 96))
        assert second is not first
        assert second.get_size() == (128, 96)
        assert rgb_at(second, (64, 48)) == FOREGROUND

    def test_invalidate_repaints(self, snapshot):
        view = CachedGraphView(snapshot, RenderStyle())
        first = view.surface_for((64, 48))
        view.invalidate()
        assert view.surface_for((64, 48)) is not first


class TestRun:
    def test_unusable_video_driver_raises_backend_error(self, monkeypatch, snapshot):
        monkeypatch.setenv("SDL_VIDEODRIVER", "nonexistent_driver")

        with pytest.raises(RenderBackendError) as excinfo:
            pygame_backend.run(snapshot, RenderStyle())

        assert isinstance(excinfo.value.__cause__, pygame.error)
        assert not pygame.display.get_init()

    def test_draw_logs_window_failure(self, monkeypatch, caplog):
        monkeypatch.setenv("SDL_VIDEODRIVER", "nonexistent_driver")

        with caplog.at_level(logging.ERROR):
            draw(EdgeListGraph.with_dots_count(4), DrawBackend.PYGAME)

        assert "pygame backend failed with" in caplog.text

    def test_resize_invalidates_cache_and_quit_ends_loop(self, monkeypatch, snapshot):
        monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")

        batches = [
            [pygame.event.Event(pygame.VIDEORESIZE, size=(320, 240), w=320, h=240)],
            [],
            [pygame.event.Event(pygame.QUIT)],
        ]
        monkeypatch.setattr(pygame.event, "get", lambda *args, **kwargs: batches.pop(0))

        invalidations = []
        original_invalidate = CachedGraphView.invalidate

        def recording_invalidate(self):
            invalidations.append(self)
            original_invalidate(self)

        monkeypatch.setattr(CachedGraphView, "invalidate", recording_invalidate)

        pygame_backend.run(snapshot, RenderStyle(frame_rate=1000))

        assert batches == []
        assert len(invalidations) == 1
        assert not pygame.display.get_init()

import sys
import types

import pytest

from graph_bridge.config import RenderStyle
from graph_bridge.errors import RenderBackendError
from graph_bridge.layout import GeometrySnapshot
from graph_bridge.rendering import DrawBackend, render_with
from graph_bridge.rendering import backend as backend_module


class TestRenderWith:
    def test_runs_selected_toolkit_module(self, monkeypatch):
        calls = []
        fake = types.ModuleType("fake_toolkit")
        fake.run = lambda snapshot, style: calls.append((snapshot, style))
        monkeypatch.setitem(sys.modules, "fake_toolkit", fake)
        monkeypatch.setitem(backend_module._BACKEND_MODULES, DrawBackend.PY5, "fake_toolkit")

        snapshot = GeometrySnapshot()
        style = RenderStyle()
        render_with(DrawBackend.PY5, snapshot, style)

        assert calls == [(snapshot, style)]

    def test_unloadable_toolkit_raises_backend_error(self, monkeypatch):
        monkeypatch.setitem(
            backend_module._BACKEND_MODULES, DrawBackend.PYGAME, "graph_bridge_missing_toolkit"
        )

        with pytest.raises(RenderBackendError, match="could not load pygame") as excinfo:
            render_with(DrawBackend.PYGAME, GeometrySnapshot(), RenderStyle())

        assert isinstance(excinfo.value.__cause__, ImportError)

    def test_backend_values(self):
        assert DrawBackend("py5") is DrawBackend.PY5
        assert DrawBackend("pygame") is DrawBackend.PYGAME

    def test_toolkit_runtime_error_on_import_raises_backend_error(self, monkeypatch, tmp_path):
        (tmp_path / "graph_bridge_jvmless_toolkit.py").write_text("raise RuntimeError('no JVM found')\n")
        monkeypatch.syspath_prepend(str(tmp_path))
        monkeypatch.setitem(backend_module._BACKEND_MODULES, DrawBackend.PY5, "graph_bridge_jvmless_toolkit")

        with pytest.raises(RenderBackendError, match="could not load py5: no JVM found"):
            render_with(DrawBackend.PY5, GeometrySnapshot(), RenderStyle())

    def test_bug_in_toolkit_module_propagates(self, monkeypatch, tmp_path):
        (tmp_path / "graph_bridge_buggy_toolkit.py").write_text("raise ZeroDivisionError('bug')\n")
        monkeypatch.syspath_prepend(str(tmp_path))
        monkeypatch.setitem(backend_module._BACKEND_MODULES, DrawBackend.PY5, "graph_bridge_buggy_toolkit")

        with pytest.raises(ZeroDivisionError, match="bug"):
            render_with(DrawBackend.PY5, GeometrySnapshot(), RenderStyle())

# どこで: `src/battlemap/interactive/runtime/map_window_system.py`。
# 何を: Grid をウィンドウへタイル描画するサブシステムを提供する。
# なぜ: `src/battlemap/api/runner.py` の `run()` を「配線」に寄せ、描画責務を独立させるため。

from __future__ import annotations

import logging

import pyglet
from pyglet.event import EVENT_HANDLED, EVENT_UNHANDLED
from pyglet.window import key

from battlemap.core.grid import Grid
from battlemap.core.map_view import MapView
from battlemap.core.viewport import Viewport
from battlemap.interactive.frame_rate import frame_interval
from battlemap.interactive.gl.map_renderer import MapRenderer
from battlemap.interactive.map_window import create_map_window
from battlemap.interactive.render_settings import RenderSettings
from battlemap.interactive.window_size import normalize_window_size

_logger = logging.getLogger(__name__)


class MapWindowSystem:
    """マップ描画（メインウィンドウ）のサブシステム。"""

    def __init__(self, grid: Grid, *, settings: RenderSettings) -> None:
        """描画用の window/renderer/MapView を初期化する。"""

        self._settings = settings

        self.window = create_map_window(settings)
        self._renderer = MapRenderer(self.window)

        width, height = normalize_window_size(self.window.width, self.window.height)
        self._view = MapView(grid, Viewport(width=width, height=height))
        self._closing = False

        # pyglet 既定の on_resize（固定 2D 投影を張る）は使わず、ここで止める。
        self.window.push_handlers(
            on_resize=self._on_resize,
            on_key_press=self._on_key_press,
            on_close=self._on_close,
            on_draw=self.draw_frame,
        )

    def _on_resize(self, width: int, height: int) -> bool | None:
        w, h = normalize_window_size(width, height)
        self._view.on_resize(w, h)
        return EVENT_HANDLED

    def _on_key_press(self, symbol: int, _modifiers: int) -> bool | None:
        if symbol == key.ESCAPE:
            # on_close を経由させ、run() のループ終了（pyglet.app.exit）も走らせる。
            self.window.dispatch_event("on_close")
            return EVENT_HANDLED
        return EVENT_UNHANDLED

    def _on_close(self) -> None:
        # 戻り値 None で pyglet 既定の on_close（window.close）にも処理を渡す。
        self._closing = True
        pyglet.app.exit()

    def _framebuffer_size(self) -> tuple[int, int]:
        getter = getattr(self.window, "get_framebuffer_size", None)
        if callable(getter):
            w, h = getter()
            return int(w), int(h)
        return int(self.window.width), int(self.window.height)

    def draw_frame(self) -> None:
        """1 フレーム分の描画を行う（`flip()` は呼ばない）。"""

        # 注: 呼び出し側（pyglet.window.Window.draw）が事前に self.window.switch_to() 済みである前提。
        self._renderer.ctx.screen.use()

        # HiDPI では framebuffer がウィンドウの論理サイズより大きくなるため、
        # GL の viewport は framebuffer 寸法で張る。投影は縦横比のみに依存するので
        # MapView はウィンドウ寸法のままでよい。
        fb_w, fb_h = normalize_window_size(*self._framebuffer_size())
        self._renderer.viewport(fb_w, fb_h)
        self._renderer.clear(self._settings.background_color)

        for item in self._view.transforms_for_current_grid():
            self._renderer.draw_cell(item.matrix, self._settings.color_for(item.tag))

    def _tick(self, dt: float) -> None:
        # on_close 後にスケジュールが 1 回残ることがあるため、閉じたウィンドウには描かない。
        if self._closing:
            return
        self.window.draw(dt)

    def run(self, *, fps: float) -> None:
        """ウィンドウが閉じられるまで pyglet の app loop を回す。

        Parameters
        ----------
        fps : float
            目標フレームレート。`<=0` の場合はスロットリングしない。
        """

        interval = frame_interval(fps)
        if interval is None:
            pyglet.clock.schedule(self._tick)
        else:
            pyglet.clock.schedule_interval(self._tick, interval)
        _logger.debug("map loop started: interval=%s", interval)

        try:
            pyglet.app.run(interval=None)
        finally:
            pyglet.clock.unschedule(self._tick)

    def close(self) -> None:
        """GPU / window 資源を解放する。"""

        try:
            self._renderer.release()
        except Exception:
            _logger.exception("Failed to release renderer")
        finally:
            self.window.close()


__all__ = ["MapWindowSystem"]

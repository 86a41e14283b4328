# どこで: `src/battlemap/interactive/map_window.py`。
# 何を: マップ描画用の pyglet ウィンドウ生成を行う。
# なぜ: ウィンドウ依存をこの層に閉じ込め、core をヘッドレスに保つため。

from __future__ import annotations

import logging

import pyglet
from pyglet.gl import Config
from pyglet.window import Window

from battlemap.interactive.render_settings import RenderSettings

_logger = logging.getLogger(__name__)


def create_map_window(settings: RenderSettings) -> Window:
    """設定に基づきリサイズ可能な描画ウィンドウを生成する。"""
    # ModernGL の create_context(require=330) に合わせて core profile を要求する。
    config = Config(  # type: ignore[abstract]
        double_buffer=True,
        major_version=3,
        minor_version=3,
        forward_compatible=True,
    )
    width, height = settings.window_size
    window = pyglet.window.Window(  # type: ignore[abstract]
        width=int(width),
        height=int(height),
        resizable=bool(settings.resizable),
        caption=settings.caption,
        config=config,
    )
    _logger.info("created window: %dx%d", int(width), int(height))
    return window


__all__ = ["create_map_window"]

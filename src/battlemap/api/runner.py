"""
どこで: `src/battlemap/api/runner.py`。公開 API のランナー実装。
何を: pyglet + ModernGL を使い、Grid をリサイズ可能なウィンドウへタイル描画するランナーを提供する。
なぜ: `main.py` を実行して実際にマップをプレビューできる経路を用意するため。
"""

from __future__ import annotations

from pathlib import Path

import pyglet

from battlemap.core.grid import Grid
from battlemap.core.runtime_config import ColorRGB, runtime_config, set_config_path
from battlemap.interactive.render_settings import RenderSettings
from battlemap.interactive.runtime.map_window_system import MapWindowSystem


def run(
    grid: Grid | None = None,
    *,
    config_path: str | Path | None = None,
    window_size: tuple[int, int] | None = None,
    background_color: ColorRGB | None = None,
    fps: float | None = None,
) -> None:
    """pyglet ウィンドウを生成し Grid をリアルタイム描画する。

    Parameters
    ----------
    grid : Grid | None
        描画するマップ。None の場合は config の `map.size` で全 Floor の Grid を作る。
        呼び出し側が保持する Grid への編集は次フレームの描画に反映される。
    config_path : str | Path | None
        設定ファイル（config.yaml）のパス。指定した場合は探索より優先する。
    window_size : tuple[int, int] | None
        初期ウィンドウ寸法（ピクセル）。None の場合は config の `window.size`。
    background_color : tuple[float, float, float] | None
        背景色 RGB。None の場合は config の `render.background_color`。
    fps : float | None
        目標フレームレート。`<=0` の場合はスロットリングしない。None の場合は config の `window.fps`。

    Returns
    -------
    None
        ウィンドウを閉じる（ESC キーを含む）と制御を返す。
    """

    set_config_path(config_path)
    cfg = runtime_config()

    if grid is None:
        grid = Grid(cfg.map_size)

    settings = RenderSettings.from_config(
        cfg,
        window_size=window_size,
        background_color=background_color,
    )

    # vsync はウィンドウ作成時に参照されるため、Window 作成前に固定する。
    pyglet.options["vsync"] = False

    map_window = MapWindowSystem(grid, settings=settings)
    try:
        map_window.run(fps=float(cfg.fps if fps is None else fps))
    finally:
        map_window.close()

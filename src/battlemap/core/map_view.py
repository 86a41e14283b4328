# どこで: `src/battlemap/core/map_view.py`。
# 何を: Grid と現在の Viewport/投影行列を束ね、リサイズ通知とセル行列の列挙を提供する。
# なぜ: 描画ループ側から見た core の境界を 1 つのオブジェクトに絞るため。

from __future__ import annotations

import logging

import numpy as np

from battlemap.core.grid import Grid
from battlemap.core.grid_layout import CellTransform, GridLayout
from battlemap.core.projection import projection_for_viewport
from battlemap.core.viewport import Viewport

_logger = logging.getLogger(__name__)


class MapView:
    """マップ描画用の core ファサード。

    Notes
    -----
    Grid はコピーせず参照を保持する。`set_cell` による編集は次の
    `transforms_for_current_grid()` にそのまま反映される。
    """

    def __init__(self, grid: Grid, viewport: Viewport) -> None:
        self._grid = grid
        self._layout = GridLayout(grid)
        self._viewport = viewport
        self._projection = projection_for_viewport(viewport)

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    @property
    def projection(self) -> np.ndarray:
        """現在の投影行列（読み取り専用コピー）を返す。"""

        out = self._projection.copy()
        out.flags.writeable = False
        return out

    def on_resize(self, width: int, height: int) -> None:
        """ビューポート寸法を更新し、投影行列を再計算する。

        0 以下の寸法は ValueError（補正は呼び出し側で行う）。
        """

        viewport = Viewport(width=width, height=height)
        self._projection = projection_for_viewport(viewport)
        self._viewport = viewport
        _logger.debug("viewport resized: %dx%d", viewport.width, viewport.height)

    def transforms_for_current_grid(self) -> list[CellTransform]:
        """現在の投影で全セルの描画行列を行優先順に返す。"""

        return self._layout.cell_transforms(self._projection)


__all__ = ["MapView"]

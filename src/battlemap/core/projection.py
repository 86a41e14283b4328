from __future__ import annotations

# どこで: `src/battlemap/core/projection.py`。
# 何を: ウィンドウ寸法から縦横比を保つ正射影行列を生成する。
# なぜ: 窓の形に関わらず正方形のマップを正方形のまま、どの軸も切らずに表示するため。

import numpy as np

from battlemap.core.viewport import Viewport

Box = tuple[float, float, float, float]


def visible_box(width: float, height: float) -> Box:
    """投影後に見える論理範囲 (left, right, bottom, top) を返す。

    Notes
    -----
    横長（ratio > 1）なら x 方向に、縦長・正方形なら y 方向に余白を広げる。
    範囲は常に原点対称で、[-1, 1] の正方形を必ず含む。
    """

    if height <= 0:
        raise ValueError(f"height は正の値である必要がある: got={height}")
    if width <= 0:
        raise ValueError(f"width は正の値である必要がある: got={width}")

    ratio = float(width) / float(height)
    if ratio > 1.0:
        return (-ratio, ratio, -1.0, 1.0)
    return (-1.0, 1.0, -1.0 / ratio, 1.0 / ratio)


def ortho(
    left: float,
    right: float,
    bottom: float,
    top: float,
    near: float = -1.0,
    far: float = 1.0,
) -> "np.ndarray":
    """正射影行列（列ベクトル規約、未転置）を返す。"""

    return np.array(
        [
            [2.0 / (right - left), 0.0, 0.0, -(right + left) / (right - left)],
            [0.0, 2.0 / (top - bottom), 0.0, -(top + bottom) / (top - bottom)],
            [0.0, 0.0, -2.0 / (far - near), -(far + near) / (far - near)],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )


def build_aspect_projection(width: float, height: float) -> "np.ndarray":
    """ウィンドウ寸法から縦横比を保つ正射影行列を返す。

    ModernGL へ書き込む際は呼び出し側で転置し `f4` に変換する。
    """

    left, right, bottom, top = visible_box(width, height)
    return ortho(left, right, bottom, top)


def projection_for_viewport(viewport: Viewport) -> "np.ndarray":
    return build_aspect_projection(viewport.width, viewport.height)


__all__ = [
    "Box",
    "build_aspect_projection",
    "ortho",
    "projection_for_viewport",
    "visible_box",
]

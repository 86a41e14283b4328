# どこで: `src/battlemap/interactive/frame_rate.py`。
# 何を: config / 引数の fps を pyglet.clock のスケジュール間隔へ変換する。
# なぜ: 描画ループの間隔決定を、ウィンドウを開かずに検証できる形で切り出すため。

from __future__ import annotations

import math


def frame_interval(fps: float) -> float | None:
    """1 フレームあたりの秒数を返す。

    Notes
    -----
    `fps <= 0` はスロットリングしない指定として None を返す
    （呼び出し側は `pyglet.clock.schedule` で毎 tick 描く）。
    """

    fps_f = float(fps)
    if math.isnan(fps_f):
        raise ValueError("fps に NaN は指定できない")
    if fps_f <= 0.0:
        return None
    return 1.0 / fps_f


__all__ = ["frame_interval"]

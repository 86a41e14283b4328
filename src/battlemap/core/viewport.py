# どこで: `src/battlemap/core/viewport.py`。
# 何を: ウィンドウのピクセル寸法を表す Viewport 値を定義する。
# なぜ: プロセス全体で共有する可変のウィンドウ状態を持たず、値として投影計算へ渡すため。

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class Viewport:
    """ビューポートのピクセル寸法。

    Notes
    -----
    0 以下の寸法は補正せず ValueError にする。
    最小化などで生じる 0 の補正はウィンドウ側（`normalize_window_size`）の責務。
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise TypeError(f"Viewport.{name} は整数である必要がある: got={value!r}")
            if int(value) < 1:
                raise ValueError(f"Viewport.{name} は 1 以上である必要がある: got={value}")


__all__ = ["Viewport"]

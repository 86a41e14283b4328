# どこで: `src/battlemap/interactive/window_size.py`。
# 何を: ウィンドウ側から届く寸法を core へ渡せる値に補正する。
# なぜ: 最小化などで 0 になった寸法を core に渡さないため（core 側は補正せず例外にする）。

from __future__ import annotations


def normalize_window_size(width: int, height: int) -> tuple[int, int]:
    """幅・高さをそれぞれ 1 以上に丸めて返す。"""

    w = int(width)
    h = int(height)
    return (w if w > 0 else 1, h if h > 0 else 1)


__all__ = ["normalize_window_size"]

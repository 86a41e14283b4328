# どこで: `src/battlemap/interactive/__init__.py`。
# 何を: pyglet + ModernGL によるライブ描画（ウィンドウ/GPU/ループ）をまとめるパッケージ定義。
# なぜ: GUI 依存をこの層に閉じ込め、core をヘッドレスに保つため。

from __future__ import annotations

__all__ = []

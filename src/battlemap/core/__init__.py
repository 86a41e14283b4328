# どこで: `src/battlemap/core/__init__.py`。
# 何を: ヘッドレスなマップモデルと投影・配置計算をまとめるパッケージ定義。
# なぜ: pyglet/ModernGL に依存しない層を分離し、テスト可能に保つため。

from __future__ import annotations

__all__ = []

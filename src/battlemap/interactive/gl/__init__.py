# どこで: `src/battlemap/interactive/gl/__init__.py`。
# 何を: ModernGL のシェーダ・メッシュ・レンダラーをまとめるパッケージ定義。

from __future__ import annotations

__all__ = []

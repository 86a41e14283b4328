# どこで: `src/battlemap/interactive/runtime/__init__.py`。
# 何を: interactive 実行時の「ループ/サブシステム」実装をまとめるパッケージ定義。
# なぜ: `src/battlemap/api/runner.py` を配線だけに保つため。

from __future__ import annotations

__all__ = []

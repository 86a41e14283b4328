# どこで: `src/battlemap/__init__.py`。
# 何を: ルート `battlemap` パッケージを定義し、マップモデルと run を再エクスポートする。
# なぜ: import 起点を `battlemap` に統一するため。

from __future__ import annotations

from battlemap.api import run
from battlemap.core.cell_type import CellType
from battlemap.core.grid import Grid

__all__ = ["CellType", "Grid", "run"]

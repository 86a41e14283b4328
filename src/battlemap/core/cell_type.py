"""
どこで: `src/battlemap/core/cell_type.py`。
何を: マップセルの種別タグ（組み込み種別 + 呼び出し側定義の拡張範囲）を定義する。
なぜ: 組み込みタグと拡張タグが衝突しないことを 1 箇所で保証するため。
"""

from __future__ import annotations

from enum import IntEnum

import numpy as np


class CellType(IntEnum):
    """セル種別。`CUSTOM` 以上の整数は呼び出し側定義のタグとして予約する。"""

    FLOOR = 0
    CLAY = 1
    WALL = 2
    ROCK = 3
    WATER = 4
    CUSTOM = 1000

    @classmethod
    def custom(cls, offset: int) -> int:
        """拡張タグ `CUSTOM + offset` を返す。"""

        if isinstance(offset, bool) or not isinstance(offset, (int, np.integer)):
            raise TypeError(f"offset は整数である必要がある: got={offset!r}")
        if int(offset) < 0:
            raise ValueError(f"offset は 0 以上である必要がある: got={offset}")
        return int(cls.CUSTOM) + int(offset)


# セルに格納される値。組み込みは CellType、拡張範囲は素の int で表す。
CellTag = CellType | int

CUSTOM_TAG_START = int(CellType.CUSTOM)


def is_custom_tag(tag: int) -> bool:
    """tag が拡張範囲（`CUSTOM` 以上）なら True を返す。"""

    return int(tag) >= CUSTOM_TAG_START


def validate_cell_tag(tag: object) -> CellTag:
    """セルタグを検証し、正規化した値を返す。

    Parameters
    ----------
    tag : object
        CellType メンバまたは整数。

    Returns
    -------
    CellType | int
        組み込み値なら CellType メンバ、`CUSTOM` より大きい拡張値なら int。

    Raises
    ------
    TypeError
        tag が整数でない場合（bool も拒否する）。
    ValueError
        組み込み種別でも拡張範囲でもない値（負値や 5..999）の場合。
    """

    if isinstance(tag, bool) or not isinstance(tag, (int, np.integer)):
        raise TypeError(f"セルタグは整数である必要がある: got={tag!r}")
    value = int(tag)
    if value > CUSTOM_TAG_START:
        return value
    try:
        return CellType(value)
    except ValueError:
        raise ValueError(f"未定義のセルタグ: got={value}") from None


__all__ = ["CUSTOM_TAG_START", "CellTag", "CellType", "is_custom_tag", "validate_cell_tag"]

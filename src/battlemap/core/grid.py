"""
どこで: `src/battlemap/core/grid.py`。
何を: 正方形マップ（size x size のセル種別配列）を表す Grid を定義する。
なぜ: 範囲外アクセスを例外として扱うデータモデルを、描画から独立して提供するため。
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

import numpy as np

from battlemap.core.cell_type import CellTag, CellType, validate_cell_tag

_MAX_TAG = int(np.iinfo(np.int32).max)


def as_index(value: object, *, name: str) -> int:
    """セル座標・サイズ用の整数を検証して int で返す（bool と非整数は TypeError）。"""

    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} は整数である必要がある: got={value!r}")
    return int(value)


class Grid:
    """固定サイズの正方形マップ。

    Notes
    -----
    セル値は `int32` の numpy 配列で保持する。`row` / `col` の負値は
    numpy の末尾参照にせず、範囲外として IndexError にする。
    """

    def __init__(self, size: int) -> None:
        size_i = as_index(size, name="size")
        if size_i < 1:
            raise ValueError(f"size は 1 以上である必要がある: got={size_i}")
        self._size = size_i
        self._cells = np.full((size_i, size_i), int(CellType.FLOOR), dtype=np.int32)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        """行ごとのタグ列から Grid を生成する。

        Parameters
        ----------
        rows : Sequence[Sequence[int]]
            `rows[row][col]` がセルタグになる正方形の入れ子列。

        Returns
        -------
        Grid
            各セルを rows の値で初期化した Grid。

        Raises
        ------
        ValueError
            rows が空、または正方形でない場合。
        """

        n = len(rows)
        if n == 0:
            raise ValueError("rows は 1 行以上である必要がある")
        grid = cls(n)
        for row, values in enumerate(rows):
            if len(values) != n:
                raise ValueError(
                    f"rows は正方形である必要がある: row={row}, len={len(values)}, expected={n}"
                )
            for col, tag in enumerate(values):
                grid.set_cell(row, col, tag)
        return grid

    @property
    def size(self) -> int:
        """一辺のセル数を返す。"""

        return self._size

    def row_count(self) -> int:
        return self._size

    def col_count(self) -> int:
        # 正方形のみ構築するため row_count と一致する。
        return self._size

    def _check_bounds(self, row: object, col: object) -> tuple[int, int]:
        r = as_index(row, name="row")
        c = as_index(col, name="col")
        if not (0 <= r < self._size) or not (0 <= c < self._size):
            raise IndexError(
                f"セル座標が範囲外: (row, col)=({r}, {c}), size={self._size}"
            )
        return r, c

    def cell(self, row: int, col: int) -> CellTag:
        """(row, col) のセルタグを返す。"""

        r, c = self._check_bounds(row, col)
        return validate_cell_tag(self._cells[r, c])

    def set_cell(self, row: int, col: int, tag: int) -> None:
        """(row, col) のセルタグを 1 つだけ上書きする。"""

        r, c = self._check_bounds(row, col)
        value = validate_cell_tag(tag)
        if int(value) > _MAX_TAG:
            raise ValueError(f"セルタグが int32 の範囲を超えている: got={int(value)}")
        self._cells[r, c] = int(value)

    def view(self) -> np.ndarray:
        """セル配列の読み取り専用ビューを返す（コピーではない）。"""

        out = self._cells.view()
        out.flags.writeable = False
        return out

    def iter_cells(self) -> Iterator[tuple[int, int, CellTag]]:
        """(row, col, tag) を行優先順に列挙する。"""

        for r in range(self._size):
            for c in range(self._size):
                yield r, c, validate_cell_tag(self._cells[r, c])

    def __repr__(self) -> str:
        return f"Grid(size={self._size})"


__all__ = ["Grid", "as_index"]

"""
どこで: `src/battlemap/core/grid_layout.py`。
何を: 各セルの単位クアッドを格子位置へ配置するモデル行列と、投影との合成行列を計算する。
なぜ: 描画側を「行列を受け取って 1 セル描くだけ」に保ち、配置規則をテスト可能にするため。

単位クアッドはローカル空間で [-1, 1]^2 を占める。セル (row, col) は
`x = (col - (cols-1)/2) * 2`, `y = (row - (rows-1)/2) * 2` へ平行移動し、
グリッド全体を `1 / rows` で等方縮小して [-1, 1]^2 に収める。
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from battlemap.core.cell_type import CellTag, validate_cell_tag
from battlemap.core.grid import Grid, as_index

# 隣接セル中心の間隔（単位クアッドの幅と一致）。
CELL_PITCH = 2.0


@dataclass(frozen=True, slots=True, eq=False)
class CellTransform:
    """1 セル分の描画情報（タグと合成済み 4x4 行列）。"""

    row: int
    col: int
    tag: CellTag
    matrix: np.ndarray


def translation_matrix(x: float, y: float, z: float) -> "np.ndarray":
    m = np.eye(4, dtype=np.float64)
    m[0, 3] = float(x)
    m[1, 3] = float(y)
    m[2, 3] = float(z)
    return m


def scale_matrix(s: float) -> "np.ndarray":
    m = np.eye(4, dtype=np.float64)
    m[0, 0] = m[1, 1] = m[2, 2] = float(s)
    return m


class GridLayout:
    """Grid の各セルを論理空間へ配置する。

    Notes
    -----
    Grid への参照だけを保持し、行列はキャッシュしない（呼び出しごとに再計算する）。
    """

    def __init__(self, grid: Grid) -> None:
        self._grid = grid

    @property
    def rows(self) -> int:
        return self._grid.row_count()

    @property
    def cols(self) -> int:
        return self._grid.col_count()

    def grid_scale(self) -> float:
        """全セル共通の等方スケール `1 / rows` を返す。"""

        return 1.0 / float(self.rows)

    def cell_translate(self, row: int, col: int) -> tuple[float, float, float]:
        """セル (row, col) の平行移動量 (x, y, z) を返す。"""

        rows, cols = self.rows, self.cols
        r = as_index(row, name="row")
        c = as_index(col, name="col")
        if not (0 <= r < rows) or not (0 <= c < cols):
            raise IndexError(
                f"セル座標が範囲外: (row, col)=({r}, {c}), size=({rows}, {cols})"
            )
        x = (float(c) - (cols - 1) / 2.0) * CELL_PITCH
        y = (float(r) - (rows - 1) / 2.0) * CELL_PITCH
        return (x, y, 0.0)

    def model_matrix(self, row: int, col: int) -> "np.ndarray":
        """セル (row, col) のモデル行列 `scale @ translate` を返す。"""

        return scale_matrix(self.grid_scale()) @ translation_matrix(
            *self.cell_translate(row, col)
        )

    def _model_matrices(self) -> "np.ndarray":
        rows, cols = self.rows, self.cols
        rr, cc = np.meshgrid(
            np.arange(rows, dtype=np.float64),
            np.arange(cols, dtype=np.float64),
            indexing="ij",
        )
        translate = np.tile(np.eye(4, dtype=np.float64), (rows * cols, 1, 1))
        translate[:, 0, 3] = ((cc - (cols - 1) / 2.0) * CELL_PITCH).ravel()
        translate[:, 1, 3] = ((rr - (rows - 1) / 2.0) * CELL_PITCH).ravel()
        return scale_matrix(self.grid_scale()) @ translate

    def cell_transforms(self, projection: np.ndarray) -> list[CellTransform]:
        """全セルの `projection @ scale @ translate` を行優先順で返す。

        Parameters
        ----------
        projection : np.ndarray
            (4, 4) の投影行列（未転置）。

        Returns
        -------
        list[CellTransform]
            `rows * cols` 個。行が外側、列が内側の順。
        """

        proj = np.asarray(projection, dtype=np.float64)
        if proj.shape != (4, 4):
            raise ValueError(f"projection は (4, 4) である必要がある: got={proj.shape}")

        cols = self.cols
        matrices = proj @ self._model_matrices()
        tags = self._grid.view().ravel()
        out: list[CellTransform] = []
        for i, matrix in enumerate(matrices):
            row, col = divmod(i, cols)
            out.append(
                CellTransform(
                    row=row,
                    col=col,
                    tag=validate_cell_tag(tags[i]),
                    matrix=matrix,
                )
            )
        return out


__all__ = [
    "CELL_PITCH",
    "CellTransform",
    "GridLayout",
    "scale_matrix",
    "translation_matrix",
]

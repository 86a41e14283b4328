"""
どこで: リポジトリ直下 `main.py`。
何を: 壁・水・岩を配置した 10x10 のマップを作り、run でプレビュー表示する。
なぜ: 動作確認用の最小エントリポイントとして利用するため。
"""

import logging

from battlemap import CellType, Grid, run

MAP_SIZE = 10


def build_map() -> Grid:
    grid = Grid(MAP_SIZE)
    for i in range(MAP_SIZE):
        grid.set_cell(0, i, CellType.WALL)
        grid.set_cell(MAP_SIZE - 1, i, CellType.WALL)
        grid.set_cell(i, 0, CellType.WALL)
        grid.set_cell(i, MAP_SIZE - 1, CellType.WALL)
    for col in range(3, 7):
        grid.set_cell(4, col, CellType.WATER)
        grid.set_cell(5, col, CellType.WATER)
    grid.set_cell(2, 2, CellType.ROCK)
    grid.set_cell(7, 7, CellType.ROCK)
    grid.set_cell(2, 7, CellType.CLAY)
    grid.set_cell(7, 2, CellType.custom(1))
    return grid


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run(build_map(), window_size=(800, 600))

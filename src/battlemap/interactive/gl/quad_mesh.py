"""
どこで: `src/battlemap/interactive/gl/quad_mesh.py`。
何を: 全セルで共有する単位クアッドの VBO/IBO/VAO の確保・描画・解放を担当する。
なぜ: GPU 転送の詳細を Renderer から切り離すため。
"""

from __future__ import annotations

from typing import Any

import numpy as np


class QuadMesh:
    """
    [-1, 1] x [-1, 1] を覆う 2 三角形のメッシュ。

    頂点データは生成時に 1 度だけ転送し、以後は draw call ごとに VAO を使い回す。
    """

    # 左下, 右下, 右上, 左上
    VERTICES = np.array(
        [
            [-1.0, -1.0],
            [1.0, -1.0],
            [1.0, 1.0],
            [-1.0, 1.0],
        ],
        dtype=np.float32,
    )
    INDICES = np.array([0, 1, 2, 0, 2, 3], dtype=np.uint32)

    def __init__(self, ctx: Any, program: Any) -> None:
        """
        ctx: moderngl.Context
        program: `in_vert` 属性を持つシェーダープログラム
        """
        self.ctx = ctx
        self.program = program
        self.vbo = ctx.buffer(np.ascontiguousarray(self.VERTICES).tobytes())
        self.ibo = ctx.buffer(np.ascontiguousarray(self.INDICES).tobytes())
        self.vao = ctx.vertex_array(
            program,
            [(self.vbo, "2f", "in_vert")],
            index_buffer=self.ibo,
            index_element_size=4,
        )
        self.index_count: int = len(self.INDICES)

    def render(self) -> None:
        self.vao.render(mode=self.ctx.TRIANGLES, vertices=self.index_count)

    def release(self) -> None:
        """GPUのメモリを解放する（終了時に使う）"""
        self.vao.release()
        self.vbo.release()
        self.ibo.release()


__all__ = ["QuadMesh"]

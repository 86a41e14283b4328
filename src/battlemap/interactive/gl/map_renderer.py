# どこで: `src/battlemap/interactive/gl/map_renderer.py`。
# 何を: マップ描画用の ModernGL レンダラーをカプセル化する。
# なぜ: コンテキスト生成・シェーダ設定・メッシュ転送を描画ループから分離し、責務を明確にするため。

from __future__ import annotations

import logging

import moderngl
import numpy as np
from pyglet.window import Window

from battlemap.core.runtime_config import ColorRGB
from battlemap.interactive.gl.quad_mesh import QuadMesh
from battlemap.interactive.gl.shader import Shader
from battlemap.interactive.gl.utils import to_gl_matrix

_logger = logging.getLogger(__name__)


class MapRenderer:
    """1 セル = 1 draw call でマップを描くシンプルなレンダラー。"""

    def __init__(self, window: Window) -> None:
        window.switch_to()
        self.ctx = moderngl.create_context(require=330)
        self.program = Shader.create_shader(self.ctx)
        # 全セルで共有する単位クアッド。
        self._quad = QuadMesh(self.ctx, self.program)
        _logger.debug("renderer ready: %s", self.ctx.info.get("GL_RENDERER"))

    def viewport(self, width: int, height: int) -> None:
        """ビューポートをフレームバッファサイズに合わせて更新する。"""
        self.ctx.viewport = (0, 0, int(width), int(height))

    def clear(self, color: ColorRGB) -> None:
        """背景色でクリアする。"""
        self.ctx.clear(*color, 1.0)

    def draw_cell(self, matrix: np.ndarray, color: ColorRGB) -> None:
        """単位クアッドを `matrix` で配置し、`color` で塗る。"""
        self.program["transform"].write(to_gl_matrix(matrix))
        self.program["color"].value = (*color, 1.0)
        self._quad.render()

    def release(self) -> None:
        """GPU リソースを解放する。"""
        self._quad.release()
        self.program.release()
        self.ctx.release()


__all__ = ["MapRenderer"]

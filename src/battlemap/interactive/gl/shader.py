"""
どこで: `src/battlemap/interactive/gl/shader.py`。
何を: セル描画用の単色シェーダ（頂点 + フラグメント）を生成する。
なぜ: シェーダソースとコンパイル失敗時の扱いを Renderer から切り離すため。
"""

from __future__ import annotations

import logging

import moderngl

_logger = logging.getLogger(__name__)


class Shader:
    """単位クアッドを `transform` で配置し、`color` 一色で塗るシェーダ。"""

    VERTEX_SHADER = """
        #version 330 core
        in vec2 in_vert;
        uniform mat4 transform;
        void main() {
            gl_Position = transform * vec4(in_vert, 0.0, 1.0);
        }
    """

    FRAGMENT_SHADER = """
        #version 330 core
        uniform vec4 color;
        out vec4 frag_color;
        void main() {
            frag_color = color;
        }
    """

    @staticmethod
    def create_shader(ctx: moderngl.Context) -> moderngl.Program:
        """シェーダプログラムをコンパイル・リンクして返す。

        Raises
        ------
        moderngl.Error
            コンパイルまたはリンクに失敗した場合（ログ出力後に再送出する）。
        """

        _logger.debug("creating shader program")
        try:
            return ctx.program(
                vertex_shader=Shader.VERTEX_SHADER,
                fragment_shader=Shader.FRAGMENT_SHADER,
            )
        except moderngl.Error:
            _logger.error("shader compilation failed")
            raise


__all__ = ["Shader"]

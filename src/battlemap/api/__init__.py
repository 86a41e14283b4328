# どこで: `src/battlemap/api/__init__.py`。
# 何を: 公開 API パッケージのエントリポイントとして run を再エクスポートする。
# なぜ: `import battlemap` だけで pyglet/ModernGL を読み込まないようにするため。

from __future__ import annotations

__all__ = ["run"]


def run(*args, **kwargs):
    """公開 run API へのラッパ（遅延インポートで GUI 依存を後回しにする）。"""

    from .runner import run as _run

    return _run(*args, **kwargs)

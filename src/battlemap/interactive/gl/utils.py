from __future__ import annotations

# どこで: `src/battlemap/interactive/gl/utils.py`。
# 何を: core の行列を ModernGL の uniform 形式へ変換する小さなユーティリティを提供する。
# なぜ: core は数学的な行優先表現のまま保ち、GL 向けの転置を一箇所に集約するため。

import numpy as np


def to_gl_matrix(matrix: "np.ndarray") -> bytes:
    """(4, 4) 行列を `mat4` uniform 用（列優先 f4）のバイト列にする。"""

    m = np.asarray(matrix)
    if m.shape != (4, 4):
        raise ValueError(f"matrix は (4, 4) である必要がある: got={m.shape}")
    return np.ascontiguousarray(m.T, dtype="f4").tobytes()

from __future__ import annotations

import pytest

from battlemap.core.viewport import Viewport


@pytest.mark.parametrize("size", [(800, 0), (800, -10), (0, 600)])
def test_viewport_rejects_degenerate_size(size: tuple[int, int]) -> None:
    with pytest.raises(ValueError):
        Viewport(width=size[0], height=size[1])


def test_viewport_rejects_non_integer() -> None:
    with pytest.raises(TypeError):
        Viewport(width=800.0, height=600)  # type: ignore[arg-type]

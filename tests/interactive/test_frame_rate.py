from __future__ import annotations

import pytest

from battlemap.interactive.frame_rate import frame_interval


def test_positive_fps_is_throttled() -> None:
    assert frame_interval(60) == pytest.approx(1 / 60)
    assert frame_interval(12.5) == pytest.approx(0.08)


@pytest.mark.parametrize("fps", [0, 0.0, -30])
def test_non_positive_fps_is_unthrottled(fps: float) -> None:
    assert frame_interval(fps) is None


def test_nan_fps_raises() -> None:
    with pytest.raises(ValueError):
        frame_interval(float("nan"))

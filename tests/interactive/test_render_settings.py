from __future__ import annotations

from pathlib import Path

import pytest

from battlemap.core.cell_type import CellType
from battlemap.core.runtime_config import runtime_config, set_config_path
from battlemap.interactive.render_settings import RenderSettings


def test_color_for_builtin_tags() -> None:
    settings = RenderSettings()
    assert settings.color_for(CellType.WATER) == settings.cell_colors[CellType.WATER]
    assert settings.color_for(2) == settings.cell_colors[CellType.WALL]


def test_color_for_custom_tags_uses_custom_color() -> None:
    settings = RenderSettings(custom_color=(0.1, 0.2, 0.3))
    assert settings.color_for(CellType.CUSTOM) == (0.1, 0.2, 0.3)
    assert settings.color_for(CellType.custom(12)) == (0.1, 0.2, 0.3)


def test_color_for_rejects_reserved_tag() -> None:
    with pytest.raises(ValueError):
        RenderSettings().color_for(10)


def test_from_config_prefers_explicit_arguments(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    set_config_path(None)
    try:
        cfg = runtime_config()
        settings = RenderSettings.from_config(cfg, window_size=(320, 200))
    finally:
        set_config_path(None)

    assert settings.window_size == (320, 200)
    assert settings.background_color == cfg.background_color
    assert settings.cell_colors == cfg.cell_colors
    assert settings.caption == cfg.window_caption
    assert settings.resizable

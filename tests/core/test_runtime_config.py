from pathlib import Path

import pytest

from battlemap.core.cell_type import CellType
from battlemap.core.runtime_config import runtime_config, set_config_path


@pytest.fixture(autouse=True)
def _reset_runtime_config() -> None:
    set_config_path(None)
    yield
    set_config_path(None)


def _isolate_config_discovery(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_packaged_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    cfg = runtime_config()
    assert cfg.config_path is None
    assert cfg.window_size == (800, 600)
    assert cfg.window_caption == "battlemap"
    assert cfg.fps == 60.0
    assert cfg.background_color == (0.2, 0.3, 0.3)
    assert set(cfg.cell_colors) == {
        CellType.FLOOR,
        CellType.CLAY,
        CellType.WALL,
        CellType.ROCK,
        CellType.WATER,
    }
    assert cfg.custom_color == (1.0, 0.0, 1.0)
    assert cfg.map_size == 10


def test_runtime_config_is_cached(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)
    assert runtime_config() is runtime_config()


def test_discovered_config_overrides_single_keys(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)
    discovered = _write(
        tmp_path / ".battlemap" / "config.yaml",
        "window:\n  size: [1024, 768]\nrender:\n  cell_colors:\n    water: [0.0, 0.0, 1.0]\n",
    )

    cfg = runtime_config()
    assert cfg.config_path == discovered
    assert cfg.window_size == (1024, 768)
    # 同じセクションの他のキーは同梱デフォルトのまま。
    assert cfg.fps == 60.0
    assert cfg.background_color == (0.2, 0.3, 0.3)
    assert cfg.cell_colors[CellType.WATER] == (0.0, 0.0, 1.0)
    assert cfg.cell_colors[CellType.WALL] == (0.75, 0.3, 0.15)


def test_explicit_config_overrides_discovered_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)
    _write(tmp_path / ".battlemap" / "config.yaml", "map:\n  size: 5\n")
    explicit = _write(tmp_path / "explicit.yaml", "map:\n  size: 7\n")
    set_config_path(explicit)

    cfg = runtime_config()
    assert cfg.config_path == explicit
    assert cfg.map_size == 7


def test_home_config_is_discovered(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)
    home_cfg = _write(tmp_path / ".config" / "battlemap" / "config.yaml", "window:\n  fps: 30\n")

    cfg = runtime_config()
    assert cfg.config_path == home_cfg
    assert cfg.fps == 30.0


def test_explicit_config_path_missing_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)
    set_config_path(tmp_path / "missing.yaml")

    with pytest.raises(FileNotFoundError):
        runtime_config()


@pytest.mark.parametrize(
    "text",
    [
        "version: 2\n",
        "- not\n- a mapping\n",
        "window:\n  size: [800]\n",
        "render:\n  cell_colors:\n    lava: [1.0, 0.0, 0.0]\n",
        "render:\n  background_color: [2.0, 0.0, 0.0]\n",
        "window: [1, 2]\n",
        "map:\n  size: 0\n",
        "map:\n  size: -3\n",
    ],
)
def test_invalid_config_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, text: str):
    _isolate_config_discovery(tmp_path, monkeypatch)
    set_config_path(_write(tmp_path / "bad.yaml", text))

    with pytest.raises(RuntimeError):
        runtime_config()


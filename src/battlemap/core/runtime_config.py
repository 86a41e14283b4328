# どこで: `src/battlemap/core/runtime_config.py`。
# 何を: config.yaml による実行時設定（探索・ロード・キャッシュ）を提供する。
# なぜ: ウィンドウ寸法やセル色をコードを変えずにユーザーが指定できるようにするため。

from __future__ import annotations

from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from battlemap.core.cell_type import CellType

ColorRGB = tuple[float, float, float]


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """battlemap の実行時設定。"""

    config_path: Path | None
    window_size: tuple[int, int]
    window_caption: str
    fps: float
    background_color: ColorRGB
    cell_colors: dict[CellType, ColorRGB]
    custom_color: ColorRGB
    map_size: int


_EXPLICIT_CONFIG_PATH: Path | None = None
_CONFIG_CACHE: RuntimeConfig | None = None

# config.yaml 上のキー名 → 組み込みセル種別。
_CELL_COLOR_KEYS: dict[str, CellType] = {
    "floor": CellType.FLOOR,
    "clay": CellType.CLAY,
    "wall": CellType.WALL,
    "rock": CellType.ROCK,
    "water": CellType.WATER,
}


def set_config_path(path: str | Path | None) -> None:
    """以降の設定探索で使う明示 config パスを設定する。

    Notes
    -----
    `path` を None にすると明示指定を解除し、既定の探索に戻る。
    """

    global _EXPLICIT_CONFIG_PATH, _CONFIG_CACHE
    _CONFIG_CACHE = None
    if path is None:
        _EXPLICIT_CONFIG_PATH = None
        return
    _EXPLICIT_CONFIG_PATH = Path(str(path)).expanduser()


def _default_config_candidates() -> tuple[Path, ...]:
    return (
        Path.cwd() / ".battlemap" / "config.yaml",
        Path.home() / ".config" / "battlemap" / "config.yaml",
    )


def _as_mapping(value: Any, *, key: str) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, dict):
        return dict(value)
    raise RuntimeError(f"{key} は mapping である必要があります: got={value!r}")


def _as_int_pair(value: Any, *, key: str) -> tuple[int, int]:
    try:
        seq = list(value)
    except Exception as exc:
        raise RuntimeError(f"{key} は [x, y] の配列である必要があります: got={value!r}") from exc
    if len(seq) != 2:
        raise RuntimeError(f"{key} は [x, y] の配列である必要があります: got={value!r}")
    try:
        return (int(seq[0]), int(seq[1]))
    except Exception as exc:
        raise RuntimeError(f"{key} は [x, y] の整数配列である必要があります: got={value!r}") from exc


def _as_rgb(value: Any, *, key: str) -> ColorRGB:
    try:
        seq = [float(v) for v in value]
    except Exception as exc:
        raise RuntimeError(f"{key} は [r, g, b] の数値配列である必要があります: got={value!r}") from exc
    if len(seq) != 3:
        raise RuntimeError(f"{key} は [r, g, b] の数値配列である必要があります: got={value!r}")
    if any(v < 0.0 or v > 1.0 for v in seq):
        raise RuntimeError(f"{key} の各成分は 0..1 である必要があります: got={value!r}")
    return (seq[0], seq[1], seq[2])


def _require(mapping: dict[str, Any], name: str, *, key: str) -> Any:
    value = mapping.get(name)
    if value is None:
        raise RuntimeError(
            f"{key} が未設定です（同梱 default_config.yaml を確認してください）"
        )
    return value


def _load_yaml_text(text: str, *, source: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"config.yaml の読み込みに失敗しました: source={source}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml は mapping である必要があります: source={source}")
    return dict(data)


def _load_yaml_config(path: Path) -> dict[str, Any]:
    return _load_yaml_text(path.read_text(encoding="utf-8"), source=str(path))


def _load_packaged_default_config() -> dict[str, Any]:
    blob = (
        resources.files("battlemap")
        .joinpath("resource", "default_config.yaml")
        .read_text(encoding="utf-8")
    )
    return _load_yaml_text(blob, source="battlemap/resource/default_config.yaml")


def _parse_config(payload: dict[str, Any], *, config_path: Path | None) -> RuntimeConfig:
    version = _require(payload, "version", key="version")
    try:
        version_i = int(version)
    except Exception as exc:
        raise RuntimeError(f"config.yaml の version は整数である必要があります: got={version!r}") from exc
    if version_i != 1:
        raise RuntimeError(f"未対応の config.yaml version です: got={version_i}")

    window = _as_mapping(payload.get("window"), key="window")
    window_size = _as_int_pair(_require(window, "size", key="window.size"), key="window.size")
    if window_size[0] < 1 or window_size[1] < 1:
        raise RuntimeError(f"window.size は正の値である必要があります: got={window_size}")
    caption = str(window.get("caption", "battlemap"))
    try:
        fps = float(_require(window, "fps", key="window.fps"))
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"window.fps は数値である必要があります: got={window.get('fps')!r}") from exc

    render = _as_mapping(payload.get("render"), key="render")
    background = _as_rgb(
        _require(render, "background_color", key="render.background_color"),
        key="render.background_color",
    )
    colors_payload = _as_mapping(render.get("cell_colors"), key="render.cell_colors")
    unknown = sorted(set(colors_payload) - set(_CELL_COLOR_KEYS))
    if unknown:
        raise RuntimeError(f"render.cell_colors に未知のキーがあります: {unknown}")
    cell_colors: dict[CellType, ColorRGB] = {}
    for name, cell_type in _CELL_COLOR_KEYS.items():
        cell_colors[cell_type] = _as_rgb(
            _require(colors_payload, name, key=f"render.cell_colors.{name}"),
            key=f"render.cell_colors.{name}",
        )
    custom_color = _as_rgb(
        _require(render, "custom_color", key="render.custom_color"),
        key="render.custom_color",
    )

    map_section = _as_mapping(payload.get("map"), key="map")
    try:
        map_size = int(_require(map_section, "size", key="map.size"))
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"map.size は整数である必要があります: got={map_section.get('size')!r}") from exc
    if map_size < 1:
        raise RuntimeError(f"map.size は 1 以上である必要があります: got={map_size}")

    return RuntimeConfig(
        config_path=config_path,
        window_size=window_size,
        window_caption=caption,
        fps=fps,
        background_color=background,
        cell_colors=cell_colors,
        custom_color=custom_color,
        map_size=map_size,
    )


def _merge_sections(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    # mapping 同士は再帰的にマージし、それ以外（配列・スカラー）は後勝ちで置き換える。
    out = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge_sections(out[key], value)
        else:
            out[key] = value
    return out


def runtime_config() -> RuntimeConfig:
    """実行時設定をロードして返す（キャッシュ）。

    上書き順（後勝ち）:
    1) 同梱 default_config.yaml
    2) `./.battlemap/config.yaml` / `~/.config/battlemap/config.yaml`（先に見つかった方）
    3) `run(..., config_path=...)` の `config_path`
    """

    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    explicit_path = _EXPLICIT_CONFIG_PATH
    if explicit_path is not None and not explicit_path.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit_path}")

    discovered_path: Path | None = None
    for p in _default_config_candidates():
        if p.is_file():
            discovered_path = p
            break

    payload = _load_packaged_default_config()
    if discovered_path is not None:
        payload = _merge_sections(payload, _load_yaml_config(discovered_path))
    if explicit_path is not None:
        payload = _merge_sections(payload, _load_yaml_config(explicit_path))

    cfg = _parse_config(payload, config_path=explicit_path or discovered_path)
    _CONFIG_CACHE = cfg
    return cfg


__all__ = ["ColorRGB", "RuntimeConfig", "runtime_config", "set_config_path"]

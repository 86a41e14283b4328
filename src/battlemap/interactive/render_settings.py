# どこで: `src/battlemap/interactive/render_settings.py`。
# 何を: interactive 描画設定の束（ウィンドウ寸法・背景色・セル色）を表すデータクラスを定義する。
# なぜ: `run` の引数を簡潔に保ちつつ、interactive 側の設定を一元管理するため。

from __future__ import annotations

from dataclasses import dataclass, field

from battlemap.core.cell_type import CellType, is_custom_tag, validate_cell_tag
from battlemap.core.runtime_config import ColorRGB, RuntimeConfig


def _default_cell_colors() -> dict[CellType, ColorRGB]:
    return {
        CellType.FLOOR: (0.35, 0.35, 0.35),
        CellType.CLAY: (0.65, 0.4, 0.2),
        CellType.WALL: (0.75, 0.3, 0.15),
        CellType.ROCK: (0.6, 0.6, 0.65),
        CellType.WATER: (0.15, 0.35, 0.8),
    }


@dataclass(frozen=True, slots=True)
class RenderSettings:
    """リアルタイム描画に用いる設定値の集合。"""

    window_size: tuple[int, int] = (800, 600)
    background_color: ColorRGB = (0.2, 0.3, 0.3)
    cell_colors: dict[CellType, ColorRGB] = field(default_factory=_default_cell_colors)
    custom_color: ColorRGB = (1.0, 0.0, 1.0)
    caption: str = "battlemap"
    resizable: bool = True

    @classmethod
    def from_config(
        cls,
        cfg: RuntimeConfig,
        *,
        window_size: tuple[int, int] | None = None,
        background_color: ColorRGB | None = None,
    ) -> "RenderSettings":
        """RuntimeConfig から設定を作る。引数で渡した値は config より優先する。"""

        return cls(
            window_size=window_size if window_size is not None else cfg.window_size,
            background_color=(
                background_color if background_color is not None else cfg.background_color
            ),
            cell_colors=dict(cfg.cell_colors),
            custom_color=cfg.custom_color,
            caption=cfg.window_caption,
        )

    def color_for(self, tag: int) -> ColorRGB:
        """セルタグの描画色を返す。拡張タグは `custom_color` で塗る。"""

        value = validate_cell_tag(tag)
        if is_custom_tag(value):
            return self.custom_color
        return self.cell_colors[CellType(value)]


__all__ = ["RenderSettings"]

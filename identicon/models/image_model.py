"""Модели данных идентикона.

Принципы:
- SRP: только структура данных, без логики генерации.
- Чистый код: неизменяемость (`frozen=True`), каждый этап возвращает новую копию.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

# Фиксированная геометрия: 5x5 клеток по 50px
GRID_SIZE = 5
CELL_SIZE = 50
CANVAS_SIZE = GRID_SIZE * CELL_SIZE
CHUNK_SIZE = 3
DIGEST_SIZE = 16
BACKGROUND_COLOR: Tuple[int, int, int] = (255, 255, 255)

Color = Tuple[int, int, int]
Point = Tuple[int, int]
Rect = Tuple[Point, Point]


class GridCell(NamedTuple):
    """Клетка сетки: значение байта и позиция в порядке row-major."""
    value: int
    index: int


@dataclass(frozen=True)
class ImageDescriptor:
    """Неизменяемое описание идентикона, накапливающее поля по этапам.

    Fields:
        hex: Байты MD5-дайджеста (16 значений 0..255).
        color: Цвет заливки (R, G, B), берётся из первых трёх байт.
        grid: Клетки сетки; 25 штук до фильтрации, чётные после.
        pixel_map: Прямоугольники (top_left, bottom_right) для закрашиваемых клеток.
    """
    hex: Tuple[int, ...]
    color: Optional[Color] = None
    grid: Optional[Tuple[GridCell, ...]] = None
    pixel_map: Optional[Tuple[Rect, ...]] = None

"""
core/utils.py

Общие константы и утилиты для симулятора.
"""

from enum import Enum
from typing import Dict, List, Tuple

Coordinate = Tuple[int, int]
Offset = Tuple[int, int]

# Размер доски по умолчанию
DEFAULT_BOARD_SIZE = 9

# Количество вырезанных клеток (по 3 в каждом углу)
UNUSABLE_COUNT = 12

# Порядок проверки направлений фиксирован: вправо, вниз, вверх, влево.
# От него зависит, какой ход выбирается при нескольких допустимых.
DIRECTIONS: List[Tuple[int, int]] = [(0, 1), (1, 0), (-1, 0), (0, -1)]


class CellState(Enum):
    """Состояние клетки доски."""
    UNUSABLE = 0
    EMPTY = 1
    OCCUPIED = 2


# Символы для отображения
SYMBOLS: Dict[CellState, str] = {
    CellState.UNUSABLE: ' ',
    CellState.EMPTY: '.',
    CellState.OCCUPIED: '@',
}


def is_valid_position(r: int, c: int, size: int) -> bool:
    """Проверяет, находится ли позиция в пределах доски."""
    return 0 <= r < size and 0 <= c < size


def initial_score(size: int) -> int:
    """Количество колышков на свежей доске."""
    return size * size - UNUSABLE_COUNT - 1

"""
peg_io/parser.py

Разбор текстового представления доски (обратное к render_board).
"""

from typing import Dict

from core.board import Board
from core.utils import CellState, SYMBOLS

_STATES: Dict[str, CellState] = {symbol: state for state, symbol in SYMBOLS.items()}


def parse_board(text: str) -> Board:
    """
    Парсит доску из текста: ' ' — вырезано, '.' — пусто, '@' — колышек.

    Короткие строки дополняются пробелами справа.

    Args:
        text: строки доски, разделённые переводом строки

    Returns:
        Board

    Raises:
        ValueError: если доска не квадратная нечётная или есть лишние символы
    """
    lines = text.split('\n')
    while lines and not lines[-1].strip():
        lines.pop()

    size = len(lines)
    if size == 0 or size % 2 != 1:
        raise ValueError(f"Ожидается нечётное число строк, получено {size}")

    cells = []
    for r, line in enumerate(lines):
        if len(line) > size:
            raise ValueError(f"Строка {r} длиннее {size} символов: {line!r}")
        row = []
        for ch in line.ljust(size):
            state = _STATES.get(ch)
            if state is None:
                raise ValueError(f"Неизвестный символ {ch!r} в строке {r}")
            row.append(state)
        cells.append(row)

    return Board(size, cells)

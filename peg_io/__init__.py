"""
peg_io - Ввод/вывод для симулятора

Экспортирует:
- Отрисовку доски и ходов
- Итог симуляции
- Консольную анимацию
- Парсинг доски из текста
"""

from .parser import parse_board
from .visualizer import (
    render_board, render_rows, format_move, format_moves, format_summary,
    ConsolePresenter, FrameRecorder, FRAME_DELAY
)

__all__ = [
    'parse_board',
    'render_board',
    'render_rows',
    'format_move',
    'format_moves',
    'format_summary',
    'ConsolePresenter',
    'FrameRecorder',
    'FRAME_DELAY',
]

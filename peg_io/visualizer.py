"""
peg_io/visualizer.py

Визуализация доски, ходов и итогов симуляции.
"""

import os
import sys
import time
from typing import List, Optional, TextIO

from core.board import Board
from core.moves import Move
from core.utils import SYMBOLS
from simulation.base import SimulationResult
from utils.error_handling import InvariantViolation

# Пауза между кадрами анимации, секунды
FRAME_DELAY = 0.5

MOVE_SEPARATOR = " ; "


def render_board(board: Board) -> str:
    """
    Текстовое представление доски: ' ' — вырезано, '.' — пусто, '@' — колышек.

    Каждая строка доски заканчивается переводом строки.
    """
    lines = []
    for row in board.cells:
        chars = []
        for cell in row:
            symbol = SYMBOLS.get(cell)
            if symbol is None:
                raise InvariantViolation(f"Неизвестное состояние клетки: {cell!r}")
            chars.append(symbol)
        lines.append(''.join(chars) + '\n')
    return ''.join(lines)


def render_rows(board: Board) -> List[str]:
    """Строки доски без переводов строк."""
    return render_board(board).splitlines()


def format_move(move: Move) -> str:
    """Ход в виде (r, c) ~> (r, c)."""
    return str(move)


def format_moves(moves: List[Move]) -> str:
    return MOVE_SEPARATOR.join(format_move(m) for m in moves)


def format_summary(result: SimulationResult) -> str:
    """
    Итог симуляции: сид, счёт, число ходов и сами ходы.

    Args:
        result: итог симуляции

    Returns:
        Строка для вывода
    """
    return (
        f"Using seed {result.seed}.\n"
        f"Ended with {result.score} matches remaining. "
        f"Took {result.move_count} moves:\n"
        f"{format_moves(result.moves)}\n"
    )


def clear_screen() -> None:
    os.system('cls' if os.name == 'nt' else 'clear')


class ConsolePresenter:
    """
    Анимация партии в консоли.

    Перед каждым кадром, кроме первого, ждёт delay секунд.
    """

    def __init__(self, delay: float = FRAME_DELAY, clear: bool = True,
                 stream: Optional[TextIO] = None):
        self.delay = delay
        self.clear = clear
        self.stream = stream if stream is not None else sys.stdout
        self.frames = 0

    def show_board(self, board: Board) -> None:
        if self.frames and self.delay > 0:
            time.sleep(self.delay)
        if self.clear:
            self.stream.flush()
            clear_screen()
        self.stream.write(render_board(board))
        self.stream.flush()
        self.frames += 1

    def show_summary(self, result: SimulationResult) -> None:
        self.stream.write(format_summary(result))
        self.stream.flush()


class FrameRecorder:
    """Собирает кадры вместо вывода (для web API и тестов)."""

    def __init__(self):
        self.frames: List[List[str]] = []
        self.summary: Optional[str] = None

    def show_board(self, board: Board) -> None:
        self.frames.append(render_rows(board))

    def show_summary(self, result: SimulationResult) -> None:
        self.summary = format_summary(result)

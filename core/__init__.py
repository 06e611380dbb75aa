"""
core - Ядро симулятора

Доска, поиск и применение ходов.
"""

from .board import Board, make_board, get_score
from .moves import Move, find_move, apply_move, get_all_moves, is_valid_move
from .utils import (
    CellState, Coordinate, Offset, DIRECTIONS, SYMBOLS,
    DEFAULT_BOARD_SIZE, UNUSABLE_COUNT, initial_score
)

__all__ = [
    'Board', 'make_board', 'get_score',
    'Move', 'find_move', 'apply_move', 'get_all_moves', 'is_valid_move',
    'CellState', 'Coordinate', 'Offset', 'DIRECTIONS', 'SYMBOLS',
    'DEFAULT_BOARD_SIZE', 'UNUSABLE_COUNT', 'initial_score'
]

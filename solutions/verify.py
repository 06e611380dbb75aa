"""
solutions/verify.py

Проверка истории ходов повторным проигрыванием на свежей доске.
"""

from typing import Iterable, Optional

from core.board import Board, get_score
from core.moves import Move, is_valid_move, apply_move, get_all_moves
from core.utils import DEFAULT_BOARD_SIZE
from simulation.base import SimulationResult


def replay_moves(moves: Iterable[Move], size: int = DEFAULT_BOARD_SIZE) -> Optional[Board]:
    """
    Проигрывает ходы со стартовой позиции.

    Returns:
        Итоговая доска или None, если какой-то ход недопустим
    """
    board = Board.create(size)
    for move in moves:
        if not is_valid_move(board, move):
            return None
        apply_move(board, move)
    return board


def verify_history(moves: Iterable[Move], size: int = DEFAULT_BOARD_SIZE,
                   expected_score: Optional[int] = None) -> bool:
    """
    Проверяет корректность истории ходов.

    Правила:
    - каждый ход допустим на доске, полученной предыдущими ходами;
    - если expected_score задан, итоговое число колышков с ним совпадает.
    """
    board = replay_moves(moves, size)
    if board is None:
        return False
    if expected_score is not None and get_score(board) != expected_score:
        return False
    return True


def verify_result(result: SimulationResult) -> bool:
    """
    Проверяет итог симуляции: ходы допустимы, счёт совпадает,
    и в финальной позиции не осталось ходов.
    """
    board = replay_moves(result.moves, result.size)
    if board is None:
        return False
    if get_score(board) != result.score:
        return False
    return not get_all_moves(board)

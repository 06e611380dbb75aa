"""
core/moves.py

Поиск и применение ходов.

Поиск детерминирован: клетки перебираются построчно, но индексы сдвигаются
по модулю размера доски на переданный offset (тороидальный поворот обхода).
Случайность появляется только через выбор offset вызывающей стороной.
"""

from dataclasses import dataclass
from typing import List, Optional

from utils.error_handling import InvariantViolation
from .board import Board
from .utils import CellState, Coordinate, DIRECTIONS, Offset


@dataclass(frozen=True)
class Move:
    """Прыжок колышка из origin в destination через соседнюю клетку."""
    origin: Coordinate
    destination: Coordinate

    @property
    def jumped(self) -> Coordinate:
        """Клетка, через которую прыгает колышек."""
        (fr, fc), (tr, tc) = self.origin, self.destination
        return (fr + tr) // 2, (fc + tc) // 2

    def __str__(self) -> str:
        (fr, fc), (tr, tc) = self.origin, self.destination
        return f"({fr}, {fc}) ~> ({tr}, {tc})"


def _jump_from(board: Board, row: int, column: int, dr: int, dc: int) -> Optional[Move]:
    """Ход из (row, column) в направлении (dr, dc), если он допустим."""
    if board.get(row + dr, column + dc) is not CellState.OCCUPIED:
        return None
    target_row, target_column = row + 2 * dr, column + 2 * dc
    if board.get(target_row, target_column) is not CellState.EMPTY:
        return None
    return Move((row, column), (target_row, target_column))


def find_move(board: Board, offset: Offset) -> Optional[Move]:
    """
    Находит первый допустимый ход в повёрнутом порядке обхода.

    Args:
        board: текущая доска
        offset: (row_offset, column_offset) — произвольные целые

    Returns:
        Move или None, если ходов нет
    """
    size = board.size
    row_offset, column_offset = offset

    for row in range(size):
        for column in range(size):
            r = (row + row_offset) % size
            c = (column + column_offset) % size

            cell = board.get(r, c)
            if cell is None:
                raise InvariantViolation(f"Повёрнутая клетка ({r}, {c}) вне доски")
            if cell is not CellState.OCCUPIED:
                continue

            for dr, dc in DIRECTIONS:
                move = _jump_from(board, r, c, dr, dc)
                if move is not None:
                    return move
    return None


def get_all_moves(board: Board) -> List[Move]:
    """Все допустимые ходы в порядке обхода без сдвига."""
    moves = []
    for r in range(board.size):
        for c in range(board.size):
            if board.get(r, c) is not CellState.OCCUPIED:
                continue
            for dr, dc in DIRECTIONS:
                move = _jump_from(board, r, c, dr, dc)
                if move is not None:
                    moves.append(move)
    return moves


def is_valid_move(board: Board, move: Move) -> bool:
    """Проверка допустимости хода на доске."""
    (fr, fc), (tr, tc) = move.origin, move.destination
    distance = (abs(tr - fr), abs(tc - fc))
    if distance not in ((0, 2), (2, 0)):
        return False
    jr, jc = move.jumped
    return (
        board.get(fr, fc) is CellState.OCCUPIED and
        board.get(jr, jc) is CellState.OCCUPIED and
        board.get(tr, tc) is CellState.EMPTY
    )


def apply_move(board: Board, move: Move) -> None:
    """
    Применяет ход к доске (мутирует её).

    Raises:
        InvariantViolation: если ход недопустим; доска не меняется
    """
    if not is_valid_move(board, move):
        raise InvariantViolation(f"Недопустимый ход {move}")

    board.set(*move.origin, CellState.EMPTY)
    board.set(*move.jumped, CellState.EMPTY)
    board.set(*move.destination, CellState.OCCUPIED)

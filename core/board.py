"""
core/board.py

Представление доски: квадратная сетка нечётного размера с вырезанными углами.
"""

from typing import List, Optional

from utils.error_handling import InvalidBoardError
from .utils import (
    CellState, DEFAULT_BOARD_SIZE, is_valid_position
)


class Board:
    """
    Изменяемая доска N×N.

    Принадлежит одной симуляции, между запусками не разделяется.
    """
    __slots__ = ('size', 'cells')

    def __init__(self, size: int, cells: List[List[CellState]]):
        self.size = size
        self.cells = cells

    @classmethod
    def create(cls, size: int = DEFAULT_BOARD_SIZE) -> 'Board':
        """
        Создаёт стартовую доску-крест.

        Углы вырезаны (по три клетки на угол), центр пустой,
        все остальные клетки заняты.

        Raises:
            InvalidBoardError: если размер чётный или меньше 5
        """
        if size % 2 != 1:
            raise InvalidBoardError(f"Размер доски должен быть нечётным: {size}")
        if size < 5:
            raise InvalidBoardError(f"Размер доски должен быть не меньше 5: {size}")

        cells = [[CellState.OCCUPIED for _ in range(size)] for _ in range(size)]

        for r in (0, size - 1):
            for c in (0, 1, size - 2, size - 1):
                cells[r][c] = CellState.UNUSABLE

        for r in (1, size - 2):
            for c in (0, size - 1):
                cells[r][c] = CellState.UNUSABLE

        cells[size // 2][size // 2] = CellState.EMPTY
        return cls(size, cells)

    def get(self, row: int, column: int) -> Optional[CellState]:
        """Состояние клетки или None, если координата вне доски."""
        if not is_valid_position(row, column, self.size):
            return None
        return self.cells[row][column]

    def set(self, row: int, column: int, state: CellState) -> None:
        if not is_valid_position(row, column, self.size):
            raise IndexError(f"Клетка ({row}, {column}) вне доски {self.size}x{self.size}")
        self.cells[row][column] = state

    def peg_count(self) -> int:
        """Количество колышков — O(N²)."""
        return sum(row.count(CellState.OCCUPIED) for row in self.cells)

    def count(self, state: CellState) -> int:
        return sum(row.count(state) for row in self.cells)

    def copy(self) -> 'Board':
        return Board(self.size, [list(row) for row in self.cells])

    def to_matrix(self) -> List[List[str]]:
        """Конвертирует доску в матрицу имён состояний (для JSON)."""
        return [[cell.name for cell in row] for row in self.cells]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return False
        return self.size == other.size and self.cells == other.cells

    def __repr__(self) -> str:
        return f"Board({self.size}x{self.size}, {self.peg_count()} pegs)"


def make_board(size: int = DEFAULT_BOARD_SIZE) -> Board:
    """Создаёт стартовую доску заданного размера."""
    return Board.create(size)


def get_score(board: Board) -> int:
    """Счёт — количество оставшихся колышков."""
    return board.peg_count()

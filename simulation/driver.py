"""
simulation/driver.py

Симуляция одной партии из заданного сида.

Автомат с двумя состояниями: RUNNING → (ход найден) → RUNNING,
RUNNING → (хода нет) → HALTED.
"""

from typing import List, Optional

from core.board import Board, get_score
from core.moves import Move, apply_move, find_move
from core.utils import DEFAULT_BOARD_SIZE
from utils.error_handling import validate_board
from .base import Presenter, SimulationResult, SimulationState
from .rng import PegRandom


class Simulation:
    """
    Одна партия: доска, генератор и история ходов.

    Каждый шаг берёт из генератора два значения (строка, столбец),
    ищет первый ход в повёрнутом обходе и применяет его.
    """

    def __init__(self, seed: int, size: int = DEFAULT_BOARD_SIZE,
                 presenter: Optional[Presenter] = None,
                 board: Optional[Board] = None):
        """
        Args:
            seed: сид генератора
            size: размер доски (игнорируется, если передан board)
            presenter: получатель снимков доски или None
            board: начальная позиция (по умолчанию — стартовая доска)
        """
        if board is None:
            board = Board.create(size)
        else:
            validate_board(board)

        self.seed = seed
        self.board = board
        self.rng = PegRandom(seed)
        self.presenter = presenter
        self.moves: List[Move] = []
        self.score = get_score(board)
        self.state = SimulationState.RUNNING

        if self.presenter is not None:
            self.presenter.show_board(self.board)

    @property
    def halted(self) -> bool:
        return self.state is SimulationState.HALTED

    def step(self) -> Optional[Move]:
        """
        Делает один ход.

        Returns:
            Сыгранный ход или None, если ходов больше нет
        """
        if self.halted:
            return None

        move = find_move(self.board, self.rng.next_offset())
        if move is None:
            self.state = SimulationState.HALTED
            return None

        apply_move(self.board, move)
        self.moves.append(move)
        self.score -= 1

        if self.presenter is not None:
            self.presenter.show_board(self.board)
        return move

    def result(self) -> SimulationResult:
        return SimulationResult(
            seed=self.seed,
            size=self.board.size,
            score=self.score,
            moves=list(self.moves),
        )

    def run(self) -> SimulationResult:
        """Играет до остановки и возвращает итог."""
        while self.step() is not None:
            pass

        result = self.result()
        if self.presenter is not None:
            self.presenter.show_summary(result)
        return result


def run_simulation(seed: int, size: int = DEFAULT_BOARD_SIZE,
                   presenter: Optional[Presenter] = None) -> SimulationResult:
    """Запускает одну симуляцию из сида."""
    return Simulation(seed, size=size, presenter=presenter).run()

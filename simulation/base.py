"""
simulation/base.py

Результаты и статистика симуляций.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Protocol

from core.board import Board
from core.moves import Move


class SimulationState(Enum):
    RUNNING = 'running'
    HALTED = 'halted'


@dataclass
class SimulationResult:
    """Итог одной симуляции."""
    seed: int
    size: int
    score: int
    moves: List[Move] = field(default_factory=list)

    @property
    def move_count(self) -> int:
        return len(self.moves)

    @property
    def is_win(self) -> bool:
        return self.score == 1

    def to_dict(self) -> dict:
        return {
            'seed': self.seed,
            'size': self.size,
            'score': self.score,
            'move_count': self.move_count,
            'moves': [[list(m.origin), list(m.destination)] for m in self.moves],
        }


@dataclass
class SearchStats:
    """Статистика поиска лучшего сида."""
    runs: int = 0
    batches: int = 0
    best_score: Optional[int] = None
    best_seed: Optional[int] = None
    winning_seed: Optional[int] = None
    time_elapsed: float = 0.0

    def __str__(self) -> str:
        return (
            f"Runs: {self.runs}, "
            f"Batches: {self.batches}, "
            f"Best: {self.best_score} (seed {self.best_seed}), "
            f"Time: {self.time_elapsed:.3f}s"
        )


class Presenter(Protocol):
    """Получатель снимков доски и итогов симуляции."""

    def show_board(self, board: Board) -> None:
        ...

    def show_summary(self, result: SimulationResult) -> None:
        ...

"""
simulation/search.py

Поиск сида, при котором партия заканчивается одним колышком.

Сиды берутся из отдельного генератора, пересеваемого от времени после
каждой пачки запусков. Лучший результат пачки отдаётся в on_batch и лог,
после чего отслеживание сбрасывается.
"""

import threading
import time
from typing import Callable, Optional, Tuple

from core.utils import DEFAULT_BOARD_SIZE
from utils.error_handling import InvariantViolation
from utils.logging import get_logger
from .base import SearchStats, SimulationResult
from .driver import run_simulation
from .rng import PegRandom, fresh_seed

DEFAULT_BATCH_SIZE = 100000

Runner = Callable[[int, int], SimulationResult]
BatchCallback = Callable[[int, Optional[int], Optional[int]], None]


class BestTracker:
    """Минимальный счёт и его сид в текущей пачке. Потокобезопасен."""

    def __init__(self):
        self._lock = threading.Lock()
        self.runs = 0
        self.best_score: Optional[int] = None
        self.best_seed: Optional[int] = None

    def update(self, seed: int, score: int) -> bool:
        """Учитывает запуск. Возвращает True, если это новый лучший счёт."""
        with self._lock:
            self.runs += 1
            if self.best_score is None or score < self.best_score:
                self.best_score = score
                self.best_seed = seed
                return True
            return False

    def snapshot(self) -> Tuple[int, Optional[int], Optional[int]]:
        with self._lock:
            return self.runs, self.best_score, self.best_seed

    def reset(self) -> None:
        with self._lock:
            self.runs = 0
            self.best_score = None
            self.best_seed = None


class SeedSearch:
    """
    Последовательный поиск выигрышного сида.

    Особенности:
    - каждый запуск — независимая симуляция со своим генератором
    - после batch_size запусков — отчёт и пересев генератора сидов
    - остановка на первом счёте 1 (после повторной проверки сида)
    - max_runs ограничивает поиск; без него поиск может не завершиться
    """

    def __init__(self, size: int = DEFAULT_BOARD_SIZE,
                 batch_size: int = DEFAULT_BATCH_SIZE,
                 max_runs: Optional[int] = None,
                 runner: Runner = run_simulation,
                 seed_source: Optional[PegRandom] = None,
                 reseed: Callable[[], int] = fresh_seed,
                 on_batch: Optional[BatchCallback] = None,
                 verbose: bool = False):
        """
        Args:
            size: размер доски
            batch_size: запусков в одной пачке
            max_runs: предел запусков (None — без предела)
            runner: функция (seed, size) -> SimulationResult
            seed_source: генератор сидов (по умолчанию сеется через reseed)
            reseed: источник сида для генератора сидов
            on_batch: вызывается с (runs, best_score, best_seed) после пачки
            verbose: логировать каждый новый лучший результат
        """
        if batch_size < 1:
            raise ValueError(f"batch_size должен быть положительным: {batch_size}")
        self.size = size
        self.batch_size = batch_size
        self.max_runs = max_runs
        self.runner = runner
        self.reseed = reseed
        self.seed_source = seed_source if seed_source is not None else PegRandom(reseed())
        self.on_batch = on_batch
        self.verbose = verbose
        self.tracker = BestTracker()
        self.stats = SearchStats()
        self.logger = get_logger()

    def _log(self, message: str) -> None:
        if self.verbose:
            self.logger.debug(f"[{self.__class__.__name__}] {message}")

    def _exhausted(self) -> bool:
        return self.max_runs is not None and self.stats.runs >= self.max_runs

    def _record(self, seed: int, score: int) -> bool:
        """Учитывает результат запуска. True — найден выигрыш."""
        if score < 1:
            raise InvariantViolation(f"Сид {seed} дал счёт {score} < 1")

        self.stats.runs += 1
        if self.tracker.update(seed, score):
            self._log(f"Новый лучший счёт {score} для сида {seed}")
        if self.stats.best_score is None or score < self.stats.best_score:
            self.stats.best_score = score
            self.stats.best_seed = seed
        return score == 1

    def _finish_batch(self) -> None:
        runs, best_score, best_seed = self.tracker.snapshot()
        self.stats.batches += 1
        self.logger.debug(f"best score in {runs} runs is {best_score} for seed {best_seed}")
        if self.on_batch is not None:
            self.on_batch(runs, best_score, best_seed)
        self.tracker.reset()
        self.seed_source.reseed(self.reseed())

    def _confirm(self, seed: int) -> int:
        """Переигрывает выигрышный сид и проверяет, что счёт снова равен 1."""
        replay = self.runner(seed, self.size)
        if replay.score != 1:
            raise InvariantViolation(
                f"Сид {seed} не воспроизводится: повторный счёт {replay.score}"
            )
        self._log(f"Сид {seed} подтверждён ({replay.move_count} ходов)")
        self.stats.winning_seed = seed
        return seed

    def search(self) -> Optional[int]:
        """
        Ищет выигрышный сид.

        Returns:
            Сид со счётом 1 или None, если исчерпан max_runs
        """
        self.stats = SearchStats()
        self.tracker.reset()
        start = time.time()

        try:
            while not self._exhausted():
                seed = self.seed_source.next_seed()
                result = self.runner(seed, self.size)
                if self._record(seed, result.score):
                    return self._confirm(seed)
                if self.tracker.runs >= self.batch_size:
                    self._finish_batch()
            return None
        finally:
            self.stats.time_elapsed = time.time() - start
            self._log(f"Поиск завершён. {self.stats}")


"""
simulation/parallel.py

Параллельный поиск сида — симуляции раздаются процессам.
"""

from concurrent.futures import Executor, ProcessPoolExecutor, as_completed
from typing import Callable, List, Optional
import multiprocessing
import time

from .base import SearchStats
from .search import SeedSearch

# Сидов на одного работника за раунд
ROUND_FACTOR = 64


class ParallelSeedSearch(SeedSearch):
    """
    Параллельный поиск выигрышного сида.

    Алгоритм:
    1. Генератор сидов выдаёт раунд сидов (не больше остатка пачки)
    2. Каждая симуляция запускается в пуле независимо
    3. Результаты учитываются в общем BestTracker под блокировкой
    4. Если в раунде есть счёт 1 — берётся первый такой сид в порядке выдачи

    Симуляции не разделяют состояние, поэтому порядок завершения
    на результат не влияет.
    """

    def __init__(self, num_workers: Optional[int] = None,
                 executor_factory: Callable[[int], Executor] = ProcessPoolExecutor,
                 **kwargs):
        """
        Args:
            num_workers: количество процессов (по умолчанию — число CPU)
            executor_factory: конструктор пула, принимает max_workers
            **kwargs: параметры SeedSearch
        """
        super().__init__(**kwargs)
        self.num_workers = num_workers or multiprocessing.cpu_count()
        self.executor_factory = executor_factory

    def _round_size(self) -> int:
        size = min(self.num_workers * ROUND_FACTOR, self.batch_size - self.tracker.runs)
        if self.max_runs is not None:
            size = min(size, self.max_runs - self.stats.runs)
        return size

    def _run_round(self, executor: Executor, seeds: List[int]) -> Optional[int]:
        futures = {executor.submit(self.runner, seed, self.size): seed for seed in seeds}
        winners = []
        for future in as_completed(futures):
            seed = futures[future]
            result = future.result()
            if self._record(seed, result.score):
                winners.append(seed)
        if winners:
            return min(winners, key=seeds.index)
        return None

    def search(self) -> Optional[int]:
        self.stats = SearchStats()
        self.tracker.reset()
        start = time.time()
        self._log(f"Параллельный поиск (процессов: {self.num_workers})")

        try:
            with self.executor_factory(max_workers=self.num_workers) as executor:
                while not self._exhausted():
                    seeds = [self.seed_source.next_seed() for _ in range(self._round_size())]
                    winner = self._run_round(executor, seeds)
                    if winner is not None:
                        return self._confirm(winner)
                    if self.tracker.runs >= self.batch_size:
                        self._finish_batch()
            return None
        finally:
            self.stats.time_elapsed = time.time() - start
            self._log(f"Поиск завершён. {self.stats}")

"""
simulation - Симуляции и поиск сидов

Экспортирует:
- Simulation, run_simulation: одна партия из сида
- SeedSearch: последовательный поиск выигрышного сида
- ParallelSeedSearch: то же на пуле процессов
- PegRandom, fresh_seed: генератор сдвигов и сидов
"""

from .base import SimulationResult, SimulationState, SearchStats, Presenter
from .rng import PegRandom, fresh_seed, RAND_BITS, RAND_MAX
from .driver import Simulation, run_simulation
from .search import SeedSearch, BestTracker, DEFAULT_BATCH_SIZE
from .parallel import ParallelSeedSearch

__all__ = [
    'SimulationResult', 'SimulationState', 'SearchStats', 'Presenter',
    'PegRandom', 'fresh_seed', 'RAND_BITS', 'RAND_MAX',
    'Simulation', 'run_simulation',
    'SeedSearch', 'BestTracker', 'DEFAULT_BATCH_SIZE',
    'ParallelSeedSearch',
]

"""
simulation/rng.py

Генератор псевдослучайных сдвигов.

Каждая симуляция владеет своим экземпляром, глобальное состояние
модуля random не используется.
"""

import random
import time

from core.utils import Offset

# Диапазон значений как у rand(): [0, 2**31)
RAND_BITS = 31
RAND_MAX = (1 << RAND_BITS) - 1


class PegRandom:
    """Воспроизводимый поток целых для данного сида."""
    __slots__ = ('seed', '_random')

    def __init__(self, seed: int):
        self.seed = seed
        self._random = random.Random(seed)

    def next_value(self) -> int:
        return self._random.getrandbits(RAND_BITS)

    def next_offset(self) -> Offset:
        """Два значения подряд: сначала строка, потом столбец."""
        row = self.next_value()
        column = self.next_value()
        return row, column

    def next_seed(self) -> int:
        """Ненулевой сид для следующей симуляции (0 зарезервирован)."""
        return self._random.randint(1, RAND_MAX)

    def reseed(self, seed: int) -> None:
        self.seed = seed
        self._random.seed(seed)


def fresh_seed() -> int:
    """Новый ненулевой сид, полученный из текущего времени."""
    return PegRandom(time.time_ns()).next_seed()

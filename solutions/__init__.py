"""
solutions - Проверка историй ходов.
"""

from .verify import replay_moves, verify_history, verify_result

__all__ = [
    'replay_moves',
    'verify_history',
    'verify_result',
]

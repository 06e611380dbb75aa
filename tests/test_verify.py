"""
tests/test_verify.py

Тесты для проверки историй ходов.
"""

from core.moves import Move
from simulation import SimulationResult, run_simulation
from solutions.verify import replay_moves, verify_history, verify_result


def test_verify_valid_history():
    moves = [Move((2, 4), (4, 4)), Move((2, 2), (2, 4))]
    assert verify_history(moves, size=9) is True
    assert verify_history(moves, size=9, expected_score=66) is True
    assert verify_history(moves, size=9, expected_score=65) is False


def test_verify_illegal_move():
    """Второй ход прыгает через уже пустую клетку."""
    moves = [Move((2, 4), (4, 4)), Move((1, 4), (3, 4))]
    assert verify_history(moves, size=9) is False
    assert replay_moves(moves, size=9) is None


def test_verify_empty_history():
    assert verify_history([], size=7, expected_score=36)


def test_verify_simulation_result():
    result = run_simulation(1234, size=9)
    assert verify_result(result)


def test_verify_result_wrong_score():
    result = run_simulation(1234, size=9)
    tampered = SimulationResult(result.seed, result.size, result.score + 1, result.moves)
    assert not verify_result(tampered)


def test_verify_result_not_finished():
    """История, после которой ещё есть ходы, не считается итогом."""
    result = run_simulation(77, size=9)
    partial = result.moves[:-1]
    truncated = SimulationResult(result.seed, result.size, result.score + 1, partial)
    assert not verify_result(truncated)

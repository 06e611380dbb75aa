"""
tests/test_search.py

Тесты для поиска выигрышного сида (последовательного и параллельного).
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from simulation import (
    BestTracker, ParallelSeedSearch, PegRandom, SeedSearch, SimulationResult,
    Simulation, run_simulation
)
from peg_io.parser import parse_board
from utils.error_handling import InvariantViolation


def _preview_seeds(source_seed: int, count: int):
    """Первые count сидов, которые выдаст генератор сидов."""
    preview = PegRandom(source_seed)
    return [preview.next_seed() for _ in range(count)]


def _fake_runner(winners, default_score=5):
    """Детерминированный runner: счёт 1 для сидов из winners."""
    def runner(seed, size):
        return SimulationResult(seed=seed, size=size, score=1 if seed in winners else default_score)
    return runner


def _replay_outcome(seeds, size):
    """Ожидаемый исход поиска по сидам в порядке выдачи: (победитель, лучший счёт, запусков)."""
    best = None
    for runs, seed in enumerate(seeds, start=1):
        score = run_simulation(seed, size=size).score
        best = score if best is None else min(best, score)
        if score == 1:
            return seed, best, runs
    return None, best, len(seeds)


# Одноходовая доска: любой сид выигрывает первым же ходом
ONE_MOVE_BOARD = (
    "  .  \n"
    " ... \n"
    "@@...\n"
    " ... \n"
    "  .  \n"
)


def _one_move_runner(seed, size):
    return Simulation(seed, board=parse_board(ONE_MOVE_BOARD)).run()


def test_search_stops_on_first_win():
    seeds = _preview_seeds(123, 5)
    search = SeedSearch(
        runner=_fake_runner({seeds[2]}),
        seed_source=PegRandom(123),
        batch_size=100,
    )

    assert search.search() == seeds[2]
    assert search.stats.runs == 3
    assert search.stats.best_score == 1
    assert search.stats.winning_seed == seeds[2]


def test_search_reports_batches_and_reseeds():
    played = []
    reports = []

    def runner(seed, size):
        score = 2 + seed % 7
        played.append((seed, score))
        return SimulationResult(seed=seed, size=size, score=score)

    search = SeedSearch(
        runner=runner,
        seed_source=PegRandom(1),
        reseed=lambda: 99,
        batch_size=2,
        max_runs=5,
        on_batch=lambda *report: reports.append(report),
    )

    assert search.search() is None
    assert search.stats.runs == 5
    assert search.stats.batches == 2
    assert len(reports) == 2

    for batch, (runs, best_score, best_seed) in zip([played[0:2], played[2:4]], reports):
        expected_seed, expected_score = min(batch, key=lambda item: item[1])
        assert runs == 2
        assert best_score == expected_score
        assert best_seed == expected_seed

    # После каждой пачки генератор сидов пересеивается значением 99
    assert [seed for seed, _ in played[2:4]] == _preview_seeds(99, 2)
    assert played[4][0] == _preview_seeds(99, 1)[0]


def test_search_rejects_unreproducible_winner():
    calls = {}

    def flaky(seed, size):
        calls[seed] = calls.get(seed, 0) + 1
        score = 1 if calls[seed] == 1 else 4
        return SimulationResult(seed=seed, size=size, score=score)

    search = SeedSearch(runner=flaky, seed_source=PegRandom(3))
    with pytest.raises(InvariantViolation):
        search.search()


def test_search_rejects_score_below_one():
    search = SeedSearch(runner=_fake_runner(set(), default_score=0), seed_source=PegRandom(3))
    with pytest.raises(InvariantViolation):
        search.search()


def test_batch_size_must_be_positive():
    with pytest.raises(ValueError):
        SeedSearch(batch_size=0, seed_source=PegRandom(1))


def test_bounded_search_on_real_engine():
    """Исход поиска совпадает с прямым перебором тех же сидов."""
    seeds = _preview_seeds(5, 10) + _preview_seeds(11, 10)
    expected_winner, expected_best, expected_runs = _replay_outcome(seeds, 9)

    search = SeedSearch(
        size=9,
        batch_size=10,
        max_runs=20,
        seed_source=PegRandom(5),
        reseed=lambda: 11,
    )

    assert search.search() == expected_winner
    assert search.stats.runs == expected_runs
    assert search.stats.best_score == expected_best
    assert run_simulation(search.stats.best_seed, size=9).score == expected_best


def test_search_finds_winner_through_real_engine():
    """На одноходовой доске первый же сид выигрывает и подтверждается."""
    first = _preview_seeds(2, 1)[0]
    search = SeedSearch(size=5, runner=_one_move_runner, seed_source=PegRandom(2))

    assert search.search() == first
    assert search.stats.runs == 1
    assert search.stats.best_score == 1
    assert search.stats.winning_seed == first


def test_best_tracker_concurrent_updates():
    tracker = BestTracker()

    with ThreadPoolExecutor(max_workers=8) as executor:
        list(executor.map(lambda i: tracker.update(i, 100 - i % 50), range(1000)))

    runs, best_score, best_seed = tracker.snapshot()
    assert runs == 1000
    assert best_score == 51
    assert best_seed % 50 == 49

    tracker.reset()
    assert tracker.snapshot() == (0, None, None)


def test_parallel_search_picks_first_winner_in_draw_order():
    seeds = _preview_seeds(123, 10)
    search = ParallelSeedSearch(
        num_workers=2,
        executor_factory=ThreadPoolExecutor,
        runner=_fake_runner({seeds[7], seeds[3]}),
        seed_source=PegRandom(123),
        batch_size=100,
    )

    assert search.search() == seeds[3]
    assert search.stats.winning_seed == seeds[3]


def test_parallel_search_batches():
    reports = []
    search = ParallelSeedSearch(
        num_workers=2,
        executor_factory=ThreadPoolExecutor,
        runner=_fake_runner(set()),
        seed_source=PegRandom(1),
        reseed=lambda: 7,
        batch_size=10,
        max_runs=25,
        on_batch=lambda *report: reports.append(report),
    )

    assert search.search() is None
    assert search.stats.runs == 25
    assert reports == [(10, 5, reports[0][2]), (10, 5, reports[1][2])]


def test_parallel_search_with_processes():
    seeds = _preview_seeds(4, 8)
    scores = [run_simulation(seed, size=7).score for seed in seeds]
    expected_winner = next((seed for seed, score in zip(seeds, scores) if score == 1), None)
    search = ParallelSeedSearch(
        num_workers=2,
        size=7,
        max_runs=8,
        seed_source=PegRandom(4),
    )

    # Раунд из 8 сидов доигрывается целиком, победитель — первый в порядке выдачи
    assert search.search() == expected_winner
    assert search.stats.runs == 8
    assert search.stats.best_score == min(scores)
    assert run_simulation(search.stats.best_seed, size=7).score == search.stats.best_score

#!/usr/bin/env python3
"""
main.py

Точка входа симулятора.

Использование:
    python main.py find                 # искать сид со счётом 1
    python main.py simulate 42          # показать партию из сида 42
    python main.py simulate 0           # партия со случайным сидом
    python main.py find --size 7        # поиск на доске 7×7
"""

import argparse
import logging
import sys

from core.utils import DEFAULT_BOARD_SIZE
from peg_io import ConsolePresenter, FRAME_DELAY
from simulation import (
    SeedSearch, ParallelSeedSearch, run_simulation, fresh_seed, DEFAULT_BATCH_SIZE
)
from utils.error_handling import ConfigurationError, parse_seed, parse_size
from utils.logging import get_logger

USAGE = """usage: {prog} <command> [seed]

    available commands:
        find            run until a solution with score 1 is found
        simulate        simulate a game from given seed

    arguments:
        seed            provide seed for a given simulation, only
                        used when command is "simulate".
                        use seed 0 for random seed.

    options (after the command):
        --size N        board size, odd and >= 5 (default 9)
        --verbose       debug logging
"""


class UsageParser(argparse.ArgumentParser):
    """ArgumentParser, который сообщает об ошибке исключением, а не exit(2)."""

    def error(self, message):
        raise ConfigurationError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = UsageParser(
        prog='peg-sim',
        description='Peg Solitaire Simulator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  peg-sim find                 # поиск выигрышного сида
  peg-sim find --workers 4     # параллельный поиск
  peg-sim simulate 42          # анимация партии
  peg-sim simulate 0           # случайный сид
  peg-sim find --size 7        # доска 7×7
        """
    )
    # Общие флаги принимаются после имени команды
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        '--verbose', '-v', action='store_true',
        help='Отладочный лог'
    )
    common.add_argument(
        '--size', default=DEFAULT_BOARD_SIZE,
        help=f'Размер доски, нечётный (default: {DEFAULT_BOARD_SIZE})'
    )

    commands = parser.add_subparsers(dest='command')

    find = commands.add_parser('find', parents=[common], help='Искать сид со счётом 1')
    find.add_argument(
        '--batch-size', type=int, default=DEFAULT_BATCH_SIZE,
        help=f'Запусков в пачке (default: {DEFAULT_BATCH_SIZE})'
    )
    find.add_argument(
        '--workers', '-w', type=int, default=1,
        help='Количество процессов (default: 1 — последовательно)'
    )

    simulate = commands.add_parser('simulate', parents=[common], help='Симулировать партию из сида')
    simulate.add_argument('seed', help='Сид, 0 — случайный')
    simulate.add_argument(
        '--delay', type=float, default=FRAME_DELAY,
        help=f'Пауза между кадрами, секунды (default: {FRAME_DELAY})'
    )
    simulate.add_argument(
        '--no-clear', action='store_true',
        help='Не очищать экран между кадрами'
    )
    return parser


def run_find(args, size: int) -> int:
    def report(runs, best_score, best_seed):
        print(f"best score in {runs} runs is {best_score} for seed {best_seed}", flush=True)

    options = dict(size=size, batch_size=args.batch_size, on_batch=report, verbose=args.verbose)
    if args.workers > 1:
        search = ParallelSeedSearch(num_workers=args.workers, **options)
    else:
        search = SeedSearch(**options)

    seed = search.search()
    get_logger().debug(f"Поиск: {search.stats}")
    print(f"* * * winning seed is: {seed}")
    return 0


def run_simulate(args, size: int) -> int:
    seed = parse_seed(args.seed)
    if seed == 0:
        seed = fresh_seed()

    presenter = ConsolePresenter(delay=args.delay, clear=not args.no_clear)
    run_simulation(seed, size=size, presenter=presenter)
    return 0


def main(argv=None) -> int:
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
        if args.command is None:
            raise ConfigurationError("no command given")
        size = parse_size(args.size)
        if args.command == 'find' and (args.batch_size < 1 or args.workers < 1):
            raise ConfigurationError("batch size and workers must be positive")
        if args.verbose:
            get_logger().set_level(logging.DEBUG)

        if args.command == 'simulate':
            return run_simulate(args, size)
        return run_find(args, size)
    except ConfigurationError as e:
        print(e, file=sys.stderr)
        print(USAGE.format(prog=parser.prog), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

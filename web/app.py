"""
web/app.py

Flask JSON API для симулятора.
"""

import os
import sys

from flask import Flask, request, jsonify

# Добавляем корень проекта в path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.board import Board, get_score
from core.utils import DEFAULT_BOARD_SIZE
from peg_io import FrameRecorder, format_summary, render_rows
from simulation import SeedSearch, Simulation
from utils.error_handling import ConfigurationError, parse_seed, parse_size

# Предел запусков для одного запроса поиска
MAX_SEARCH_RUNS = 10000

app = Flask(__name__)


@app.errorhandler(ConfigurationError)
def configuration_error(e):
    return jsonify({'error': str(e)}), 400


def _size_arg(value) -> int:
    return parse_size(value if value is not None else DEFAULT_BOARD_SIZE)


@app.route('/api/board', methods=['GET'])
def get_board():
    """Стартовая доска заданного размера."""
    board = Board.create(_size_arg(request.args.get('size')))
    return jsonify({
        'size': board.size,
        'rows': render_rows(board),
        'score': get_score(board),
    })


@app.route('/api/simulate/<seed>', methods=['GET'])
def simulate(seed):
    """Партия из сида со всеми кадрами."""
    seed = parse_seed(seed)
    if seed == 0:
        raise ConfigurationError("seed 0 is not reproducible, pass an explicit seed")

    recorder = FrameRecorder()
    result = Simulation(seed, size=_size_arg(request.args.get('size')),
                        presenter=recorder).run()

    payload = result.to_dict()
    payload['frames'] = recorder.frames
    payload['summary'] = format_summary(result)
    return jsonify(payload)


@app.route('/api/search', methods=['POST'])
def search():
    """Ограниченный поиск выигрышного сида."""
    data = request.get_json(silent=True) or {}

    max_runs = data.get('max_runs', 1000)
    if not isinstance(max_runs, int) or not 1 <= max_runs <= MAX_SEARCH_RUNS:
        raise ConfigurationError(f"max_runs must be an integer in [1, {MAX_SEARCH_RUNS}]")

    seed_search = SeedSearch(size=_size_arg(data.get('size')), max_runs=max_runs)
    winning_seed = seed_search.search()
    stats = seed_search.stats

    return jsonify({
        'winning_seed': winning_seed,
        'runs': stats.runs,
        'best_score': stats.best_score,
        'best_seed': stats.best_seed,
        'time': round(stats.time_elapsed, 3),
    })


if __name__ == '__main__':
    print("=" * 50)
    print("Peg Solitaire Simulator - Web API")
    print("=" * 50)
    print("\nOpen http://localhost:5000/api/board in your browser")
    print()

    app.run(debug=True, host='0.0.0.0', port=5000)

"""
tests/test_utils.py

Тесты для разбора параметров, валидации доски и логирования.
"""

import logging

import pytest

from core.board import Board
from utils.error_handling import (
    ConfigurationError, InvalidBoardError, SimulatorError,
    MAX_BOARD_SIZE, parse_seed, parse_size, validate_board
)
from utils.logging import get_logger, setup_file_logging


@pytest.mark.parametrize("text, expected", [("0", 0), ("42", 42), (" 7 ", 7), ("2147483647", 2147483647)])
def test_parse_seed(text, expected):
    assert parse_seed(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "4.2", "-1", None])
def test_parse_seed_rejects(text):
    with pytest.raises(ConfigurationError, match="unable to parse seed"):
        parse_seed(text)


@pytest.mark.parametrize("value", [4, "3", "x", None, -9, 101, "99999"])
def test_parse_size_rejects(value):
    with pytest.raises(ConfigurationError):
        parse_size(value)


def test_parse_size_accepts_odd():
    assert parse_size("11") == 11
    assert parse_size(MAX_BOARD_SIZE) == MAX_BOARD_SIZE


def test_validate_board():
    assert validate_board(Board.create(9))
    with pytest.raises(InvalidBoardError):
        validate_board(None)
    with pytest.raises(InvalidBoardError):
        validate_board(object())
    with pytest.raises(InvalidBoardError):
        validate_board(Board(4, [[None] * 4 for _ in range(4)]))


def test_error_hierarchy():
    assert issubclass(ConfigurationError, SimulatorError)
    assert issubclass(InvalidBoardError, SimulatorError)


def test_get_logger_is_shared():
    assert get_logger() is get_logger()


def test_file_logging(tmp_path):
    log_file = tmp_path / "sim.log"
    logger = get_logger()
    handler = setup_file_logging(str(log_file), level=logging.INFO)
    try:
        logger.info("batch done")
    finally:
        logger.logger.removeHandler(handler)
        handler.close()

    assert "batch done" in log_file.read_text(encoding='utf-8')

"""
utils - Логирование и обработка ошибок.
"""

from .logging import get_logger, setup_file_logging
from .error_handling import (
    SimulatorError, InvalidBoardError, InvariantViolation, ConfigurationError,
    validate_board, parse_seed, parse_size, MAX_BOARD_SIZE
)

__all__ = [
    'get_logger', 'setup_file_logging',
    'SimulatorError', 'InvalidBoardError', 'InvariantViolation', 'ConfigurationError',
    'validate_board', 'parse_seed', 'parse_size', 'MAX_BOARD_SIZE'
]

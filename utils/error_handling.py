"""
utils/error_handling.py

Иерархия исключений и проверка входных данных.

"Нет хода" — не ошибка: поиск возвращает None.
"""

from .logging import get_logger

# Наибольший допустимый размер доски из CLI и web API
MAX_BOARD_SIZE = 99


class SimulatorError(Exception):
    """Базовое исключение симулятора."""
    pass


class InvalidBoardError(SimulatorError):
    """Нарушено предусловие построения доски."""
    pass


class InvariantViolation(SimulatorError):
    """
    Нарушен инвариант движка (недопустимый ход, битая доска).

    Означает ошибку в самом движке, поэтому нигде не перехватывается.
    """
    pass


class ConfigurationError(SimulatorError):
    """Некорректные аргументы командной строки или запроса."""
    pass


def validate_board(board) -> bool:
    """
    Валидирует доску перед запуском симуляции.

    Args:
        board: доска для валидации

    Returns:
        True если доска валидна

    Raises:
        InvalidBoardError: если доска невалидна
    """
    if board is None:
        raise InvalidBoardError("Доска не может быть None")

    if not hasattr(board, 'cells') or not hasattr(board, 'size'):
        raise InvalidBoardError("Ожидается объект Board")

    size = board.size
    if size % 2 != 1:
        raise InvalidBoardError(f"Размер доски должен быть нечётным: {size}")

    if len(board.cells) != size or any(len(row) != size for row in board.cells):
        raise InvalidBoardError(f"Доска должна быть квадратной {size}x{size}")

    return True


def parse_seed(text: str) -> int:
    """
    Разбирает сид из строки.

    Raises:
        ConfigurationError: если сид не число или отрицательный
    """
    try:
        seed = int(text)
    except (TypeError, ValueError):
        get_logger().debug(f"Не удалось разобрать сид: {text!r}")
        raise ConfigurationError("unable to parse seed") from None
    if seed < 0:
        raise ConfigurationError("unable to parse seed")
    return seed


def parse_size(value) -> int:
    """
    Разбирает размер доски.

    Raises:
        ConfigurationError: если размер не нечётное целое от 5 до MAX_BOARD_SIZE
    """
    try:
        size = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Некорректный размер доски: {value!r}") from None
    if size < 5 or size % 2 != 1:
        raise ConfigurationError(f"Размер доски должен быть нечётным и не меньше 5: {size}")
    if size > MAX_BOARD_SIZE:
        raise ConfigurationError(f"Размер доски не должен превышать {MAX_BOARD_SIZE}: {size}")
    return size

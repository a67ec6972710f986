"""
Numerical Safeguards — Epsilon-сравнения и валидация индексов

Модуль содержит численные примитивы, на которых построен Matrix:
- Epsilon-константа поэлементного сравнения матриц
- Симметричное сравнение с абсолютной толерантностью
- Валидация размеров матрицы (>= 1)
- Валидация 1-based индексов строк и столбцов
- Иерархия исключений матрицы

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сравнение с толерантностью симметрично: within_tolerance(a, b) == within_tolerance(b, a)
2. Пара отклоняется, только если разница доказуемо больше tol:
   inf/inf и пары с NaN не отклоняются
3. Все индексы на границе API 1-based: допустимый диапазон [1, upper]
4. Проверки выполняются до любой записи (нет частичной мутации)
"""

import logging
import math
from typing import Final

logger = logging.getLogger(__name__)

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Толерантность поэлементного сравнения матриц (Matrix.equals)
EPS_MATRIX_EQUAL: Final[float] = 1e-10


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MatrixError(Exception):
    """Базовое исключение для всех ошибок Matrix."""


class MatrixInvalidArgument(MatrixError, ValueError):
    """
    Невалидный аргумент операции над матрицей.

    Возникает при:
    - размере < 1 в фабриках (identity, constant, from_rows)
    - несовпадении размеров операндов (add, concatenate_rows)
    - неправильной форме столбца замены (replace_col)
    """


class MatrixIndexOutOfRange(MatrixError, IndexError):
    """
    1-based индекс строки или столбца вне допустимого диапазона.

    Проверка всегда выполняется до записи, поэтому матрица
    остаётся неизменной.
    """


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def within_tolerance(a: float, b: float, tol: float = EPS_MATRIX_EQUAL) -> bool:
    """
    Симметричное сравнение с абсолютной толерантностью.

    Используется в Matrix.equals. Пара отклоняется, только если
    abs(a - b) > tol. Равные бесконечности (inf - inf = nan) и пары с NaN
    не отклоняются, поэтому копия матрицы с inf/NaN равна оригиналу.
    В отличие от одностороннего (a - b) > tol, не зависит от порядка аргументов.

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность (default: EPS_MATRIX_EQUAL)

    Returns:
        True если разница не превышает tol

    Examples:
        >>> within_tolerance(1.0, 1.0 + 1e-11)
        True
        >>> within_tolerance(1.0 + 1e-11, 1.0)
        True
        >>> within_tolerance(1.0, 1.001)
        False
        >>> within_tolerance(float("inf"), float("inf"))
        True
        >>> within_tolerance(float("inf"), float("-inf"))
        False
    """
    return a == b or not abs(a - b) > tol


# =============================================================================
# ВАЛИДАЦИЯ РАЗМЕРОВ И ИНДЕКСОВ
# =============================================================================


def _is_int(value: object) -> bool:
    # bool является подклассом int, но не является размером/индексом
    return isinstance(value, int) and not isinstance(value, bool)


def validate_integer(value: int, name: str) -> None:
    """
    Валидация, что размер является целым числом (не bool).

    Raises:
        MatrixInvalidArgument: Если value не int
    """
    if not _is_int(value):
        logger.debug("rejecting non-integer dimension %s=%r", name, value)
        raise MatrixInvalidArgument(f"{name} must be an integer, got {value!r}")


def validate_dimension(value: int, name: str) -> None:
    """
    Валидация размера матрицы (число строк или столбцов).

    Args:
        value: Проверяемый размер
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        MatrixInvalidArgument: Если value не целое или value < 1
    """
    validate_integer(value, name)

    if value < 1:
        logger.debug("rejecting dimension %s=%d", name, value)
        raise MatrixInvalidArgument(f"{name} must be larger than 0, got {value}")


def validate_index(value: int, upper: int, name: str, lower: int = 1) -> None:
    """
    Валидация 1-based индекса: lower <= value <= upper.

    Args:
        value: Проверяемый индекс (1-based)
        upper: Максимально допустимый индекс (rows() или cols())
        name: Имя параметра (для сообщения об ошибке)
        lower: Минимально допустимый индекс (default: 1)

    Raises:
        MatrixIndexOutOfRange: Если индекс не целый или вне [lower, upper]

    Examples:
        >>> validate_index(2, 3, "row")
        >>> validate_index(4, 3, "row")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        MatrixIndexOutOfRange: row must be in [1, 3], got 4
    """
    if not _is_int(value) or value < lower or value > upper:
        logger.debug("rejecting index %s=%r outside [%d, %d]", name, value, lower, upper)
        raise MatrixIndexOutOfRange(
            f"{name} must be in [{lower}, {upper}], got {value!r}"
        )


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
) -> None:
    """
    Валидация, что значение в заданном диапазоне.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        ValueError: Если value вне диапазона или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")

"""
densematrix — плотная вещественная матрица с 1-based адресацией

Небольшой самостоятельный числовой тип-значение для алгоритмов исключения
(метод Гаусса, решатели линейных систем), построенных поверх него.
"""

from densematrix.core.math import (
    EPS_MATRIX_EQUAL,
    Matrix,
    MatrixError,
    MatrixFormatConfig,
    MatrixIndexOutOfRange,
    MatrixInvalidArgument,
)
from densematrix.core.domain import MatrixSnapshot

__version__ = "1.1.0"

__all__ = [
    "EPS_MATRIX_EQUAL",
    "Matrix",
    "MatrixError",
    "MatrixFormatConfig",
    "MatrixIndexOutOfRange",
    "MatrixInvalidArgument",
    "MatrixSnapshot",
]

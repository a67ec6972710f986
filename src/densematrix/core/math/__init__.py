"""
Core math modules для densematrix

Математические примитивы и плотная матрица с 1-based адресацией.
"""

# Numerical Safeguards
from densematrix.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_MATRIX_EQUAL,
    # Exceptions
    MatrixError,
    MatrixIndexOutOfRange,
    MatrixInvalidArgument,
    # Epsilon comparisons
    is_valid_float,
    within_tolerance,
    # Validation
    validate_dimension,
    validate_in_range,
    validate_index,
    validate_integer,
)

# Matrix
from densematrix.core.math.matrix import (
    DEFAULT_FORMAT,
    Matrix,
    MatrixFormatConfig,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_MATRIX_EQUAL",
    # Numerical Safeguards — Exceptions
    "MatrixError",
    "MatrixIndexOutOfRange",
    "MatrixInvalidArgument",
    # Numerical Safeguards — Epsilon comparisons
    "is_valid_float",
    "within_tolerance",
    # Numerical Safeguards — Validation
    "validate_dimension",
    "validate_in_range",
    "validate_index",
    "validate_integer",
    # Matrix — Config
    "DEFAULT_FORMAT",
    "MatrixFormatConfig",
    # Matrix — Types
    "Matrix",
]

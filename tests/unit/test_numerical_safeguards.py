"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Симметричное сравнение within_tolerance, включая inf и NaN
2. Валидацию целочисленных размеров
3. Валидацию размеров матрицы
4. Валидацию 1-based индексов
5. Иерархию исключений
"""

import pytest

from densematrix.core.math.numerical_safeguards import (
    EPS_MATRIX_EQUAL,
    MatrixError,
    MatrixIndexOutOfRange,
    MatrixInvalidArgument,
    is_valid_float,
    validate_dimension,
    validate_in_range,
    validate_index,
    validate_integer,
    within_tolerance,
)


# =============================================================================
# ТЕСТЫ КОНСТАНТ
# =============================================================================


class TestEpsilonConstants:
    """Тесты для epsilon-констант"""

    def test_matrix_tolerance_value(self) -> None:
        assert EPS_MATRIX_EQUAL == 1e-10


# =============================================================================
# ТЕСТЫ EPSILON-СРАВНЕНИЙ
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_normal_values_valid(self) -> None:
        """Обычные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1.0)
        assert is_valid_float(1e10)

    def test_nan_and_inf_invalid(self) -> None:
        """NaN и Inf невалидны"""
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


class TestWithinTolerance:
    """Тесты для within_tolerance (используется в Matrix.equals)"""

    def test_exact_match(self) -> None:
        assert within_tolerance(3.5, 3.5)

    def test_difference_below_tolerance(self) -> None:
        assert within_tolerance(1.0, 1.0 + 1e-11)

    def test_difference_above_tolerance(self) -> None:
        assert not within_tolerance(1.0, 1.0 + 1e-6)

    def test_symmetric(self) -> None:
        """Порядок аргументов не влияет на результат"""
        pairs = [(1.0, 2.0), (2.0, 1.0), (0.0, 1e-11), (-5.0, 5.0)]
        for a, b in pairs:
            assert within_tolerance(a, b) == within_tolerance(b, a)

    def test_smaller_value_rejected(self) -> None:
        """Значительно меньшее значение тоже отклоняется"""
        assert not within_tolerance(0.0, 1.0)
        assert not within_tolerance(1.0, 0.0)

    def test_custom_tolerance(self) -> None:
        assert within_tolerance(1.0, 1.05, tol=0.1)
        assert not within_tolerance(1.0, 1.05, tol=0.01)

    def test_equal_infinities_accepted(self) -> None:
        """inf - inf = nan, но одинаковые бесконечности равны"""
        inf = float("inf")
        assert within_tolerance(inf, inf)
        assert within_tolerance(-inf, -inf)

    def test_opposite_infinities_rejected(self) -> None:
        inf = float("inf")
        assert not within_tolerance(inf, -inf)
        assert not within_tolerance(-inf, inf)

    def test_infinity_against_finite_rejected(self) -> None:
        assert not within_tolerance(float("inf"), 1.0)
        assert not within_tolerance(1.0, float("inf"))

    def test_nan_not_rejected(self) -> None:
        """Разница с NaN не превышает tol, пара не отклоняется"""
        nan = float("nan")
        assert within_tolerance(nan, nan)
        assert within_tolerance(nan, 1.0) == within_tolerance(1.0, nan)


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidateInteger:
    """Тесты для validate_integer"""

    def test_int_passes(self) -> None:
        validate_integer(0, "m")
        validate_integer(-2, "m")

    @pytest.mark.parametrize("value", [2.0, "2", None, True])
    def test_non_int_raises(self, value: object) -> None:
        with pytest.raises(MatrixInvalidArgument, match="m must be an integer"):
            validate_integer(value, "m")  # type: ignore[arg-type]


class TestValidateDimension:
    """Тесты для validate_dimension"""

    def test_valid_dimensions(self) -> None:
        validate_dimension(1, "n")
        validate_dimension(100, "n")

    def test_zero_raises(self) -> None:
        with pytest.raises(MatrixInvalidArgument, match="n must be larger than 0"):
            validate_dimension(0, "n")

    def test_negative_raises(self) -> None:
        with pytest.raises(MatrixInvalidArgument, match="m must be larger than 0"):
            validate_dimension(-3, "m")

    def test_non_integer_raises(self) -> None:
        with pytest.raises(MatrixInvalidArgument, match="must be an integer"):
            validate_dimension(2.5, "n")

        with pytest.raises(MatrixInvalidArgument, match="must be an integer"):
            validate_dimension(True, "n")


class TestValidateIndex:
    """Тесты для validate_index"""

    def test_valid_bounds(self) -> None:
        """Границы 1 и upper допустимы"""
        validate_index(1, 3, "row")
        validate_index(3, 3, "row")

    def test_zero_is_out_of_range(self) -> None:
        """Индексы 1-based: 0 недопустим"""
        with pytest.raises(MatrixIndexOutOfRange, match=r"row must be in \[1, 3\], got 0"):
            validate_index(0, 3, "row")

    def test_above_upper_raises(self) -> None:
        with pytest.raises(MatrixIndexOutOfRange, match=r"got 4"):
            validate_index(4, 3, "row")

    def test_custom_lower_bound(self) -> None:
        validate_index(2, 5, "to_row", lower=2)

        with pytest.raises(MatrixIndexOutOfRange, match=r"to_row must be in \[3, 5\]"):
            validate_index(2, 5, "to_row", lower=3)

    def test_non_integer_raises(self) -> None:
        with pytest.raises(MatrixIndexOutOfRange):
            validate_index(1.0, 3, "row")


class TestValidateInRange:
    """Тесты для validate_in_range"""

    def test_within_range_passes(self) -> None:
        validate_in_range(0.5, "x", min_value=0.0, max_value=1.0)
        validate_in_range(0.0, "x", min_value=0.0)

    def test_below_min_raises(self) -> None:
        with pytest.raises(ValueError, match="x must be >= 0.0"):
            validate_in_range(-1.0, "x", min_value=0.0)

    def test_above_max_raises(self) -> None:
        with pytest.raises(ValueError, match="x must be <= 1.0"):
            validate_in_range(2.0, "x", max_value=1.0)

    def test_nan_raises(self) -> None:
        with pytest.raises(ValueError, match="not NaN/Inf"):
            validate_in_range(float("nan"), "x")


class TestExceptionHierarchy:
    """Исключения матрицы совместимы со стандартными"""

    def test_invalid_argument_is_value_error(self) -> None:
        assert issubclass(MatrixInvalidArgument, ValueError)
        assert issubclass(MatrixInvalidArgument, MatrixError)

    def test_index_out_of_range_is_index_error(self) -> None:
        assert issubclass(MatrixIndexOutOfRange, IndexError)
        assert issubclass(MatrixIndexOutOfRange, MatrixError)

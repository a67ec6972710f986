"""
Matrix — Плотная вещественная матрица с 1-based адресацией

Двумерная матрица значений float (IEEE-754 double):
- Конструктор и фабрики (identity, constant, from_rows)
- Доступ к элементам get/set с проверкой границ
- Алгебра: транспонирование, сложение, умножение на скаляр
- Структурные операции: sub_matrix, concatenate_rows, swap_rows,
  add_mul_rows, delete_col, replace_col

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Индексы строк и столбцов 1-based: допустимы 1..rows() и 1..cols()
2. Размер фиксирован при создании; операции, меняющие форму, возвращают новый Matrix
3. Мутируют только set(i, j, v) и set(v) / fill(v); остальные операции
   возвращают новый экземпляр, не изменяя исходный
4. Каждый Matrix владеет собственным хранилищем (нет общих строк между экземплярами)
5. Проверки выполняются до записи: при ошибке матрица не изменяется
"""

import logging
from dataclasses import dataclass
from numbers import Real
from typing import Any, Sequence

from densematrix.core.contracts.validators import validate_matrix
from densematrix.core.domain.matrix_snapshot import MatrixSnapshot
from densematrix.core.math.numerical_safeguards import (
    EPS_MATRIX_EQUAL,
    MatrixIndexOutOfRange,
    MatrixInvalidArgument,
    validate_dimension,
    validate_in_range,
    validate_index,
    validate_integer,
    within_tolerance,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class MatrixFormatConfig:
    """Конфигурация текстового представления матрицы.

    Значения по умолчанию дают формат str(Matrix):
    "[1.0 2.0]\\n[3.0 4.0]" (без завершающего перевода строки).
    """

    row_open: str = "["
    row_close: str = "]"
    value_sep: str = " "
    row_sep: str = "\n"


DEFAULT_FORMAT = MatrixFormatConfig()


def _scalar(v: object, op: str) -> float:
    # Скаляр должен быть числом: строки и прочие объекты не приводятся через float()
    if not isinstance(v, Real):
        raise TypeError(f"{op}() scalar must be a real number, got {type(v).__name__}")
    return float(v)


# =============================================================================
# MATRIX
# =============================================================================


class Matrix:
    """
    Плотная матрица rows x cols с 1-based адресацией.

    Объект создаётся как Matrix(3, 2): 3 строки, 2 столбца, все элементы 0.0.
    Левый верхний элемент (1, 1), правый нижний (3, 2).

    Matrix не хэшируемый: содержимое изменяемое через set().
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, m: int, n: int):
        """Создание матрицы max(1, m) x max(1, n), заполненной нулями.

        При m < 1 или n < 1 создаётся матрица 1 x 1 (не ошибка).

        Args:
            m: количество строк
            n: количество столбцов

        Raises:
            MatrixInvalidArgument: Если m или n не int
        """
        validate_integer(m, "m")
        validate_integer(n, "n")

        if m < 1 or n < 1:
            logger.debug("clamping degenerate size %r x %r to 1 x 1", m, n)
            m, n = 1, 1

        self._val: list[list[float]] = [[0.0] * n for _ in range(m)]

    @classmethod
    def _from_storage(cls, val: list[list[float]]) -> "Matrix":
        # Хранилище передаётся во владение новому экземпляру без копирования
        matrix = cls.__new__(cls)
        matrix._val = val
        return matrix

    def _clone(self) -> "Matrix":
        return Matrix._from_storage([row[:] for row in self._val])

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        """
        Единичная матрица n x n: 1 на диагонали, 0 вне диагонали.

        Raises:
            MatrixInvalidArgument: Если n < 1
        """
        validate_dimension(n, "n")

        identity = cls(n, n)
        for i in range(n):
            identity._val[i][i] = 1.0
        return identity

    @classmethod
    def constant(cls, m: int, n: int, v: float) -> "Matrix":
        """
        Матрица m x n, все элементы которой равны v.

        Raises:
            MatrixInvalidArgument: Если m < 1 или n < 1
        """
        validate_dimension(m, "m")
        validate_dimension(n, "n")

        value = float(v)
        return cls._from_storage([[value] * n for _ in range(m)])

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        """
        Создание матрицы из последовательности строк.

        Значения копируются: изменение исходных списков не влияет на матрицу.

        Args:
            rows: Непустая последовательность непустых строк одинаковой длины

        Returns:
            Новый Matrix размера len(rows) x len(rows[0])

        Raises:
            MatrixInvalidArgument: Если rows пустая, строки пустые или разной длины

        Examples:
            >>> print(Matrix.from_rows([[1, 2], [3, 4]]))
            [1.0 2.0]
            [3.0 4.0]
        """
        if len(rows) == 0:
            logger.debug("from_rows: empty input")
            raise MatrixInvalidArgument("rows must contain at least one row")

        n = len(rows[0])
        if n == 0:
            logger.debug("from_rows: first row is empty")
            raise MatrixInvalidArgument("rows must contain at least one column")

        val = []
        for i, row in enumerate(rows, start=1):
            if len(row) != n:
                logger.debug("ragged input: row %d has %d entries, expected %d", i, len(row), n)
                raise MatrixInvalidArgument(
                    f"row {i} has {len(row)} entries, expected {n}"
                )
            val.append([float(x) for x in row])

        return cls._from_storage(val)

    @classmethod
    def from_snapshot(cls, snapshot: MatrixSnapshot) -> "Matrix":
        """Восстановление матрицы из MatrixSnapshot."""
        return cls.from_rows(snapshot.values)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Matrix":
        """
        Восстановление матрицы из сериализованной формы (см. to_dict).

        Данные проверяются по контракту matrix.json, затем моделью
        MatrixSnapshot (согласованность rows/cols/values).

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
            pydantic.ValidationError: Если values не совпадает с rows x cols
        """
        validate_matrix(data)
        return cls.from_snapshot(MatrixSnapshot.model_validate(data))

    # -------------------------------------------------------------------------
    # Размеры
    # -------------------------------------------------------------------------

    def rows(self) -> int:
        """Количество строк."""
        return len(self._val)

    def cols(self) -> int:
        """Количество столбцов."""
        return len(self._val[0])

    def shape(self) -> tuple[int, int]:
        return self.rows(), self.cols()

    # -------------------------------------------------------------------------
    # Доступ к элементам
    # -------------------------------------------------------------------------

    def _check_element(self, i: int, j: int) -> None:
        validate_index(i, self.rows(), "row index")
        validate_index(j, self.cols(), "column index")

    def get(self, i: int, j: int) -> float:
        """
        Значение в строке i и столбце j.

        Raises:
            MatrixIndexOutOfRange: Если (i, j) вне [1, rows()] x [1, cols()]
        """
        self._check_element(i, j)
        return self._val[i - 1][j - 1]

    def set(self, *args: float) -> None:
        """
        Изменение значений матрицы (in-place).

        Две формы вызова:
            set(i, j, v): элемент в строке i и столбце j становится v
            set(v):       все элементы становятся v (эквивалент fill(v))

        Raises:
            MatrixIndexOutOfRange: Если (i, j) вне допустимого диапазона
            TypeError: Если передано не 1 и не 3 аргумента
        """
        if len(args) == 1:
            self.fill(args[0])
        elif len(args) == 3:
            i, j, v = args
            self._check_element(i, j)
            self._val[i - 1][j - 1] = float(v)
        else:
            raise TypeError(f"set() takes 1 or 3 arguments, got {len(args)}")

    def fill(self, v: float) -> None:
        """Все элементы становятся v (in-place)."""
        value = float(v)
        for row in self._val:
            row[:] = [value] * len(row)

    def row(self, i: int) -> "Matrix":
        """Копия строки i как матрица 1 x cols()."""
        validate_index(i, self.rows(), "row index")
        return Matrix._from_storage([self._val[i - 1][:]])

    def col(self, j: int) -> "Matrix":
        """Копия столбца j как матрица rows() x 1."""
        validate_index(j, self.cols(), "column index")
        return Matrix._from_storage([[row[j - 1]] for row in self._val])

    def to_list(self) -> list[list[float]]:
        """Значения матрицы как новый вложенный список (построчно)."""
        return [row[:] for row in self._val]

    def copy(self) -> "Matrix":
        """Независимая копия матрицы."""
        return self._clone()

    # -------------------------------------------------------------------------
    # Сравнение и текстовое представление
    # -------------------------------------------------------------------------

    def equals(self, other: "Matrix", tol: float = EPS_MATRIX_EQUAL) -> bool:
        """
        Проверка равенства значений двух матриц.

        Матрицы равны, если совпадают размеры и для каждой пары элементов
        abs(a - b) <= tol. Сравнение симметрично: A.equals(B) == B.equals(A).

        Args:
            other: Любая матрица
            tol: Абсолютная толерантность (default: EPS_MATRIX_EQUAL = 1e-10)

        Returns:
            True если различий не найдено

        Raises:
            ValueError: Если tol отрицательный или NaN/Inf
        """
        validate_in_range(tol, "tol", min_value=0.0)

        if self.shape() != other.shape():
            return False

        for row_a, row_b in zip(self._val, other._val):
            for a, b in zip(row_a, row_b):
                if not within_tolerance(a, b, tol):
                    return False
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    def to_string(self, config: MatrixFormatConfig | None = None) -> str:
        """
        Текстовое представление матрицы.

        Каждая строка в скобках, элементы через пробел, строки через перевод
        строки, без перевода строки после последней строки.

        Args:
            config: формат (опционально, используется DEFAULT_FORMAT)
        """
        fmt = config or DEFAULT_FORMAT
        return fmt.row_sep.join(
            fmt.row_open + fmt.value_sep.join(repr(v) for v in row) + fmt.row_close
            for row in self._val
        )

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._val!r})"

    def println(self) -> None:
        """Вывод матрицы в stdout."""
        print(self.to_string())

    # -------------------------------------------------------------------------
    # Сериализация
    # -------------------------------------------------------------------------

    def to_snapshot(self) -> MatrixSnapshot:
        """Immutable снапшот текущего содержимого."""
        return MatrixSnapshot(rows=self.rows(), cols=self.cols(), values=self.to_list())

    def to_dict(self) -> dict[str, Any]:
        """Сериализованная форма, соответствующая контракту matrix.json."""
        return self.to_snapshot().model_dump()

    # -------------------------------------------------------------------------
    # Алгебра
    # -------------------------------------------------------------------------

    def transpose(self) -> "Matrix":
        """Новая матрица cols() x rows(), в которой строки и столбцы поменяны местами."""
        return Matrix._from_storage([list(col) for col in zip(*self._val)])

    def add(self, other: "Matrix | float") -> "Matrix":
        """
        Поэлементное сложение с матрицей или скаляром.

        Args:
            other: Matrix того же размера или число

        Returns:
            Новая матрица размера rows() x cols()

        Raises:
            MatrixInvalidArgument: Если other — матрица другого размера
            TypeError: Если other не Matrix и не число
        """
        if isinstance(other, Matrix):
            if self.shape() != other.shape():
                logger.debug("add: shape mismatch %s vs %s", self.shape(), other.shape())
                raise MatrixInvalidArgument(
                    f"Number of rows and columns differ: {self.rows()}x{self.cols()} "
                    f"vs {other.rows()}x{other.cols()}"
                )
            return Matrix._from_storage(
                [
                    [a + b for a, b in zip(row_a, row_b)]
                    for row_a, row_b in zip(self._val, other._val)
                ]
            )

        value = _scalar(other, "add")
        return Matrix._from_storage([[a + value for a in row] for row in self._val])

    def mul(self, v: float) -> "Matrix":
        """
        Новая матрица, каждый элемент которой умножен на скаляр v.

        Raises:
            TypeError: Если v не число
        """
        value = _scalar(v, "mul")
        return Matrix._from_storage([[a * value for a in row] for row in self._val])

    def __add__(self, other: object) -> "Matrix":
        if isinstance(other, (Matrix, Real)):
            return self.add(other)
        return NotImplemented

    def __radd__(self, other: object) -> "Matrix":
        if isinstance(other, Real):
            return self.add(other)
        return NotImplemented

    def __mul__(self, other: object) -> "Matrix":
        if isinstance(other, Real):
            return self.mul(other)
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self) -> "Matrix":
        return self.mul(-1.0)

    # -------------------------------------------------------------------------
    # Структурные операции
    # -------------------------------------------------------------------------

    def concatenate_rows(self, other: "Matrix") -> "Matrix":
        """
        Горизонтальная конкатенация [self | other].

        Несмотря на название, строки не добавляются: каждая строка результата
        составлена из строки self и соответствующей строки other.

        Returns:
            Новая матрица размера rows() x (cols() + other.cols())

        Raises:
            MatrixInvalidArgument: Если количество строк различается
        """
        if self.rows() != other.rows():
            logger.debug("concatenate_rows: %d rows vs %d rows", self.rows(), other.rows())
            raise MatrixInvalidArgument(
                f"The number of rows must be identical, got {self.rows()} and {other.rows()}"
            )

        return Matrix._from_storage(
            [row_a + row_b for row_a, row_b in zip(self._val, other._val)]
        )

    def sub_matrix(self, from_row: int, from_col: int, to_row: int, to_col: int) -> "Matrix":
        """
        Копия блока строк from_row..to_row и столбцов from_col..to_col.

        Args:
            from_row: 1 <= from_row <= rows()
            from_col: 1 <= from_col <= cols()
            to_row: from_row <= to_row <= rows()
            to_col: from_col <= to_col <= cols()

        Returns:
            Новая матрица размера (to_row - from_row + 1) x (to_col - from_col + 1)

        Raises:
            MatrixIndexOutOfRange: Если любой аргумент вне допустимого диапазона
        """
        validate_index(from_row, self.rows(), "from_row")
        validate_index(from_col, self.cols(), "from_col")
        validate_index(to_row, self.rows(), "to_row", lower=from_row)
        validate_index(to_col, self.cols(), "to_col", lower=from_col)

        return Matrix._from_storage(
            [row[from_col - 1 : to_col] for row in self._val[from_row - 1 : to_row]]
        )

    def swap_rows(self, a: int, b: int) -> "Matrix":
        """
        Копия матрицы, в которой строки a и b поменяны местами.

        При a == b возвращается простая копия.

        Raises:
            MatrixIndexOutOfRange: Если a или b вне [1, rows()]
        """
        validate_index(a, self.rows(), "a")
        validate_index(b, self.rows(), "b")

        result = self._clone()
        result._val[a - 1], result._val[b - 1] = result._val[b - 1], result._val[a - 1]
        return result

    def add_mul_rows(self, a: int, b: int, c: int, v: float) -> "Matrix":
        """
        Элементарное преобразование строк: row(a) := row(b) + v * row(c).

        Новая строка вычисляется по исходным значениям self, поэтому
        результат корректен и при a == b или a == c.

        Args:
            a: заменяемая строка
            b: слагаемая строка
            c: строка, умножаемая на v
            v: любое число

        Returns:
            Новая матрица; все строки кроме a скопированы без изменений

        Raises:
            MatrixIndexOutOfRange: Если a, b или c вне [1, rows()]
            TypeError: Если v не число
        """
        validate_index(a, self.rows(), "a")
        validate_index(b, self.rows(), "b")
        validate_index(c, self.rows(), "c")

        value = _scalar(v, "add_mul_rows")
        combined = [x + value * y for x, y in zip(self._val[b - 1], self._val[c - 1])]

        result = self._clone()
        result._val[a - 1] = combined
        return result

    def delete_col(self, a: int) -> "Matrix":
        """
        Копия матрицы без столбца a.

        Returns:
            Новая матрица размера rows() x (cols() - 1)

        Raises:
            MatrixIndexOutOfRange: Если a вне [1, cols()] или матрица
                содержит единственный столбец
        """
        validate_index(a, self.cols(), "a")

        if self.cols() == 1:
            logger.debug("delete_col: cannot delete the only column")
            raise MatrixIndexOutOfRange("Cannot delete the only column of a matrix")

        if a == 1:
            return self.sub_matrix(1, 2, self.rows(), self.cols())
        if a == self.cols():
            return self.sub_matrix(1, 1, self.rows(), self.cols() - 1)

        left = self.sub_matrix(1, 1, self.rows(), a - 1)
        right = self.sub_matrix(1, a + 1, self.rows(), self.cols())
        return left.concatenate_rows(right)

    def replace_col(self, a: int, other: "Matrix") -> "Matrix":
        """
        Копия матрицы, в которой столбец a заменён единственным столбцом other.

        Raises:
            MatrixIndexOutOfRange: Если a вне [1, cols()]
            MatrixInvalidArgument: Если other не размера rows() x 1
        """
        validate_index(a, self.cols(), "a")

        if other.shape() != (self.rows(), 1):
            logger.debug("replace_col: got %s, expected %s", other.shape(), (self.rows(), 1))
            raise MatrixInvalidArgument(
                f"Must be a matrix of size {self.rows()}x1, got {other.rows()}x{other.cols()}"
            )

        result = self._clone()
        for row, replacement in zip(result._val, other._val):
            row[a - 1] = replacement[0]
        return result

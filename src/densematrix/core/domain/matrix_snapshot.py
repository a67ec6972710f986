"""
MatrixSnapshot — Сериализуемый снапшот матрицы

Immutable Pydantic модель, представляющая содержимое Matrix для обмена данными.
Полная совместимость с JSON Schema (contracts/schema/matrix.json).
"""

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# CONSTANTS
# =============================================================================

MATRIX_SCHEMA_VERSION = "1"


# =============================================================================
# MATRIX SNAPSHOT MODEL
# =============================================================================


class MatrixSnapshot(BaseModel):
    """
    Снапшот плотной матрицы.

    Immutable модель (frozen=True). Значения хранятся построчно:
    values[i - 1][j - 1] соответствует Matrix.get(i, j).
    """

    schema_version: str = Field(
        default=MATRIX_SCHEMA_VERSION,
        pattern="^1$",
        description="Версия схемы для tracking совместимости",
    )
    rows: int = Field(..., ge=1, description="Количество строк")
    cols: int = Field(..., ge=1, description="Количество столбцов")
    values: list[list[float]] = Field(
        ..., min_length=1, description="Значения матрицы, построчно"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("values")
    @classmethod
    def validate_values_shape(cls, v: list[list[float]], info) -> list[list[float]]:
        """Проверка, что values имеет форму rows x cols"""
        rows = info.data.get("rows")
        cols = info.data.get("cols")

        if rows is not None and len(v) != rows:
            raise ValueError(f"values has {len(v)} rows, expected rows={rows}")

        if cols is not None:
            for i, row in enumerate(v, start=1):
                if len(row) != cols:
                    raise ValueError(
                        f"values row {i} has {len(row)} entries, expected cols={cols}"
                    )

        return v

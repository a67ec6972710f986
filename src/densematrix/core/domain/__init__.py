"""
Domain models and value objects.

Contains serializable snapshots of core value types.
"""

from densematrix.core.domain.matrix_snapshot import MATRIX_SCHEMA_VERSION, MatrixSnapshot

__all__ = [
    "MATRIX_SCHEMA_VERSION",
    "MatrixSnapshot",
]

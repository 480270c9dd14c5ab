"""
Domain layer: backend-agnostic contracts, errors, configuration and
shape/stride arithmetic.
"""

from ._config import DEFAULT_STRASSEN_THRESHOLD, STRASSEN_BASE_EXTENT, TensorConfig
from ._diagnostics import IDiagnostics, Level
from ._errors import (
    EmptyReductionError,
    IndexOutOfRangeError,
    InvalidShapeError,
    RankMismatchError,
    ShapeMismatchError,
    StaleViewError,
    TensorError,
    UnsupportedDimensionError,
    UnsupportedRankError,
)
from ._tensor import IMatrixOperand, ITensor

__all__ = [
    "DEFAULT_STRASSEN_THRESHOLD",
    "STRASSEN_BASE_EXTENT",
    TensorConfig.__name__,
    IDiagnostics.__name__,
    Level.__name__,
    TensorError.__name__,
    InvalidShapeError.__name__,
    RankMismatchError.__name__,
    IndexOutOfRangeError.__name__,
    ShapeMismatchError.__name__,
    UnsupportedRankError.__name__,
    UnsupportedDimensionError.__name__,
    EmptyReductionError.__name__,
    StaleViewError.__name__,
    IMatrixOperand.__name__,
    ITensor.__name__,
]

"""
NTensor: an in-memory N-dimensional tensor engine.

Strided addressing over a flat buffer, zero-copy rectangular views,
elementwise arithmetic and reductions, and a Strassen matrix multiplication
with a direct base case.

Quick start
-----------
    from ntensor import Tensor, TensorConfig

    a = Tensor((2, 2), 0.0, TensorConfig())
    a[0, 0], a[0, 1], a[1, 0], a[1, 1] = 1, 2, 3, 4
    b = Tensor.from_numpy([[5, 6], [7, 8]])
    print(a.matmul(b).format_flat())   # 19 22 43 50
"""

import logging

from .domain import (
    DEFAULT_STRASSEN_THRESHOLD,
    STRASSEN_BASE_EXTENT,
    EmptyReductionError,
    IDiagnostics,
    IndexOutOfRangeError,
    InvalidShapeError,
    Level,
    RankMismatchError,
    ShapeMismatchError,
    StaleViewError,
    TensorConfig,
    TensorError,
    UnsupportedDimensionError,
    UnsupportedRankError,
)
from .infrastructure.diagnostics import (
    LOGGER_NAME,
    LoggingDiagnostics,
    default_diagnostics,
    fatal_on_error,
)
from .infrastructure.matmul import KernelChoice, matmul, select_kernel
from .infrastructure.tensor import Tensor, View

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_STRASSEN_THRESHOLD",
    "STRASSEN_BASE_EXTENT",
    "TensorConfig",
    "Tensor",
    "View",
    "matmul",
    "select_kernel",
    "KernelChoice",
    "IDiagnostics",
    "Level",
    "LoggingDiagnostics",
    "default_diagnostics",
    "fatal_on_error",
    "TensorError",
    "InvalidShapeError",
    "RankMismatchError",
    "IndexOutOfRangeError",
    "ShapeMismatchError",
    "UnsupportedRankError",
    "UnsupportedDimensionError",
    "EmptyReductionError",
    "StaleViewError",
]

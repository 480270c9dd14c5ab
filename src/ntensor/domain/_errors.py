"""
Tensor-engine exceptions for NTensor.

This module defines the typed, recoverable errors raised by tensor
construction, indexing, arithmetic, slicing and matrix multiplication.
Every error derives from `TensorError` and, in addition, from the builtin
exception category it belongs to (e.g., `ValueError`, `IndexError`), so
callers can catch either the precise type or the general category.

None of these errors terminate the process. Termination is an outer-layer
policy (see `ntensor.infrastructure.diagnostics.fatal_on_error`).
"""

from __future__ import annotations

from typing import Sequence

from ._format import format_shape


class TensorError(Exception):
    """
    Base class of every error raised by the tensor engine.
    """


class InvalidShapeError(TensorError, ValueError):
    """
    Raised when a tensor is constructed with an invalid shape.

    A shape is invalid when it has rank zero, or when any extent is
    negative, boolean, or not an integer.

    Attributes
    ----------
    shape : tuple
        The rejected shape, as received.
    """

    def __init__(self, shape: object, reason: str) -> None:
        super().__init__(f"Invalid shape {shape!r}: {reason}.")
        self.shape = shape
        self.reason = reason


class RankMismatchError(TensorError, ValueError):
    """
    Raised when a coordinate tuple has a different arity than the tensor rank.
    """

    def __init__(self, expected: int, got: int) -> None:
        super().__init__(
            f"Rank mismatch: tensor has rank {expected}, "
            f"position has {got} coordinate(s)."
        )
        self.expected = expected
        self.got = got


class IndexOutOfRangeError(TensorError, IndexError):
    """
    Raised when an address falls outside the addressable region.

    For owning tensors this is a flat offset outside ``[0, size)``. For
    views and slicing it is a row/column bound violation.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ShapeMismatchError(TensorError, ValueError):
    """
    Raised when two operands of a binary operation have incompatible shapes.

    Attributes
    ----------
    op : str
        Name of the operation (e.g., "add", "matmul").
    shape_a : tuple[int, ...]
        Shape of the left operand.
    shape_b : tuple[int, ...]
        Shape of the right operand.
    """

    def __init__(
        self, op: str, shape_a: Sequence[int], shape_b: Sequence[int]
    ) -> None:
        super().__init__(
            f"Shape mismatch in {op}: "
            f"{format_shape(shape_a)} vs {format_shape(shape_b)}."
        )
        self.op = op
        self.shape_a = tuple(shape_a)
        self.shape_b = tuple(shape_b)


class UnsupportedRankError(TensorError, ValueError):
    """
    Raised when an operation is invoked on a tensor of unsupported rank
    (slicing on rank > 2, matrix multiplication on rank != 2).
    """

    def __init__(self, op: str, rank: int, supported: str) -> None:
        super().__init__(f"{op} supports {supported} tensors, got rank {rank}.")
        self.op = op
        self.rank = rank


class UnsupportedDimensionError(TensorError, ValueError):
    """
    Raised when an odd extent reaches a Strassen quadrant split.
    """

    def __init__(self, shape: Sequence[int]) -> None:
        super().__init__(
            f"Cannot split {format_shape(shape)} into quadrants: extents must be even."
        )
        self.shape = tuple(shape)


class EmptyReductionError(TensorError, ValueError):
    """
    Raised when `mean`, `min` or `max` is requested on a zero-size tensor.
    """

    def __init__(self, op: str) -> None:
        super().__init__(f"{op}() of an empty tensor is undefined.")
        self.op = op


class StaleViewError(TensorError, RuntimeError):
    """
    Raised when a view outlives the layout it was created against, or when a
    released tensor is accessed.
    """

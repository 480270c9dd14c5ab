"""
Tensor interface definitions.

This module defines the domain-level interfaces for tensor-like objects using
structural typing. Two contracts are declared:

- `IMatrixOperand`: the minimal 2-D surface the matrix-multiplication engine
  needs from its inputs. Both owning tensors (rank 2) and views satisfy it.
- `ITensor`: the public surface of an owning tensor.

Notes
-----
The protocols are backend-agnostic. The concrete NumPy-backed classes live in
the infrastructure layer.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence, Union, runtime_checkable

from ._config import TensorConfig

Number = Union[int, float]


@runtime_checkable
class IMatrixOperand(Protocol):
    """
    A 2-D region of numbers addressable as a row-major window.

    Notes
    -----
    `window()` must return an array-like object that aliases the underlying
    storage; writes into it are writes into the operand.
    """

    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the ``(rows, cols)`` extent of the region.
        """
        ...

    def window(self) -> Any:
        """
        Return a zero-copy 2-D array over the region.
        """
        ...


@runtime_checkable
class ITensor(Protocol):
    """
    Owning tensor interface.

    An `ITensor` exclusively owns a contiguous, row-major buffer and exposes
    indexed access, elementwise arithmetic, reductions, slicing and matrix
    multiplication on top of it.
    """

    # ---------------------------------------------------------------------
    # Layout
    # ---------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the shape of the tensor.
        """
        ...

    @property
    def stride(self) -> tuple[int, ...]:
        """
        Return the row-major element strides of the tensor.
        """
        ...

    @property
    def size(self) -> int:
        """
        Return the number of elements in the buffer.
        """
        ...

    @property
    def ndim(self) -> int:
        """
        Return the rank of the tensor.
        """
        ...

    @property
    def config(self) -> TensorConfig:
        """
        Return the immutable configuration attached at construction.
        """
        ...

    # ---------------------------------------------------------------------
    # Element access
    # ---------------------------------------------------------------------
    def offset_of(self, position: Sequence[int]) -> int:
        """
        Translate a coordinate tuple into a validated flat offset.

        Raises
        ------
        RankMismatchError
            If ``len(position) != ndim``.
        IndexOutOfRangeError
            If the flat offset lies outside ``[0, size)``.
        """
        ...

    def get(self, position: Sequence[int]) -> Number:
        """
        Read the element at `position`.
        """
        ...

    def set(self, position: Sequence[int], value: Number) -> None:
        """
        Write `value` at `position`.
        """
        ...

    # ---------------------------------------------------------------------
    # Arithmetic / reductions
    # ---------------------------------------------------------------------
    def add(self, other: "ITensor") -> "ITensor":
        """
        Return the elementwise sum of two same-shaped tensors.
        """
        ...

    def sub(self, other: "ITensor") -> "ITensor":
        """
        Return the elementwise difference of two same-shaped tensors.
        """
        ...

    def scalar_multiply_in_place(self, scalar: Number) -> "ITensor":
        """
        Multiply every element by `scalar`, in place.
        """
        ...

    def sum(self) -> float:
        """
        Sum all elements in linear order.
        """
        ...

    def mean(self) -> float:
        """
        Arithmetic mean of all elements.
        """
        ...

    def min(self) -> float:
        """
        Smallest element.
        """
        ...

    def max(self) -> float:
        """
        Largest element.
        """
        ...

    # ---------------------------------------------------------------------
    # Structure
    # ---------------------------------------------------------------------
    def flatten(self) -> "ITensor":
        """
        Reshape in place to ``(1, size)`` without reallocating the buffer.
        """
        ...

    def slice(self, row_lo: int, row_hi: int, col_lo: int, col_hi: int) -> Any:
        """
        Return a non-owning rectangular view of a rank <= 2 tensor.
        """
        ...

    def matmul(self, other: "ITensor") -> "ITensor":
        """
        Return the matrix product of two rank-2 tensors.
        """
        ...

    def format_flat(self, precision: Optional[int] = None) -> str:
        """
        Return the elements in linear order as a space-separated string.
        """
        ...

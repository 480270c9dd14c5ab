"""
Arithmetic mixin defining elementwise Tensor operations.

This module declares :class:`TensorMixinArithmetic`, which implements the
elementwise binary operations (``add``/``sub`` and their operators), the
in-place scalar scale, and the region writers used as matrix-multiplication
scratch helpers.

Semantics
---------
- No broadcasting: binary operands must have identical shapes, otherwise
  `ShapeMismatchError` (carrying both shapes) is raised.
- Binary operations always return a *new* tensor that inherits the left
  operand's configuration and diagnostics.
- Scalar scaling is a distinct, in-place operation
  (`scalar_multiply_in_place` / ``*=``); nothing in this mixin overloads a
  tensor product with a scalar one.
"""

from __future__ import annotations

import numbers
from abc import ABC
from typing import Union

import numpy as np

from .....domain._errors import ShapeMismatchError
from .....domain._tensor import ITensor
from ..._region_ops import combine_add, combine_sub, copy_region

Number = Union[int, float]


class TensorMixinArithmetic(ABC):
    """
    Elementwise arithmetic for the concrete Tensor implementation.

    Notes
    -----
    Methods assume the host class provides `shape`, `dtype`, `_buffer()`,
    `_spawn(...)` and `_fail(...)`.
    """

    def _binary_operand(self: ITensor, op: str, other: object) -> ITensor:
        if not isinstance(other, type(self)):
            raise TypeError(f"{op} expects a Tensor operand, got {type(other)!r}")
        if self.shape != other.shape:
            raise self._fail(ShapeMismatchError(op, self.shape, other.shape))
        return other

    def add(self: ITensor, other: ITensor) -> ITensor:
        """
        Elementwise addition.

        Parameters
        ----------
        other : ITensor
            Right-hand operand with exactly the same shape as ``self``.

        Returns
        -------
        ITensor
            New tensor containing ``self + other``.

        Raises
        ------
        ShapeMismatchError
            If the shapes differ.
        """
        other = self._binary_operand("add", other)
        out = self._spawn(self.shape, dtype=np.result_type(self.dtype, other.dtype))
        np.add(self._buffer(), other._buffer(), out=out._buffer())
        return out

    def sub(self: ITensor, other: ITensor) -> ITensor:
        """
        Elementwise subtraction.

        Parameters
        ----------
        other : ITensor
            Right-hand operand with exactly the same shape as ``self``.

        Returns
        -------
        ITensor
            New tensor containing ``self - other``.

        Raises
        ------
        ShapeMismatchError
            If the shapes differ.
        """
        other = self._binary_operand("sub", other)
        out = self._spawn(self.shape, dtype=np.result_type(self.dtype, other.dtype))
        np.subtract(self._buffer(), other._buffer(), out=out._buffer())
        return out

    def __add__(self: ITensor, other: object) -> ITensor:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.add(other)

    def __sub__(self: ITensor, other: object) -> ITensor:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.sub(other)

    def scalar_multiply_in_place(self: ITensor, scalar: Number) -> ITensor:
        """
        Multiply every element by `scalar`, mutating this tensor.

        Returns
        -------
        ITensor
            `self`, for chaining.

        Notes
        -----
        The buffer keeps its dtype; the product is cast back into it.
        """
        buf = self._buffer()
        np.multiply(buf, scalar, out=buf, casting="unsafe")
        return self

    def __imul__(self: ITensor, scalar: object) -> ITensor:
        if isinstance(scalar, bool) or not isinstance(scalar, numbers.Number):
            return NotImplemented
        return self.scalar_multiply_in_place(scalar)

    # ----------------------------
    # Region writers (rank 2)
    # ----------------------------
    def combine_add(self: ITensor, a: object, b: object) -> None:
        """
        Overwrite this rank-2 tensor with ``a + b`` (views or tensors).
        """
        combine_add(self, a, b)

    def combine_sub(self: ITensor, a: object, b: object) -> None:
        """
        Overwrite this rank-2 tensor with ``a - b`` (views or tensors).
        """
        combine_sub(self, a, b)

    def copy_from(self: ITensor, src: object) -> None:
        """
        Overwrite this tensor with the elements of `src`.

        `src` may be a tensor of the same shape (any rank) or, for rank-2
        tensors, a view of the same extent.

        Raises
        ------
        ShapeMismatchError
            If the shapes differ.
        """
        if isinstance(src, type(self)):
            self._binary_operand("copy_from", src)
            np.copyto(self._buffer(), src._buffer(), casting="unsafe")
            return
        copy_region(self, src)

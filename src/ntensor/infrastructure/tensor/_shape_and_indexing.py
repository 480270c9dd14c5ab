"""
Tensor indexing, layout and slicing mixin (NumPy backend).

This module defines `TensorShapeAndIndexingMixin`, a cohesive mixin that
implements coordinate addressing and layout-changing methods for the
NumPy-backed concrete Tensor implementation.

Design notes
------------
- This mixin is intended to be inherited by the concrete `Tensor` class.
- To avoid circular imports, the mixin does not import `Tensor`; `View` is
  imported lazily inside `slice`.
- Addressing follows the row-major stride model in `domain._shape`. Only the
  flat offset is bounds-checked: a coordinate whose individual components
  exceed their extents is accepted as long as its flat offset stays inside
  ``[0, size)``.
- `flatten` is the only operation that changes a tensor's layout after
  construction. It reuses the existing buffer and bumps the tensor's
  generation so that every outstanding view becomes stale.
"""

from __future__ import annotations

import numbers
from typing import Any, Sequence, Union

import numpy as np

from ...domain._errors import (
    IndexOutOfRangeError,
    RankMismatchError,
    UnsupportedRankError,
)
from ...domain._shape import compute_strides, flat_offset, format_shape
from ...domain._tensor import ITensor

Number = Union[int, float]


class TensorShapeAndIndexingMixin(ITensor):
    """
    Addressing and layout operations for the concrete Tensor implementation.

    Notes
    -----
    Methods assume the host class provides:
        - `.shape`, `.stride`, `.size`, `.ndim`
        - `._buffer()`, `._fail(...)`, `._invalidate_views(...)`
        - the `_shape` / `_stride` fields
    """

    @staticmethod
    def _normalize_position(position: Union[int, Sequence[int]]) -> tuple[int, ...]:
        if isinstance(position, numbers.Integral) and not isinstance(position, bool):
            return (int(position),)
        pos = tuple(position)
        for p in pos:
            if isinstance(p, bool) or not isinstance(p, numbers.Integral):
                raise TypeError(f"Coordinate {p!r} is not an integer.")
        return tuple(int(p) for p in pos)

    def offset_of(self, position: Union[int, Sequence[int]]) -> int:
        """
        Translate a coordinate into a validated flat buffer offset.

        Parameters
        ----------
        position : Union[int, Sequence[int]]
            One coordinate per dimension. A bare int is accepted for rank-1
            tensors.

        Returns
        -------
        int
            ``sum(position[i] * stride[i])``.

        Raises
        ------
        TypeError
            If a coordinate is not an integer.
        RankMismatchError
            If the coordinate arity differs from the tensor rank.
        IndexOutOfRangeError
            If the flat offset falls outside ``[0, size)``.
        """
        pos = self._normalize_position(position)
        if len(pos) != self.ndim:
            raise self._fail(RankMismatchError(self.ndim, len(pos)))

        off = flat_offset(pos, self.stride)
        if off < 0 or off >= self.size:
            raise self._fail(
                IndexOutOfRangeError(
                    f"Position {format_shape(pos)} maps to flat offset {off}, "
                    f"outside [0, {self.size}) for shape {format_shape(self.shape)}."
                )
            )
        return off

    def get(self, position: Union[int, Sequence[int]]) -> Number:
        """
        Read one element.

        Returns
        -------
        Number
            The element as a Python scalar.
        """
        off = self.offset_of(position)
        return self._buffer()[off].item()

    def set(self, position: Union[int, Sequence[int]], value: Number) -> None:
        """
        Write one element in place.
        """
        off = self.offset_of(position)
        self._buffer()[off] = value

    def __getitem__(self, position: Union[int, Sequence[int]]) -> Number:
        return self.get(position)

    def __setitem__(self, position: Union[int, Sequence[int]], value: Number) -> None:
        self.set(position, value)

    def _matrix_extent(self) -> tuple[int, int]:
        """
        Return ``(rows, cols)`` for a rank <= 2 tensor.

        Rank-1 tensors are addressed as a single row.
        """
        if self.ndim == 1:
            return 1, self.shape[0]
        return self.shape[0], self.shape[1]

    def window(self) -> np.ndarray:
        """
        Return a zero-copy 2-D NumPy array over this tensor's buffer.

        Raises
        ------
        UnsupportedRankError
            If the tensor rank exceeds 2.
        """
        if self.ndim > 2:
            raise self._fail(UnsupportedRankError("window", self.ndim, "rank <= 2"))
        return self._buffer().reshape(self._matrix_extent())

    def flatten(self) -> "ITensor":
        """
        Reshape this tensor in place to ``(1, size)``.

        The existing buffer object is kept (no reallocation, no copy). Because
        the buffer is always contiguous and row-major, linear element order is
        preserved for any source rank.

        Returns
        -------
        ITensor
            `self`, for chaining.

        Notes
        -----
        Views created before the call are invalidated and raise
        `StaleViewError` on next use.
        """
        self._buffer()
        self._shape = (1, self.size)
        self._stride = compute_strides(self._shape)
        self._invalidate_views("flatten")
        return self

    def slice(self, row_lo: int, row_hi: int, col_lo: int, col_hi: int) -> Any:
        """
        Return a non-owning rectangular view ``[row_lo:row_hi, col_lo:col_hi]``.

        Parameters
        ----------
        row_lo, row_hi : int
            Half-open row range. Must satisfy ``0 <= row_lo <= row_hi <= rows``.
        col_lo, col_hi : int
            Half-open column range. Must satisfy ``0 <= col_lo <= col_hi <= cols``.

        Returns
        -------
        View
            A view sharing this tensor's storage.

        Raises
        ------
        UnsupportedRankError
            If the tensor rank exceeds 2.
        IndexOutOfRangeError
            If the requested rectangle does not fit inside the tensor.
        """
        from ._view import View

        if self.ndim > 2:
            raise self._fail(UnsupportedRankError("slice", self.ndim, "rank <= 2"))

        self._buffer()
        rows, cols = self._matrix_extent()
        row_stride, col_stride = (cols, 1)
        _check_rect(self, rows, cols, row_lo, row_hi, col_lo, col_hi)

        return View(
            self,
            offset=int(row_lo) * row_stride + int(col_lo) * col_stride,
            shape=(int(row_hi) - int(row_lo), int(col_hi) - int(col_lo)),
            strides=(row_stride, col_stride),
        )


def _check_rect(
    owner: Any,
    rows: int,
    cols: int,
    row_lo: int,
    row_hi: int,
    col_lo: int,
    col_hi: int,
) -> None:
    """
    Validate a half-open rectangle against a ``rows x cols`` extent.

    `owner` must provide `_fail(err)`; it is used to report the rejection.
    """
    if not (0 <= row_lo <= row_hi <= rows):
        raise owner._fail(
            IndexOutOfRangeError(
                f"Row range [{row_lo}, {row_hi}) is invalid for {rows} row(s)."
            )
        )
    if not (0 <= col_lo <= col_hi <= cols):
        raise owner._fail(
            IndexOutOfRangeError(
                f"Column range [{col_lo}, {col_hi}) is invalid for {cols} column(s)."
            )
        )

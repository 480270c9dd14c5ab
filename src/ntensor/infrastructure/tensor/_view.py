"""
Non-owning rectangular views over an owning `Tensor`.

A `View` is a small descriptor (parent, base offset, ``(rows, cols)`` extent,
``(row_stride, col_stride)``) over a sub-region of its parent's flat buffer.
It never allocates element storage: reads and writes go straight to the
parent's buffer, so mutations through a view are visible in the parent and
vice versa.

Lifetime
--------
A view records its parent's *generation* when it is created. The parent
bumps its generation whenever its layout changes (`flatten`) or its storage
is dropped (`release`). Every view access compares generations and raises
`StaleViewError` on mismatch, so a view can never silently read through an
outdated layout.

Descriptors are plain tuples copied by value from the parent at creation
time; nothing is shared with, or leaked from, the parent's own metadata.
"""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING, Union

import numpy as np
from numpy.lib.stride_tricks import as_strided

from ...domain._errors import IndexOutOfRangeError, StaleViewError, TensorError
from ._region_ops import combine_add, combine_sub, copy_region
from ._shape_and_indexing import _check_rect

if TYPE_CHECKING:
    from ._tensor import Tensor

Number = Union[int, float]


class View:
    """
    Rectangular, non-owning window into a `Tensor`'s buffer.

    Parameters
    ----------
    parent : Tensor
        The owning tensor whose storage this view addresses.
    offset : int
        Flat offset of element ``(0, 0)`` of the view in the parent buffer.
    shape : tuple[int, int]
        ``(rows, cols)`` extent of the view.
    strides : tuple[int, int]
        Element strides ``(row_stride, col_stride)`` in the parent buffer.

    Notes
    -----
    Views are normally obtained through `Tensor.slice` or `View.slice`, which
    validate the rectangle against the parent's bounds.
    """

    __slots__ = ("_parent", "_offset", "_shape", "_strides", "_generation")

    def __init__(
        self,
        parent: "Tensor",
        *,
        offset: int,
        shape: tuple[int, int],
        strides: tuple[int, int],
    ) -> None:
        self._parent = parent
        self._offset = int(offset)
        self._shape = (int(shape[0]), int(shape[1]))
        self._strides = (int(strides[0]), int(strides[1]))
        self._generation = parent.generation

    # ------------------------------------------------------------------
    # Descriptors
    # ------------------------------------------------------------------
    @property
    def parent(self) -> "Tensor":
        return self._parent

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def shape(self) -> tuple[int, int]:
        return self._shape

    @property
    def strides(self) -> tuple[int, int]:
        return self._strides

    @property
    def size(self) -> int:
        return self._shape[0] * self._shape[1]

    @property
    def dtype(self) -> np.dtype:
        return self._parent.dtype

    @property
    def is_valid(self) -> bool:
        """
        True while the parent's layout and storage are unchanged.
        """
        p = self._parent
        return (not p.released) and p.generation == self._generation

    def _fail(self, err: TensorError) -> TensorError:
        return self._parent._fail(err)

    def _check(self) -> None:
        if not self.is_valid:
            raise self._fail(
                StaleViewError(
                    f"View {self._shape} at offset {self._offset} is stale: its parent "
                    f"was released or reshaped (generation {self._generation} -> "
                    f"{self._parent.generation})."
                )
            )

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------
    def index(self, i: int, j: int) -> int:
        """
        Return the parent-buffer offset of view element ``(i, j)``.

        Raises
        ------
        StaleViewError
            If the parent was released or reshaped since this view was made.
        IndexOutOfRangeError
            If ``(i, j)`` lies outside the view's extent.
        """
        self._check()
        rows, cols = self._shape
        if not (0 <= i < rows and 0 <= j < cols):
            raise self._fail(
                IndexOutOfRangeError(
                    f"View index ({i}, {j}) is outside extent ({rows}, {cols})."
                )
            )
        return self._offset + int(i) * self._strides[0] + int(j) * self._strides[1]

    def get(self, i: int, j: int) -> Number:
        off = self.index(i, j)
        return self._parent._buffer()[off].item()

    def set(self, i: int, j: int, value: Number) -> None:
        off = self.index(i, j)
        self._parent._buffer()[off] = value

    def __getitem__(self, position: tuple[int, int]) -> Number:
        i, j = position
        return self.get(i, j)

    def __setitem__(self, position: tuple[int, int], value: Number) -> None:
        i, j = position
        self.set(i, j, value)

    def window(self) -> np.ndarray:
        """
        Return a zero-copy, writable 2-D NumPy array over the view's region.

        The array aliases the parent's buffer; it must not be kept beyond
        the view's validity.
        """
        self._check()
        buf = self._parent._buffer()
        rows, cols = self._shape
        if rows == 0 or cols == 0:
            return buf[:0].reshape(rows, cols)
        item = buf.itemsize
        return as_strided(
            buf[self._offset :],
            shape=(rows, cols),
            strides=(self._strides[0] * item, self._strides[1] * item),
        )

    def slice(self, row_lo: int, row_hi: int, col_lo: int, col_hi: int) -> "View":
        """
        Return a sub-view ``[row_lo:row_hi, col_lo:col_hi]`` of this view.

        The sub-view addresses the same parent directly.
        """
        self._check()
        rows, cols = self._shape
        _check_rect(self, rows, cols, row_lo, row_hi, col_lo, col_hi)
        return View(
            self._parent,
            offset=self._offset
            + int(row_lo) * self._strides[0]
            + int(col_lo) * self._strides[1],
            shape=(int(row_hi) - int(row_lo), int(col_hi) - int(col_lo)),
            strides=self._strides,
        )

    # ------------------------------------------------------------------
    # Region writes
    # ------------------------------------------------------------------
    def combine_add(self, a: object, b: object) -> None:
        """
        Write ``a + b`` elementwise into this view.
        """
        combine_add(self, a, b)

    def combine_sub(self, a: object, b: object) -> None:
        """
        Write ``a - b`` elementwise into this view.
        """
        combine_sub(self, a, b)

    def copy_from(self, src: object) -> None:
        """
        Copy `src` elementwise into this view.
        """
        copy_region(self, src)

    # ------------------------------------------------------------------
    # Materialisation / debugging
    # ------------------------------------------------------------------
    def to_tensor(self) -> "Tensor":
        """
        Return a new owning tensor holding a copy of this view's elements.

        The copy inherits the parent's configuration, dtype and diagnostics.
        """
        out = self._parent._spawn(self._shape)
        out.window()[...] = self.window()
        return out

    def to_numpy(self) -> np.ndarray:
        return np.array(self.window(), copy=True)

    def format_flat(self, precision: Optional[int] = None) -> str:
        """
        Return the view's elements in row-major order, space separated.
        """
        from .mixins.memory import format_values

        return format_values(self.window().ravel(), precision)

    def print_flat(self, file=None, precision: Optional[int] = None) -> None:
        print(self.format_flat(precision), file=file)

    def __repr__(self) -> str:
        state = "valid" if self.is_valid else "stale"
        return (
            f"View(shape={self._shape}, offset={self._offset}, "
            f"strides={self._strides}, {state})"
        )

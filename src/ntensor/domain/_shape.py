"""
Row-major shape and stride arithmetic.

Pure functions with no dependency on a storage backend. Every tensor in the
package derives its strides, size and flat offsets through this module.

Conventions
-----------
- A shape is a tuple of non-negative ints of rank >= 1.
- Strides are measured in elements (not bytes), row-major:
  ``stride[-1] == 1`` and ``stride[i] == shape[i + 1] * stride[i + 1]``.
- For every valid coordinate ``pos``, ``flat_offset(pos, strides)`` lies in
  ``[0, size)``.
"""

from __future__ import annotations

import numbers
from typing import Iterable, Sequence

from ._errors import InvalidShapeError
from ._format import format_shape

__all__ = [
    "normalize_shape",
    "compute_strides",
    "compute_size",
    "flat_offset",
    "format_shape",
]


def normalize_shape(shape: Iterable[int]) -> tuple[int, ...]:
    """
    Validate a shape and return it as a tuple of Python ints.

    Parameters
    ----------
    shape : Iterable[int]
        Candidate shape. A bare int is accepted as a rank-1 shape.

    Returns
    -------
    tuple[int, ...]
        The normalized shape.

    Raises
    ------
    InvalidShapeError
        If the rank is zero, or any extent is negative, boolean or not
        integral.
    """
    if isinstance(shape, numbers.Integral) and not isinstance(shape, bool):
        shape = (shape,)

    try:
        dims = tuple(shape)
    except TypeError:
        raise InvalidShapeError(shape, "shape must be an iterable of ints") from None

    if len(dims) == 0:
        raise InvalidShapeError(dims, "rank must be at least 1")

    out = []
    for d in dims:
        if isinstance(d, bool) or not isinstance(d, numbers.Integral):
            raise InvalidShapeError(dims, f"extent {d!r} is not an integer")
        if d < 0:
            raise InvalidShapeError(dims, f"extent {d} is negative")
        out.append(int(d))
    return tuple(out)


def compute_strides(shape: Sequence[int]) -> tuple[int, ...]:
    """
    Compute row-major element strides for `shape`.
    """
    strides = [1] * len(shape)
    for i in range(len(shape) - 2, -1, -1):
        strides[i] = shape[i + 1] * strides[i + 1]
    return tuple(strides)


def compute_size(shape: Sequence[int]) -> int:
    """
    Return the number of elements addressed by `shape`.
    """
    n = 1
    for d in shape:
        n *= d
    return n


def flat_offset(position: Sequence[int], strides: Sequence[int]) -> int:
    """
    Map a coordinate tuple to its offset in the flat buffer.

    The caller is responsible for checking that ``len(position)`` equals
    ``len(strides)``; this function only performs the dot product.
    """
    off = 0
    for p, s in zip(position, strides):
        off += int(p) * s
    return off


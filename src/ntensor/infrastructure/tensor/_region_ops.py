"""
Elementwise region kernels shared by `Tensor` and `View`.

Each function writes into the 2-D window of `dst` and reads from the windows
of its operands. Operands may be views or rank-2 tensors, i.e., anything that
satisfies `IMatrixOperand`. Shapes must match exactly.

These are the scratch-buffer helpers used by the Strassen kernel.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from ...domain._errors import ShapeMismatchError
from ...domain._tensor import IMatrixOperand


def _window_of(owner: Any, op: str, operand: Any) -> np.ndarray:
    if not isinstance(operand, IMatrixOperand):
        raise TypeError(f"{op} expects a Tensor or View operand, got {type(operand)!r}")
    if tuple(operand.shape) != tuple(owner.shape):
        raise owner._fail(ShapeMismatchError(op, owner.shape, operand.shape))
    return operand.window()


def combine_add(dst: Any, a: Any, b: Any) -> None:
    """
    ``dst[i, j] = a[i, j] + b[i, j]`` over the extent of `dst`.
    """
    out = dst.window()
    np.add(_window_of(dst, "combine_add", a), _window_of(dst, "combine_add", b), out=out)


def combine_sub(dst: Any, a: Any, b: Any) -> None:
    """
    ``dst[i, j] = a[i, j] - b[i, j]`` over the extent of `dst`.
    """
    out = dst.window()
    np.subtract(
        _window_of(dst, "combine_sub", a), _window_of(dst, "combine_sub", b), out=out
    )


def copy_region(dst: Any, src: Any) -> None:
    """
    ``dst[i, j] = src[i, j]`` over the extent of `dst`.
    """
    out = dst.window()
    np.copyto(out, _window_of(dst, "copy_from", src), casting="unsafe")

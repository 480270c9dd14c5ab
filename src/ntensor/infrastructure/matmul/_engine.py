"""
Public matrix-multiplication entry point.

`matmul` validates its operands and hands the product to the kernel
registry, which applies the direct/Strassen selection policy.
"""

from __future__ import annotations

from typing import Any

from ...domain._errors import ShapeMismatchError, UnsupportedRankError
from ._base import MatmulKernel


def matmul(a: Any, b: Any) -> Any:
    """
    Matrix product of two rank-2 tensors.

    Parameters
    ----------
    a : Tensor
        Left operand of shape ``(m, k)``. The result inherits its
        configuration, dtype and diagnostics.
    b : Tensor
        Right operand of shape ``(k, n)``.

    Returns
    -------
    Tensor
        New ``(m, n)`` tensor.

    Raises
    ------
    TypeError
        If either operand is not a Tensor.
    UnsupportedRankError
        If either operand is not rank 2.
    ShapeMismatchError
        If ``a.shape[1] != b.shape[0]``. The error carries both shapes.
    """
    from ..tensor._tensor import Tensor

    if not isinstance(a, Tensor) or not isinstance(b, Tensor):
        raise TypeError(
            f"matmul expects Tensor operands, got {type(a)!r} and {type(b)!r}"
        )

    for operand in (a, b):
        if operand.ndim != 2:
            raise a._fail(UnsupportedRankError("matmul", operand.ndim, "rank-2"))

    if a.shape[1] != b.shape[0]:
        raise a._fail(ShapeMismatchError("matmul", a.shape, b.shape))

    return MatmulKernel.dispatch(a, b, like=a, depth=0)

"""
Direct (schoolbook) matrix-multiplication kernel.

``out[i, j] = sum_p a[i, p] * b[p, j]`` evaluated into a freshly allocated,
zero-initialised tensor, in O(m * k * n) time. The inner loops run inside
NumPy's matmul on zero-copy windows of the operands, so views are consumed
without materialising them.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from ._base import KernelChoice, MatmulKernel


@MatmulKernel.register_kernel(KernelChoice.DIRECT.value)
def direct_matmul(a: Any, b: Any, like: Any, depth: int = 0) -> Any:
    """
    Multiply two matrix operands directly.

    Parameters
    ----------
    a : IMatrixOperand
        Left operand of extent ``(m, k)``.
    b : IMatrixOperand
        Right operand of extent ``(k, n)``.
    like : Tensor
        Tensor whose configuration and diagnostics the result inherits.
    depth : int
        Recursion depth; unused by this kernel.

    Returns
    -------
    Tensor
        New ``(m, n)`` tensor holding ``a @ b``.
    """
    a_w = a.window()
    b_w = b.window()
    m = a_w.shape[0]
    n = b_w.shape[1]

    out = like._spawn((m, n), 0, dtype=np.result_type(a_w.dtype, b_w.dtype))
    np.matmul(a_w, b_w, out=out.window())
    return out

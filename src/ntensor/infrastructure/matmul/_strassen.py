"""
Strassen matrix-multiplication kernel.

One level of the recursion:

1. Split ``A`` into quadrant views ``a b / c d`` and ``B`` into ``e f / g h``.
2. Form seven products. Each operand pair is written into two quadrant-sized
   scratch tensors with ``combine_add`` / ``combine_sub`` / ``copy_from`` and
   multiplied recursively through `MatmulKernel.dispatch`:

   - ``m1 = (a + d)(e + h)``
   - ``m2 = d(g - e)``
   - ``m3 = (a + b)h``
   - ``m4 = (b - d)(g + h)``
   - ``m5 = a(f - h)``
   - ``m6 = (c + d)e``
   - ``m7 = (a - c)(e + f)``

3. Combine: ``c11 = m1 + m2 - m3 + m4``, ``c12 = m5 + m3``,
   ``c21 = m6 + m2``, ``c22 = m5 + m1 - m6 - m7``.
4. Stack ``c11 c12 / c21 c22`` into one contiguous row-major result.

Sequential mode reuses a single pair of scratch tensors across all seven
steps. With ``config.max_workers > 0`` the top level runs the seven branches
on a thread pool; each branch then owns its own scratch pair, and all seven
results are joined before the combine step. Deeper levels always run
sequentially.

Scratch, padded and result tensors use ``np.result_type`` of the two operand
dtypes, the same result dtype the direct kernel produces.

Odd extents cannot be split. Under the ``"pad"`` policy the operands are
zero-padded to even extents and the result is cropped back; under
``"reject"`` an `UnsupportedDimensionError` is raised.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Sequence

import numpy as np

from ...domain._diagnostics import Level
from ...domain._errors import UnsupportedDimensionError
from ._base import KernelChoice, MatmulKernel

# (op, *operand names); op is one of "add", "sub", "copy".
_Load = Sequence[str]

_PRODUCTS: tuple[tuple[_Load, _Load], ...] = (
    (("add", "a", "d"), ("add", "e", "h")),  # m1
    (("copy", "d"), ("sub", "g", "e")),  # m2
    (("add", "a", "b"), ("copy", "h")),  # m3
    (("sub", "b", "d"), ("add", "g", "h")),  # m4
    (("copy", "a"), ("sub", "f", "h")),  # m5
    (("add", "c", "d"), ("copy", "e")),  # m6
    (("sub", "a", "c"), ("add", "e", "f")),  # m7
)


def split_quadrants(x: Any) -> tuple[Any, Any, Any, Any]:
    """
    Split a rank-2 tensor or view into its four quadrant views.

    Returns
    -------
    tuple
        ``(top_left, top_right, bottom_left, bottom_right)``.

    Raises
    ------
    UnsupportedDimensionError
        If either extent is odd.
    """
    rows, cols = x.shape
    if rows % 2 or cols % 2:
        raise UnsupportedDimensionError(x.shape)
    r, c = rows // 2, cols // 2
    return (
        x.slice(0, r, 0, c),
        x.slice(0, r, c, cols),
        x.slice(r, rows, 0, c),
        x.slice(r, rows, c, cols),
    )


def stack_quadrants(c11: Any, c12: Any, c21: Any, c22: Any, like: Any) -> Any:
    """
    Assemble four ``R x C`` quadrants into one contiguous ``2R x 2C`` tensor.

    For each row ``i``, the top half receives ``c11[i]`` followed by
    ``c12[i]`` and the bottom half receives ``c21[i]`` followed by
    ``c22[i]``.
    """
    rows, cols = c11.shape
    width = 2 * cols
    out = like._spawn((2 * rows, width), 0, dtype=c11.dtype)
    buf = out.data
    q11, q12, q21, q22 = (q.window() for q in (c11, c12, c21, c22))
    for i in range(rows):
        top = i * width
        bottom = (rows + i) * width
        buf[top : top + cols] = q11[i]
        buf[top + cols : top + width] = q12[i]
        buf[bottom : bottom + cols] = q21[i]
        buf[bottom + cols : bottom + width] = q22[i]
    return out


def _pad_even(x: Any, like: Any) -> Any:
    rows, cols = x.shape
    if rows % 2 == 0 and cols % 2 == 0:
        return x
    padded = like._spawn((rows + rows % 2, cols + cols % 2), 0, dtype=x.dtype)
    padded.slice(0, rows, 0, cols).copy_from(x)
    return padded


def _load(dst: Any, spec: _Load, quads: dict[str, Any]) -> None:
    op = spec[0]
    if op == "add":
        dst.combine_add(quads[spec[1]], quads[spec[2]])
    elif op == "sub":
        dst.combine_sub(quads[spec[1]], quads[spec[2]])
    else:
        dst.copy_from(quads[spec[1]])


def _sequential_products(
    quads: dict[str, Any], like: Any, depth: int, dtype: Any
) -> list[Any]:
    a_rows, a_cols = quads["a"].shape
    b_cols = quads["e"].shape[1]
    left = like._spawn((a_rows, a_cols), dtype=dtype)
    right = like._spawn((a_cols, b_cols), dtype=dtype)

    products = []
    for left_spec, right_spec in _PRODUCTS:
        _load(left, left_spec, quads)
        _load(right, right_spec, quads)
        products.append(MatmulKernel.dispatch(left, right, like=like, depth=depth + 1))
    return products


def _parallel_products(
    quads: dict[str, Any], like: Any, depth: int, dtype: Any, max_workers: int
) -> list[Any]:
    a_rows, a_cols = quads["a"].shape
    b_cols = quads["e"].shape[1]

    def branch(left_spec: _Load, right_spec: _Load) -> Any:
        left = like._spawn((a_rows, a_cols), dtype=dtype)
        right = like._spawn((a_cols, b_cols), dtype=dtype)
        _load(left, left_spec, quads)
        _load(right, right_spec, quads)
        return MatmulKernel.dispatch(left, right, like=like, depth=depth + 1)

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = [pool.submit(branch, ls, rs) for ls, rs in _PRODUCTS]
        return [f.result() for f in futures]


@MatmulKernel.register_kernel(KernelChoice.STRASSEN.value)
def strassen_matmul(a: Any, b: Any, like: Any, depth: int = 0) -> Any:
    """
    Multiply two matrix operands with one level of Strassen recursion.

    Parameters
    ----------
    a : IMatrixOperand
        Left operand of extent ``(m, k)``.
    b : IMatrixOperand
        Right operand of extent ``(k, n)``.
    like : Tensor
        Tensor whose configuration and diagnostics the result inherits.
    depth : int
        Recursion depth of this call.

    Returns
    -------
    Tensor
        New ``(m, n)`` tensor holding ``a @ b``, with dtype
        ``np.result_type(a.dtype, b.dtype)``.

    Raises
    ------
    UnsupportedDimensionError
        If an extent is odd and ``config.odd_dimension_policy == "reject"``.
    """
    config = like.config
    m, k = a.shape
    n = b.shape[1]

    if m % 2 or k % 2 or n % 2:
        if config.odd_dimension_policy == "reject":
            bad = a.shape if (m % 2 or k % 2) else b.shape
            raise like._fail(UnsupportedDimensionError(bad))
        like.diagnostics.log(
            Level.DEBUG,
            "strassen: padding (%d x %d) @ (%d x %d) to even extents",
            m,
            k,
            k,
            n,
        )
        full = strassen_matmul(_pad_even(a, like), _pad_even(b, like), like, depth)
        return full.slice(0, m, 0, n).to_tensor()

    a11, a12, a21, a22 = split_quadrants(a)
    b11, b12, b21, b22 = split_quadrants(b)
    quads = {
        "a": a11,
        "b": a12,
        "c": a21,
        "d": a22,
        "e": b11,
        "f": b12,
        "g": b21,
        "h": b22,
    }
    dtype = np.result_type(a.dtype, b.dtype)

    if depth == 0 and config.max_workers > 0:
        m1, m2, m3, m4, m5, m6, m7 = _parallel_products(
            quads, like, depth, dtype, config.max_workers
        )
    else:
        m1, m2, m3, m4, m5, m6, m7 = _sequential_products(quads, like, depth, dtype)

    c11 = m1.add(m2).sub(m3).add(m4)
    c12 = m5.add(m3)
    c21 = m6.add(m2)
    c22 = m5.add(m1).sub(m6).sub(m7)
    return stack_quadrants(c11, c12, c21, c22, like)

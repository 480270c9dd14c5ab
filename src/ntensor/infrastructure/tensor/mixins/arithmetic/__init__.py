"""
Arithmetic mixin for Tensor operations.

Provides elementwise addition and subtraction, in-place scalar scaling, and
the rank-2 region writers (``combine_add`` / ``combine_sub`` / ``copy_from``)
used as matrix-multiplication scratch helpers.

Public API
----------
- ``TensorMixinArithmetic``
"""

from ._base import TensorMixinArithmetic

__all__ = [
    TensorMixinArithmetic.__name__,
]

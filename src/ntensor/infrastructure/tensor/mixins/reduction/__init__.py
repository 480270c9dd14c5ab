"""
Reduction mixin for Tensor operations.

Provides ``sum``, ``mean``, ``min`` and ``max`` over all elements.

Public API
----------
- ``TensorMixinReduction``
"""

from ._base import TensorMixinReduction

__all__ = [
    TensorMixinReduction.__name__,
]

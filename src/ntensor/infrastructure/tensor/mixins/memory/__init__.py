"""
Memory / construction mixin for Tensor.

Public API
----------
- ``TensorMixinMemory``
- ``format_values``
"""

from ._base import TensorMixinMemory, format_values

__all__ = [
    TensorMixinMemory.__name__,
    format_values.__name__,
]

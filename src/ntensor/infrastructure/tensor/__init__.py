"""
Owning tensors and views.

Public API
----------
- ``Tensor``
- ``View``
"""

from ._tensor import Tensor
from ._view import View

__all__ = [
    Tensor.__name__,
    View.__name__,
]

"""
Reduction mixin defining whole-tensor folds.

This module declares :class:`TensorMixinReduction`, which implements `sum`,
`mean`, `min` and `max` over the tensor's flat buffer in linear (stride-1)
order. Every reduction returns a Python ``float``.

Empty tensors
-------------
- ``sum()`` of an empty tensor is ``0.0`` (the additive identity).
- ``mean()``, ``min()`` and ``max()`` have no meaningful value for an empty
  tensor and raise `EmptyReductionError`.
"""

from __future__ import annotations

from abc import ABC

import numpy as np

from .....domain._errors import EmptyReductionError
from .....domain._tensor import ITensor


class TensorMixinReduction(ABC):
    """
    Whole-tensor reductions for the concrete Tensor implementation.

    Notes
    -----
    Floating-point sums are accumulated in float64 regardless of the buffer
    dtype, then returned as a Python float.
    """

    def _nonempty_buffer(self: ITensor, op: str) -> np.ndarray:
        buf = self._buffer()
        if buf.size == 0:
            raise self._fail(EmptyReductionError(op))
        return buf

    def sum(self: ITensor) -> float:
        """
        Sum of all elements.

        Returns
        -------
        float
            The sum; ``0.0`` for an empty tensor.
        """
        return float(np.add.reduce(self._buffer(), dtype=np.float64))

    def mean(self: ITensor) -> float:
        """
        Arithmetic mean of all elements.

        Raises
        ------
        EmptyReductionError
            If the tensor has no elements.
        """
        buf = self._nonempty_buffer("mean")
        return float(np.add.reduce(buf, dtype=np.float64)) / buf.size

    def min(self: ITensor) -> float:
        """
        Smallest element.

        Raises
        ------
        EmptyReductionError
            If the tensor has no elements.
        """
        return float(np.min(self._nonempty_buffer("min")))

    def max(self: ITensor) -> float:
        """
        Largest element.

        Raises
        ------
        EmptyReductionError
            If the tensor has no elements.
        """
        return float(np.max(self._nonempty_buffer("max")))

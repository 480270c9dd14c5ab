"""
Concrete owning Tensor implementation (NumPy backend).

This module provides `Tensor`, the owning N-dimensional array of the engine.
A tensor exclusively owns a contiguous, row-major, one-dimensional NumPy
buffer of ``size`` elements. Its shape, strides and size are derived once at
construction (see `domain._shape`).

Behaviour is split across mixins, in the same way other structural and
numerical concerns are:

- `TensorShapeAndIndexingMixin`: coordinate addressing, ``flatten``, ``slice``
- `TensorMixinArithmetic`: ``add``/``sub``, in-place scalar scale, region writers
- `TensorMixinReduction`: ``sum``/``mean``/``min``/``max``
- `TensorMixinMemory`: factories, ``fill``, host copies, flat dumps

Design notes
------------
- Views hold a reference to their parent and a snapshot of its
  ``generation``. The generation is bumped on ``flatten`` and ``release``;
  views compare it on every access.
- Rejected operations are reported at WARN level through the tensor's
  diagnostics sink, then raised as typed errors. The tensor never
  terminates the process.
"""

from __future__ import annotations

import numbers
from typing import Any, Optional, Union

import numpy as np

from ...domain._config import TensorConfig
from ...domain._diagnostics import IDiagnostics, Level
from ...domain._errors import StaleViewError, TensorError
from ...domain._shape import compute_size, compute_strides, normalize_shape
from ...domain._tensor import ITensor
from ..diagnostics import default_diagnostics
from ._shape_and_indexing import TensorShapeAndIndexingMixin
from .mixins.arithmetic import TensorMixinArithmetic
from .mixins.memory import TensorMixinMemory
from .mixins.reduction import TensorMixinReduction

Number = Union[int, float]


class Tensor(
    TensorShapeAndIndexingMixin,
    TensorMixinArithmetic,
    TensorMixinReduction,
    TensorMixinMemory,
    ITensor,
):
    """
    Owning N-dimensional tensor backed by a flat NumPy buffer.

    Parameters
    ----------
    shape : tuple[int, ...]
        Tensor shape. Rank must be at least 1; extents must be non-negative
        ints. Zero extents are allowed and produce an empty tensor.
    fill : Number, optional
        Initial value of every element. Defaults to 0.
    config : Optional[TensorConfig], optional
        Immutable engine configuration. Defaults to `TensorConfig()`.
    dtype : np.dtype, optional
        Element dtype. Defaults to ``np.float32``.
    diagnostics : Optional[IDiagnostics], optional
        Sink for engine events. Defaults to the package logger adapter.

    Raises
    ------
    InvalidShapeError
        If `shape` has rank zero or an invalid extent.
    TypeError
        If `config` is not a `TensorConfig`.
    """

    def __init__(
        self,
        shape: Any,
        fill: Number = 0,
        config: Optional[TensorConfig] = None,
        *,
        dtype: Any = np.float32,
        diagnostics: Optional[IDiagnostics] = None,
    ) -> None:
        if config is None:
            config = TensorConfig()
        elif not isinstance(config, TensorConfig):
            raise TypeError(f"config must be a TensorConfig, got {type(config)!r}")

        self._shape: tuple[int, ...] = normalize_shape(shape)
        self._stride: tuple[int, ...] = compute_strides(self._shape)
        self._size: int = compute_size(self._shape)
        self._config = config
        self._dtype = np.dtype(dtype)
        self._diagnostics: IDiagnostics = (
            diagnostics if diagnostics is not None else default_diagnostics()
        )
        self._data: Optional[np.ndarray] = np.full(self._size, fill, dtype=self._dtype)
        self._generation = 0
        self._released = False

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        return self._shape

    @property
    def stride(self) -> tuple[int, ...]:
        return self._stride

    @property
    def size(self) -> int:
        return self._size

    @property
    def ndim(self) -> int:
        return len(self._shape)

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def config(self) -> TensorConfig:
        return self._config

    @property
    def diagnostics(self) -> IDiagnostics:
        return self._diagnostics

    @property
    def generation(self) -> int:
        """
        Layout generation. Changes whenever outstanding views become invalid.
        """
        return self._generation

    @property
    def released(self) -> bool:
        return self._released

    @property
    def data(self) -> np.ndarray:
        """
        Return the underlying flat buffer (not a copy).

        Notes
        -----
        The same array object is kept for the tensor's whole life, including
        across `flatten`.
        """
        return self._buffer()

    def numel(self) -> int:
        """
        Return the total number of elements in the tensor.
        """
        return self._size

    # ------------------------------------------------------------------
    # Internal hooks used by the mixins, views and kernels
    # ------------------------------------------------------------------
    def _buffer(self) -> np.ndarray:
        if self._released:
            raise self._fail(StaleViewError("Tensor storage has been released."))
        return self._data

    def _fail(self, err: TensorError) -> TensorError:
        """
        Report a rejected operation and hand back the error to raise.
        """
        self._diagnostics.log(Level.WARN, "%s: %s", type(err).__name__, err)
        return err

    def _invalidate_views(self, reason: str) -> None:
        self._generation += 1
        self._diagnostics.log(
            Level.DEBUG,
            "%s: views invalidated (generation %d)",
            reason,
            self._generation,
        )

    def _spawn(
        self, shape: Any, fill: Number = 0, *, dtype: Any = None
    ) -> "Tensor":
        """
        Create a new tensor sharing this tensor's config and diagnostics.
        """
        return self.__class__(
            shape,
            fill,
            self._config,
            dtype=self._dtype if dtype is None else dtype,
            diagnostics=self._diagnostics,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def release(self) -> None:
        """
        Drop the buffer and invalidate every outstanding view.

        After release, any element access, arithmetic or view use raises
        `StaleViewError`. Releasing twice is a no-op.
        """
        if self._released:
            return
        self._data = None
        self._released = True
        self._invalidate_views("release")

    # ------------------------------------------------------------------
    # Matrix multiplication
    # ------------------------------------------------------------------
    def matmul(self, other: "Tensor") -> "Tensor":
        """
        Matrix product of two rank-2 tensors: ``out = self @ other``.

        The kernel (direct or Strassen) is chosen per
        `ntensor.infrastructure.matmul.select_kernel`.

        Raises
        ------
        TypeError
            If `other` is a scalar; use `scalar_multiply_in_place` instead.
        UnsupportedRankError
            If either operand is not rank 2.
        ShapeMismatchError
            If ``self.shape[1] != other.shape[0]``.
        """
        if isinstance(other, numbers.Number):
            raise TypeError(
                "matmul expects a Tensor; use scalar_multiply_in_place() to scale by a scalar"
            )
        from ..matmul import matmul as _matmul

        return _matmul(self, other)

    def __matmul__(self, other: object) -> "Tensor":
        if not isinstance(other, Tensor):
            return NotImplemented
        return self.matmul(other)

    def __repr__(self) -> str:
        if self._released:
            return f"Tensor(shape={self._shape}, dtype={self._dtype}, released)"
        return f"Tensor(shape={self._shape}, dtype={self._dtype})"

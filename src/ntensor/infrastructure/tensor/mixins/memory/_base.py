"""
Tensor memory / construction mixin.

This module defines `TensorMixinMemory`, a focused mixin that provides
factory constructors (zeros/full/from_numpy) and memory-related utilities
(fill, host copies, flat textual dumps) for the concrete `Tensor`.

Design intent
-------------
- Keep object creation and memory movement centralized in the tensor
  implementation, while still presenting a framework-style API
  (`Tensor.zeros`, `Tensor.full`, `Tensor.from_numpy`).
- Host interop always copies: `to_numpy` never exposes the internal buffer,
  and `copy_from_numpy` writes into the existing buffer.
"""

from __future__ import annotations

from abc import ABC
from typing import Any, Optional, Type, Union

import numpy as np

from .....domain._errors import ShapeMismatchError
from .....domain._tensor import ITensor

Number = Union[int, float]


def format_values(values: np.ndarray, precision: Optional[int] = None) -> str:
    """
    Render a 1-D array as space-separated numbers.

    Floating values use the shortest representation that round-trips in the
    array's own dtype, or a fixed number of digits when `precision` is given.
    """
    if np.issubdtype(values.dtype, np.floating):
        return " ".join(
            np.format_float_positional(v, precision=precision, trim="-")
            for v in values
        )
    return " ".join(str(v) for v in values.tolist())


class TensorMixinMemory(ABC):
    """
    Mixin that implements tensor construction and memory-management helpers.

    This mixin is intended to be inherited by the concrete `Tensor` class. It
    provides:

    - Factory constructors: `zeros`, `full`, `from_numpy`
    - Memory utilities: `fill`, `to_numpy`, `copy_from_numpy`
    - Debug output: `format_flat`, `print_flat`
    """

    @classmethod
    def zeros(cls: Type[ITensor], shape: Any, config: Any = None, **kwargs: Any) -> ITensor:
        """
        Create a tensor filled with zeros.

        Parameters
        ----------
        shape : tuple[int, ...]
            Shape of the output tensor.
        config : Optional[TensorConfig]
            Engine configuration. Defaults to `TensorConfig()`.
        **kwargs
            Forwarded to the constructor (``dtype``, ``diagnostics``).
        """
        return cls(shape, 0, config, **kwargs)

    @classmethod
    def full(
        cls: Type[ITensor], shape: Any, value: Number, config: Any = None, **kwargs: Any
    ) -> ITensor:
        """
        Create a tensor with every element set to `value`.
        """
        return cls(shape, value, config, **kwargs)

    @classmethod
    def from_numpy(cls: Type[ITensor], arr: Any, config: Any = None, **kwargs: Any) -> ITensor:
        """
        Create a tensor holding a copy of an array-like object.

        Parameters
        ----------
        arr : array-like
            Source data. Its shape becomes the tensor shape.
        config : Optional[TensorConfig]
            Engine configuration. Defaults to `TensorConfig()`.
        **kwargs
            Forwarded to the constructor. If ``dtype`` is not given, the
            array's dtype is kept for floating inputs and ``float32`` is used
            otherwise.
        """
        src = np.asarray(arr)
        if "dtype" not in kwargs:
            kwargs["dtype"] = (
                src.dtype if np.issubdtype(src.dtype, np.floating) else np.float32
            )
        out = cls(src.shape, 0, config, **kwargs)
        out.copy_from_numpy(src)
        return out

    def fill(self: ITensor, value: Number) -> None:
        """
        Set every element to `value`, in place.
        """
        self._buffer().fill(value)

    def to_numpy(self: ITensor) -> np.ndarray:
        """
        Return a shaped copy of the tensor's contents.
        """
        return self._buffer().reshape(self.shape).copy()

    def copy_from_numpy(self: ITensor, arr: Any) -> None:
        """
        Copy an array-like object into this tensor's existing buffer.

        Raises
        ------
        ShapeMismatchError
            If ``arr.shape`` differs from this tensor's shape.
        """
        src = np.asarray(arr)
        if tuple(src.shape) != self.shape:
            raise self._fail(ShapeMismatchError("copy_from_numpy", self.shape, src.shape))
        np.copyto(self._buffer(), src.reshape(-1), casting="unsafe")

    def format_flat(self: ITensor, precision: Optional[int] = None) -> str:
        """
        Return all elements in linear order as a space-separated string.

        Parameters
        ----------
        precision : Optional[int]
            Digits after the decimal point for floating tensors. ``None``
            prints the shortest round-tripping representation.
        """
        return format_values(self._buffer(), precision)

    def print_flat(self: ITensor, file: Any = None, precision: Optional[int] = None) -> None:
        """
        Print `format_flat()` to `file` (``sys.stdout`` by default).
        """
        print(self.format_flat(precision), file=file)

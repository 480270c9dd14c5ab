"""
Matrix-multiplication kernel registry and selection policy.

This module defines the concrete `MatmulKernel` registry used by the engine
to resolve kernels by name, together with `select_kernel`, the policy that
decides which kernel handles a given (sub)product.

Design
------
- Kernels are registered by name via a decorator-based registry.
- Each kernel is a callable ``kernel(a, b, like, depth) -> Tensor`` where
  `a` and `b` are matrix operands (rank-2 tensors or views), `like` is the
  tensor whose configuration, dtype and diagnostics the result inherits, and
  `depth` is the current recursion depth (0 for the top-level call).
- `MatmulKernel.dispatch` applies the selection policy and runs the chosen
  kernel. Recursive kernels call back into `dispatch`, so the policy is
  re-evaluated at every level.

Usage example
-------------
Registering a kernel:

    @MatmulKernel.register_kernel("direct")
    def direct(a, b, like, depth):
        ...

Running a product:

    out = MatmulKernel.dispatch(a, b, like=a)
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, ClassVar, Dict, TypeVar

from ...domain._config import STRASSEN_BASE_EXTENT, TensorConfig
from ...domain._diagnostics import Level

T = TypeVar("T", bound=Callable[..., Any])


class KernelChoice(str, Enum):
    """
    Names of the registered matrix-multiplication kernels.
    """

    DIRECT = "direct"
    STRASSEN = "strassen"


def select_kernel(m: int, k: int, n: int, config: TensorConfig) -> KernelChoice:
    """
    Choose the kernel for an ``(m x k) @ (k x n)`` product.

    Rules, in precedence order:

    1. Base case: if any of `m`, `k`, `n` is at most `STRASSEN_BASE_EXTENT`,
       use the direct kernel regardless of the threshold.
    2. Threshold: if the left operand's element count ``m * k`` is at most
       ``config.strassen_threshold``, use the direct kernel.
    3. Otherwise, use Strassen.

    Parameters
    ----------
    m, k, n : int
        Product extents.
    config : TensorConfig
        Engine configuration providing the threshold.

    Returns
    -------
    KernelChoice
        The selected kernel.
    """
    if min(m, k, n) <= STRASSEN_BASE_EXTENT:
        return KernelChoice.DIRECT
    if m * k <= config.strassen_threshold:
        return KernelChoice.DIRECT
    return KernelChoice.STRASSEN


class MatmulKernel:
    """
    Registry-backed matrix-multiplication kernel dispatcher.

    Usage
    -----
    Register:
        @MatmulKernel.register_kernel("strassen")
        def strassen(a, b, like, depth): ...

    Resolve:
        kernel = MatmulKernel("strassen")
        out = kernel(a, b, like=a)

    Notes
    -----
    Kernels are stored by string name in a class-level registry.
    """

    KERNELS: ClassVar[Dict[str, Callable[..., Any]]] = {}

    def __init__(self, kernel_name: str) -> None:
        try:
            self._kernel: Callable[..., Any] = self.KERNELS[kernel_name]
        except KeyError:
            raise ValueError(
                f"Unknown matmul kernel {kernel_name!r}. "
                f"Registered kernels: {sorted(self.KERNELS)}"
            ) from None
        self._name = kernel_name

    @property
    def name(self) -> str:
        return self._name

    def __call__(self, a: Any, b: Any, *, like: Any, depth: int = 0) -> Any:
        return self._kernel(a, b, like, depth)

    @classmethod
    def register_kernel(cls, name: str) -> Callable[[T], T]:
        """
        Decorator registering a kernel under `name`.

        Raises
        ------
        ValueError
            If a kernel is already registered under `name`.
        """

        def decorator(func: T) -> T:
            if name in cls.KERNELS:
                raise ValueError(f"Matmul kernel {name!r} is already registered")
            cls.KERNELS[name] = func
            return func

        return decorator

    @classmethod
    def dispatch(cls, a: Any, b: Any, *, like: Any, depth: int = 0) -> Any:
        """
        Select a kernel for ``a @ b`` and run it.

        Parameters
        ----------
        a, b : IMatrixOperand
            Operands with compatible inner extents. Not re-validated here.
        like : Tensor
            Provides the configuration, dtype and diagnostics of the result.
        depth : int
            Recursion depth of this call.
        """
        m, k = a.shape
        n = b.shape[1]
        choice = select_kernel(m, k, n, like.config)
        like.diagnostics.log(
            Level.DEBUG,
            "matmul (%d x %d) @ (%d x %d) -> %s kernel (depth %d)",
            m,
            k,
            k,
            n,
            choice.value,
            depth,
        )
        return cls(choice.value)(a, b, like=like, depth=depth)

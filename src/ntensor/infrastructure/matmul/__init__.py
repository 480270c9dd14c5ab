"""
Matrix-multiplication engine.

This package aggregates the kernel registry, the direct and Strassen kernels,
and the public `matmul` entry point.

Design notes
------------
- Kernel modules are imported for their *side effects*: registering
  themselves with `MatmulKernel`.
- `select_kernel` is exported so callers can inspect the policy without
  running a product.

Public API
----------
- ``matmul``
- ``select_kernel``
- ``KernelChoice``
- ``MatmulKernel``
- ``split_quadrants`` / ``stack_quadrants``
"""

from ._base import KernelChoice, MatmulKernel, select_kernel
from ._direct import direct_matmul
from ._strassen import split_quadrants, stack_quadrants, strassen_matmul
from ._engine import matmul

__all__ = [
    matmul.__name__,
    select_kernel.__name__,
    KernelChoice.__name__,
    MatmulKernel.__name__,
    direct_matmul.__name__,
    strassen_matmul.__name__,
    split_quadrants.__name__,
    stack_quadrants.__name__,
]

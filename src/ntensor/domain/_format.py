"""
Message formatting helpers shared by the domain modules.
"""

from __future__ import annotations

from typing import Sequence


def format_shape(shape: Sequence[int]) -> str:
    """
    Render a shape as ``(a, b, c)`` for messages.
    """
    return "(" + ", ".join(str(int(d)) for d in shape) + ")"

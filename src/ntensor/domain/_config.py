"""
Engine configuration.

`TensorConfig` is the immutable configuration record attached to every
tensor at construction time. Derived tensors (results of arithmetic and
matrix multiplication) inherit the configuration of their left operand.

The Strassen crossover has exactly one authoritative default,
`DEFAULT_STRASSEN_THRESHOLD`; no call site defines its own.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping

DEFAULT_STRASSEN_THRESHOLD: int = 48
"""Left-operand element count at or below which matmul uses the direct kernel."""

STRASSEN_BASE_EXTENT: int = 4
"""Row/inner/column extent at or below which matmul always uses the direct kernel."""

ODD_DIMENSION_POLICIES = ("pad", "reject")


@dataclass(frozen=True)
class TensorConfig:
    """
    Immutable tensor-engine configuration.

    Attributes
    ----------
    strassen_threshold : int
        Element-count crossover. When the left operand of a (sub)product has
        at most this many elements, the direct kernel is used instead of
        Strassen recursion. Must be non-negative.
    odd_dimension_policy : str
        What the Strassen kernel does when an extent is odd at a split:
        ``"pad"`` zero-pads to the next even extent and crops the result,
        ``"reject"`` raises `UnsupportedDimensionError`.
    max_workers : int
        If greater than zero, the seven top-level Strassen products are
        computed on a thread pool of this size. Zero means fully sequential.
    """

    strassen_threshold: int = DEFAULT_STRASSEN_THRESHOLD
    odd_dimension_policy: str = "pad"
    max_workers: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.strassen_threshold, bool) or not isinstance(
            self.strassen_threshold, int
        ):
            raise TypeError(
                f"strassen_threshold must be an int, got {self.strassen_threshold!r}"
            )
        if self.strassen_threshold < 0:
            raise ValueError(
                f"strassen_threshold must be >= 0, got {self.strassen_threshold}"
            )
        if self.odd_dimension_policy not in ODD_DIMENSION_POLICIES:
            raise ValueError(
                f"odd_dimension_policy must be one of {ODD_DIMENSION_POLICIES}, "
                f"got {self.odd_dimension_policy!r}"
            )
        if isinstance(self.max_workers, bool) or not isinstance(self.max_workers, int):
            raise TypeError(f"max_workers must be an int, got {self.max_workers!r}")
        if self.max_workers < 0:
            raise ValueError(f"max_workers must be >= 0, got {self.max_workers}")

    def to_dict(self) -> dict[str, Any]:
        """
        Return a JSON-friendly mapping of this configuration.
        """
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "TensorConfig":
        """
        Build a configuration from a mapping produced by `to_dict`.

        Missing keys fall back to their defaults.

        Raises
        ------
        ValueError
            If the mapping contains keys that are not configuration fields.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(payload) - known)
        if unknown:
            raise ValueError(f"Unknown TensorConfig field(s): {unknown}")
        return cls(**dict(payload))

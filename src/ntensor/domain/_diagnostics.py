"""
Diagnostics collaborator interface.

The tensor engine does not own any process-wide logging state. Callers hand
a diagnostics object to each tensor (or accept the package default), and the
engine reports through it. The interface has two channels:

- `log(level, message, *args)` for non-fatal, leveled events, and
- `fatal(message, *args)` which reports and then applies the caller's
  termination policy.

The core never calls `fatal` itself; only an explicit outer wrapper does.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol, runtime_checkable


class Level(IntEnum):
    """
    Diagnostic severity levels, ordered from least to most severe.
    """

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4


@runtime_checkable
class IDiagnostics(Protocol):
    """
    Protocol for diagnostics sinks consumed by the tensor engine.

    Messages use printf-style formatting: ``message % args`` is evaluated by
    the sink only if the event is actually emitted.
    """

    def log(self, level: Level, message: str, *args: object) -> None:
        """
        Report a non-fatal event at `level`.
        """
        ...

    def fatal(self, message: str, *args: object) -> None:
        """
        Report an unrecoverable event and apply the termination policy.

        Implementations are expected not to return normally.
        """
        ...

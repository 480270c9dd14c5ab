"""
Standard-library `logging` adapter for the diagnostics interface.

`LoggingDiagnostics` forwards leveled engine events to a `logging.Logger`
(``"ntensor"`` by default) and implements `fatal` by logging at CRITICAL and
then invoking an injected terminator. The terminator defaults to `sys.exit`,
but the choice belongs to whoever constructs the diagnostics object.

`fatal_on_error` is the single place where a recoverable `TensorError` is
escalated to a fatal event. Library code never uses it; it exists for outer
layers (scripts, CLIs) that prefer log-and-exit semantics.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from ...domain._diagnostics import IDiagnostics, Level
from ...domain._errors import TensorError

LOGGER_NAME = "ntensor"

_LEVEL_MAP = {
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARN: logging.WARNING,
    Level.ERROR: logging.ERROR,
    Level.FATAL: logging.CRITICAL,
}


class LoggingDiagnostics(IDiagnostics):
    """
    Diagnostics sink backed by the standard `logging` module.

    Parameters
    ----------
    logger : Optional[logging.Logger]
        Logger to emit into. Defaults to ``logging.getLogger("ntensor")``.
    terminate : Optional[Callable[[int], None]]
        Called with exit code 1 after a fatal message is logged. Defaults to
        `sys.exit`.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        terminate: Optional[Callable[[int], None]] = None,
    ) -> None:
        self._logger = logger if logger is not None else logging.getLogger(LOGGER_NAME)
        self._terminate = terminate if terminate is not None else sys.exit

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def log(self, level: Level, message: str, *args: object) -> None:
        self._logger.log(_LEVEL_MAP[Level(level)], message, *args)

    def fatal(self, message: str, *args: object) -> None:
        self._logger.critical(message, *args)
        self._terminate(1)

    def __repr__(self) -> str:
        return f"LoggingDiagnostics(logger={self._logger.name!r})"


_default: Optional[LoggingDiagnostics] = None


def default_diagnostics() -> LoggingDiagnostics:
    """
    Return the shared package-default diagnostics sink.

    The default only wraps the ``"ntensor"`` logger; it carries no mutable
    verbosity of its own. Configure verbosity through `logging` as usual.
    """
    global _default
    if _default is None:
        _default = LoggingDiagnostics()
    return _default


@contextmanager
def fatal_on_error(diagnostics: Optional[IDiagnostics] = None) -> Iterator[None]:
    """
    Escalate any `TensorError` raised in the block to ``diagnostics.fatal``.

    Parameters
    ----------
    diagnostics : Optional[IDiagnostics]
        Sink whose `fatal` applies the termination policy. Defaults to
        `default_diagnostics()`.

    Notes
    -----
    If the sink's `fatal` returns instead of terminating, the original error
    is re-raised so it is never silently swallowed.

    Example
    -------
        with fatal_on_error(LoggingDiagnostics(terminate=os._exit)):
            c = a.matmul(b)
    """
    diag = diagnostics if diagnostics is not None else default_diagnostics()
    try:
        yield
    except TensorError as e:
        diag.fatal("%s: %s", type(e).__name__, e)
        raise

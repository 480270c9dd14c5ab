"""
Diagnostics implementations.

Public API
----------
- ``LoggingDiagnostics``
- ``default_diagnostics``
- ``fatal_on_error``
"""

from ._logging_diagnostics import (
    LOGGER_NAME,
    LoggingDiagnostics,
    default_diagnostics,
    fatal_on_error,
)

__all__ = [
    "LOGGER_NAME",
    LoggingDiagnostics.__name__,
    default_diagnostics.__name__,
    fatal_on_error.__name__,
]

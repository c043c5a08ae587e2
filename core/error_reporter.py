"""
Error reporting sink for failures that are absorbed instead of propagated.
"""

import logging
from typing import Protocol

logger = logging.getLogger("mealfinder.errors")


class ErrorReporter(Protocol):
    def report(self, error: Exception) -> None:
        """Record an error. Must return promptly and never raise."""
        ...


class LoggingErrorReporter:
    """Reports errors as warnings on the application log."""

    def __init__(self, log: logging.Logger = logger):
        self._log = log

    def report(self, error: Exception) -> None:
        status_code = getattr(error, "status_code", None)
        self._log.warning(
            "Absorbed %s: %s",
            type(error).__name__,
            error,
            extra={"status_code": status_code},
        )

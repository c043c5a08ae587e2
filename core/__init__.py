"""
Core package - Shared service infrastructure.
Contains the base service and the error reporting sink.
"""

from core.error_reporter import ErrorReporter, LoggingErrorReporter

__all__ = [
    "ErrorReporter",
    "LoggingErrorReporter",
]

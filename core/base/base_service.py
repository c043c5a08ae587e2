"""
Base class for services that orchestrate calls over external collaborators.
"""

from abc import ABC
from typing import Any
import logging


class BaseService(ABC):
    """
    Gives each service a named logger and key=value event logging.

    Fields are rendered sorted by key after the message and are also attached
    to the record as ``fields`` for handlers that want them structured.
    """

    def __init__(self, logger_name: str):
        self.logger = logging.getLogger(logger_name)

    def _log(self, level: int, event: str, fields: dict[str, Any]) -> None:
        if not self.logger.isEnabledFor(level):
            return
        rendered = " ".join(f"{key}={fields[key]}" for key in sorted(fields))
        self.logger.log(
            level, f"{event} {rendered}".rstrip(), extra={"fields": fields}
        )

    def log_info(self, event: str, **fields: Any) -> None:
        self._log(logging.INFO, event, fields)

    def log_warning(self, event: str, **fields: Any) -> None:
        self._log(logging.WARNING, event, fields)

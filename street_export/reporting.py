from __future__ import annotations

import logging
from typing import Protocol

from core.exceptions import StreetListError

logger = logging.getLogger(__name__)


def describe_error(exc: BaseException) -> str:
    """Return the most descriptive text available for an error."""
    if isinstance(exc, StreetListError) and exc.message:
        return exc.message
    text = str(exc).strip()
    if text:
        return text
    return exc.__class__.__name__


class ErrorReporter(Protocol):
    def report(self, message: str) -> None: ...


class LoggingErrorReporter:
    """Logs user-facing errors and keeps the most recent ones for display."""

    def __init__(self, limit: int = 50) -> None:
        self.limit = limit
        self.messages: list[str] = []

    def report(self, message: str) -> None:
        logger.error(message)
        self.messages.append(message)
        del self.messages[: -self.limit]

    def clear(self) -> None:
        self.messages = []

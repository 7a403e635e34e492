"""
Centralized exception hierarchy for domain-specific errors.

This module provides custom exception classes that represent specific
error conditions in the application, so callers can tell document-level
failures (which abort an operation) from per-record and per-area failures
(which are reported and skipped).
"""


class StreetListError(Exception):
    """Base exception for all application-specific errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ParseError(StreetListError):
    """Exception raised when a boundary document is not well-formed markup."""


class RecordError(StreetListError):
    """Exception raised for a single malformed placemark record."""


class MissingNameError(RecordError):
    """Exception raised when a placemark has no usable name."""


class InvalidCoordinatesError(RecordError):
    """Exception raised when a placemark has no usable coordinate ring."""


class NotFoundError(StreetListError):
    """Exception raised when a requested area is not loaded."""


class AlreadyRenderedError(StreetListError):
    """Exception raised when an area overlay is drawn a second time."""


class MalformedResponseError(StreetListError):
    """Exception raised when a query result is not in the expected shape."""


class QueryFailure(StreetListError):
    """Exception raised when the query service call fails."""

"""Errors raised by the ghi client.

Every error carries an ``ErrorKind`` so callers can branch on the failure
category without matching on the exception class:

    GhiError
    +-- ConstructionError  (kind=construction)
    +-- TransportError     (kind=transport)
    +-- ServiceError       (kind=service)
"""

from __future__ import annotations

from enum import Enum

from issue_tracker_interface.client import IssueTrackerError

__all__ = [
    "ConstructionError",
    "ErrorKind",
    "GhiError",
    "HICCUP_MESSAGE",
    "NO_INTERNET_MESSAGE",
    "ServiceError",
    "TransportError",
]

HICCUP_MESSAGE = "the service hiccuped on your request"
NO_INTERNET_MESSAGE = "couldn't find the internet"


class ErrorKind(str, Enum):
    CONSTRUCTION = "construction"
    TRANSPORT = "transport"
    SERVICE = "service"


class GhiError(IssueTrackerError):
    """Base class for every error raised by the ghi client.

    Only the subclasses are raised; the base has no kind of its own.
    """

    kind: ErrorKind | None = None

    @property
    def message(self) -> str:
        return str(self)


class ConstructionError(GhiError):
    """Raised when a client is created without an owner or repository."""

    kind = ErrorKind.CONSTRUCTION


class TransportError(GhiError):
    """Raised when the request could not be built, sent or answered."""

    kind = ErrorKind.TRANSPORT


class ServiceError(GhiError):
    """Raised when the service answers with an ``error`` field.

    Args:
        message: The error messages joined with ``", "``.
        errors:  The individual messages, in response order.
    """

    kind = ErrorKind.SERVICE

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors if errors is not None else [message]

"""Client for the issue service's YAML API."""

from ghi_client_impl.ghi_errors import (
    ConstructionError,
    ErrorKind,
    GhiError,
    ServiceError,
    TransportError,
)
from ghi_client_impl.ghi_impl import GhiClient, get_client
from ghi_client_impl.ghi_issue import GhiIssue

__all__ = [
    "ConstructionError",
    "ErrorKind",
    "GhiClient",
    "GhiError",
    "GhiIssue",
    "ServiceError",
    "TransportError",
    "get_client",
]

"""Response decoding and per-operation projections.

The service answers every call with a YAML document. On success it holds
one top-level key named after the resource (``issues``, ``issue``,
``labels``, ``comment``); on failure an ``error`` key holding one error
object or a list of them, each with its own ``error`` message.

Dependencies:
    uv add pyyaml
"""

from __future__ import annotations

from typing import Any

import yaml

from ghi_client_impl.ghi_errors import ServiceError
from ghi_client_impl.ghi_issue import GhiIssue, get_issue

__all__ = [
    "decode_response",
    "project_comment",
    "project_issue",
    "project_issues",
    "project_labels",
]

_UNEXPECTED_RESPONSE = "unexpected response from the service"


def decode_response(raw: bytes | str) -> dict[str, Any]:
    """Parse a response body and raise if it carries an error.

    Raises:
        ServiceError: If the body holds an ``error`` field, or is not a
            YAML mapping at all.
    """
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ServiceError(_UNEXPECTED_RESPONSE) from exc

    if not isinstance(data, dict):
        raise ServiceError(_UNEXPECTED_RESPONSE)

    if data.get("error"):
        messages = _error_messages(data["error"])
        raise ServiceError(", ".join(messages), messages)
    return data


def _error_messages(error: Any) -> list[str]:
    #a single error object is sent bare, several are sent as a list
    entries = error if isinstance(error, list) else [error]
    return [str(entry.get("error", "")) if isinstance(entry, dict) else str(entry) for entry in entries]


def _field(data: dict[str, Any], key: str, expected: type) -> Any:
    value = data.get(key)
    if not isinstance(value, expected):
        raise ServiceError(f"{_UNEXPECTED_RESPONSE}: missing {key!r}")
    return value


# ---------------------------------------------------------------------------
# Projections
# ---------------------------------------------------------------------------

def project_issues(data: dict[str, Any]) -> list[GhiIssue]:
    return [get_issue(attrs) for attrs in _field(data, "issues", list)]


def project_issue(data: dict[str, Any]) -> GhiIssue:
    return get_issue(_field(data, "issue", dict))


def project_labels(data: dict[str, Any]) -> list[str]:
    return [str(label) for label in _field(data, "labels", list)]


def project_comment(data: dict[str, Any]) -> dict[str, Any]:
    return dict(_field(data, "comment", dict))

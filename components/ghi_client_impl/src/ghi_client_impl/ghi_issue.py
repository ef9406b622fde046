"""ghi Issue implementation."""

from __future__ import annotations

from typing import Any

from issue_tracker_interface.issue import Issue, State

_STATE_MAP: dict[str, State] = {
    "open":   State.OPEN,
    "closed": State.CLOSED,
}

def _normalize_state(raw_state: object) -> State:
    if not raw_state:
        return State.OPEN
    return _STATE_MAP.get(str(raw_state).lower(), State.OPEN)

# ------------------------------------------------------------------
# Issue implementation
# ------------------------------------------------------------------
class GhiIssue(Issue):
    """Concrete Issue backed by one entry of a decoded API response.

    Construct via the module-level ``get_issue()`` factory rather than
    instantiating directly.

    Args:
        raw_data: The issue's field mapping (``number``, ``title``, ``body``,
            ``state``, ``user``, ``votes``, ``created_at``, ``updated_at``).

    """

    def __init__(self, raw_data: dict[str, Any]) -> None:
        """Initialize GhiIssue."""
        self._raw = dict(raw_data)

    @property
    def number(self) -> int:
        """Return number."""
        return int(self._raw.get("number") or 0)

    @property
    def title(self) -> str:
        """Return title."""
        return self._raw.get("title") or ""

    @property
    def body(self) -> str:
        """Return body."""
        return self._raw.get("body") or ""

    @property
    def state(self) -> State:
        """Return the normalized state."""
        return _normalize_state(self._raw.get("state"))

    @property
    def raw_state(self) -> str | None:
        """Return the state exactly as the service reported it."""
        return self._raw.get("state")

    @property
    def user(self) -> str | None:
        return self._raw.get("user") or None

    @property
    def votes(self) -> int:
        return int(self._raw.get("votes") or 0)

    @property
    def created_at(self) -> object:
        return self._raw.get("created_at")

    @property
    def updated_at(self) -> object:
        return self._raw.get("updated_at")

    @property
    def raw(self) -> dict[str, Any]:
        """Return a copy of every field the service sent."""
        return dict(self._raw)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GhiIssue):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self.number)


# ---------------------------------------------------------------------------
# Get issue
# ---------------------------------------------------------------------------

def get_issue(raw_data: dict[str, Any]) -> GhiIssue:
    """Return a GhiIssue from one decoded issue mapping.

    Args:
        raw_data: The ``issue`` mapping, or one entry of ``issues``.

    Returns:
        A GhiIssue instance conforming to the Issue contract.

    """
    return GhiIssue(raw_data)

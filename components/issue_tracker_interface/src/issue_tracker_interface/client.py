"""Core client contract definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from issue_tracker_interface.issue import Issue, State

__all__ = ["IssueTrackerClient", "IssueTrackerError"]


class IssueTrackerError(Exception):
    """Base exception raised by issue tracker clients."""


class IssueTrackerClient(ABC):
    """Tracks issues for a single repository."""

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    @abstractmethod
    def search(self, term: str, state: State | str = State.OPEN) -> list[Issue]:
        """Search issues."""
        """Args:
            term:  Search term, sent as a single path segment
            state: Issue state to search within. Not validated locally

        Returns:
            The matching issues in the order the service returned them

        """
        raise NotImplementedError

    @abstractmethod
    def list_issues(self, state: State | str = State.OPEN) -> list[Issue]:
        """List every issue in the given state."""
        raise NotImplementedError

    @abstractmethod
    def show(self, number: int) -> Issue:
        """Get a single issue by number."""
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    @abstractmethod
    def open(self, title: str, body: str) -> Issue:
        """Open a new issue and return it."""
        raise NotImplementedError

    @abstractmethod
    def edit(self, number: int, title: str, body: str) -> Issue:
        """Replace the title and body of an issue."""
        raise NotImplementedError

    @abstractmethod
    def close(self, number: int) -> Issue:
        """Close an issue."""
        raise NotImplementedError

    @abstractmethod
    def reopen(self, number: int) -> Issue:
        """Reopen a closed issue."""
        raise NotImplementedError

    @abstractmethod
    def add_label(self, label: str, number: int) -> list[str]:
        """Add a label to an issue."""
        """Returns:
            Every label now attached to the issue

        """
        raise NotImplementedError

    @abstractmethod
    def remove_label(self, label: str, number: int) -> list[str]:
        """Remove a label from an issue, returning the remaining labels."""
        raise NotImplementedError

    @abstractmethod
    def comment(self, number: int, text: str) -> dict[str, Any]:
        """Comment on an issue."""
        raise NotImplementedError

"""Contracts shared by issue tracker client implementations."""

from issue_tracker_interface.client import IssueTrackerClient, IssueTrackerError
from issue_tracker_interface.credentials import CredentialProvider
from issue_tracker_interface.issue import Issue, State

__all__ = ["CredentialProvider", "Issue", "IssueTrackerClient", "IssueTrackerError", "State"]

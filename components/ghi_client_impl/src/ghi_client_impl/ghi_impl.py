"""
ghi client
----------
Binds the issue service's YAML API (``/api/v2/yaml/issues``) to the
IssueTrackerClient contract.

Every operation runs the same pipeline:

    PathBuilder.build -> RequestMode.resolve -> prepare_call
        -> Transport.execute -> decode_response -> project_*

Configuration (read by ``get_client``):
        GHI_OWNER       stephencelis
        GHI_REPOSITORY  ghi
        GITHUB_USER     login used for authentication
        GITHUB_TOKEN    API token for that login

Dependencies:
    uv add requests pyyaml
"""
#to avoid having to consider forward declarations, the below line must be first line in the file
from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from getpass import getpass
from typing import Any

from ghi_client_impl.ghi_credentials import EnvCredentialProvider, StaticCredentialProvider, git_config
from ghi_client_impl.ghi_errors import ConstructionError
from ghi_client_impl.ghi_issue import GhiIssue
from ghi_client_impl.ghi_request import PathBuilder, RequestMode, prepare_call
from ghi_client_impl.ghi_response import (
    decode_response,
    project_comment,
    project_issue,
    project_issues,
    project_labels,
)
from ghi_client_impl.ghi_transport import Transport
from issue_tracker_interface.client import IssueTrackerClient
from issue_tracker_interface.credentials import CredentialProvider
from issue_tracker_interface.issue import State

__all__ = ["GhiClient", "get_client"]

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Client implementation
# ---------------------------------------------------------------------------

class GhiClient(IssueTrackerClient):
    """
    Args:
        owner:       Account that owns the repository (e.g. 'stephencelis')
        repository:  Repository name (e.g. 'ghi')
        secure:      Talk HTTPS on port 443; reads are then sent as POST
        credentials: Source of the login and token, asked on every request
        transport:   Sends the prepared request; defaults to one for ``secure``
    """

    def __init__(
        self,
        owner: str,
        repository: str,
        secure: bool = False,
        *,
        credentials: CredentialProvider | None = None,
        transport: Transport | None = None,
    ) -> None:
        if not owner or not repository:
            raise ConstructionError("an owner and a repository are required")
        self._owner = owner
        self._repository = repository
        self._secure = secure
        self._paths = PathBuilder(owner, repository)
        self._credentials = credentials if credentials is not None else EnvCredentialProvider()
        self._transport = transport if transport is not None else Transport(secure)

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def repository(self) -> str:
        return self._repository

    @property
    def secure(self) -> bool:
        return self._secure

    # ------------------------------------------------------------------
    # Internal HTTP helpers
    # ------------------------------------------------------------------

    def _url_path(self, action: object, *args: object) -> str:
        return self._paths.build(action, *args)

    def _get(self, action: object, *args: object) -> dict[str, Any]:
        return self._request("GET", action, *args)

    def _post(self, action: object, *args: object, params: Mapping[str, object] | None = None) -> dict[str, Any]:
        return self._request("POST", action, *args, params=params)

    def _request(
        self,
        verb: str,
        action: object,
        *args: object,
        params: Mapping[str, object] | None = None,
    ) -> dict[str, Any]:
        mode = RequestMode.resolve(verb, self._secure)
        path = self._url_path(action, *args)
        call = prepare_call(mode, path, self._credentials, params)
        #the target of an insecure read carries the token, so only the path is logged
        logger.debug("%s %s (%s)", call.method, path, mode.value)
        raw = self._transport.execute(call.method, call.target, call.body)
        return decode_response(raw)

    # ------------------------------------------------------------------
    # IssueTrackerClient contract
    # ------------------------------------------------------------------

    def search(self, term: str, state: State | str = State.OPEN) -> list[GhiIssue]:
        """Search issues in ``state`` for ``term``."""
        return project_issues(self._get("search", state, term))

    def list_issues(self, state: State | str = State.OPEN) -> list[GhiIssue]:
        """List issues in ``state``."""
        return project_issues(self._get("list", state))

    def show(self, number: int) -> GhiIssue:
        return project_issue(self._get("show", number))

    def open(self, title: str, body: str) -> GhiIssue:
        return project_issue(self._post("open", params={"title": title, "body": body}))

    def edit(self, number: int, title: str, body: str) -> GhiIssue:
        res = self._post("edit", number, params={"title": title, "body": body})
        return project_issue(res)

    def close(self, number: int) -> GhiIssue:
        return project_issue(self._post("close", number))

    def reopen(self, number: int) -> GhiIssue:
        return project_issue(self._post("reopen", number))

    def add_label(self, label: str, number: int) -> list[str]:
        """
        Notes on usage:
            The label is sent as a raw path segment, so it must not contain "/".
        """
        return project_labels(self._post("label/add", label, number))

    def remove_label(self, label: str, number: int) -> list[str]:
        return project_labels(self._post("label/remove", label, number))

    def comment(self, number: int, text: str) -> dict[str, Any]:
        return project_comment(self._post("comment", number, params={"comment": text}))


# ---------------------------------------------------------------------------
# Get client
# ---------------------------------------------------------------------------

def get_client(
    owner: str | None = None,
    repository: str | None = None,
    *,
    secure: bool = False,
    interactive: bool = False,
) -> GhiClient:
    """Return a configured GhiClient.

    Owner and repository fall back to environment variables. Credentials are
    read from the environment (or git config) on every request. If
    "interactive = True" and any value is missing, the user will be prompted
    and the answers are used for the lifetime of the client.

    Environment variables:
        GHI_OWNER:       Account that owns the repository.
        GHI_REPOSITORY:  Repository name.
        GITHUB_USER:     Login (falls back to ``git config github.user``).
        GITHUB_TOKEN:    API token (falls back to ``git config github.token``).
    """
    owner = owner or os.environ.get("GHI_OWNER", "")
    repository = repository or os.environ.get("GHI_REPOSITORY", "")
    login = os.environ.get("GITHUB_USER", "") or git_config(EnvCredentialProvider.LOGIN_GIT_KEY)
    token = os.environ.get("GITHUB_TOKEN", "") or git_config(EnvCredentialProvider.TOKEN_GIT_KEY)

    if interactive:
        if not owner:
            owner = input("Repository owner: ").strip()
        if not repository:
            repository = input("Repository name: ").strip()
        if not login or not token:
            if not login:
                login = input("GitHub login: ").strip()
            if not token:
                token = getpass("GitHub API token: ")
            return GhiClient(
                owner, repository, secure, credentials=StaticCredentialProvider(login, token)
            )
    else:
        #collects the missing fields and raises an error alerting to the missing values
        missing = [name for name, val in [
            ("GHI_OWNER", owner),
            ("GHI_REPOSITORY", repository),
            ("GITHUB_USER", login),
            ("GITHUB_TOKEN", token),
        ] if not val]
        if missing:
            raise EnvironmentError(
                f"Missing required settings: {', '.join(missing)}. "
                "Set them or call get_client(interactive=True)."
            )

    return GhiClient(owner, repository, secure, credentials=EnvCredentialProvider())

"""Credential providers for the ghi client.

The login and token are looked up on every request:

1. ``EnvCredentialProvider`` - Default
        GITHUB_USER   octocat
        GITHUB_TOKEN  <token from the account settings page>
   falling back to ``git config --get github.user`` / ``github.token``.
2. ``StaticCredentialProvider``
        Fixed values, used when ``get_client(interactive=True)`` prompted for them.
"""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass, field

from issue_tracker_interface.credentials import CredentialProvider

__all__ = ["EnvCredentialProvider", "StaticCredentialProvider", "git_config"]


def git_config(key: str) -> str:
    """Return ``git config --get key``, or an empty string when unset or git is missing."""
    try:
        result = subprocess.run(
            ["git", "config", "--get", key],
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        return ""
    if result.returncode != 0:
        return ""
    return result.stdout.strip()


@dataclass(frozen=True)
class StaticCredentialProvider(CredentialProvider):
    """Credentials fixed at construction."""

    login: str
    token: str = field(repr=False)

    def get_login(self) -> str:
        return self.login

    def get_token(self) -> str:
        return self.token


class EnvCredentialProvider(CredentialProvider):
    """Read credentials from the environment, then from git config.

    Args:
        login_var: Environment variable holding the login.
        token_var: Environment variable holding the token.
    """

    LOGIN_GIT_KEY = "github.user"
    TOKEN_GIT_KEY = "github.token"

    def __init__(self, login_var: str = "GITHUB_USER", token_var: str = "GITHUB_TOKEN") -> None:
        self._login_var = login_var
        self._token_var = token_var

    def get_login(self) -> str:
        return self._lookup(self._login_var, self.LOGIN_GIT_KEY)

    def get_token(self) -> str:
        return self._lookup(self._token_var, self.TOKEN_GIT_KEY)

    @staticmethod
    def _lookup(env_var: str, git_key: str) -> str:
        value = os.environ.get(env_var, "") or git_config(git_key)
        if not value:
            raise EnvironmentError(
                f"Missing credential: set {env_var} or run `git config --global {git_key} <value>`."
            )
        return value

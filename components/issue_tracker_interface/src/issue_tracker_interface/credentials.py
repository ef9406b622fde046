"""Credential provider contract."""

from abc import ABC, abstractmethod

__all__ = ["CredentialProvider"]


class CredentialProvider(ABC):
    """Supplies the login and token used to authenticate each request.

    Clients ask for both values on every request, so an implementation may
    rotate credentials between calls.
    """

    @abstractmethod
    def get_login(self) -> str:
        """Return the account login."""
        raise NotImplementedError

    @abstractmethod
    def get_token(self) -> str:
        """Return the API token for the login."""
        raise NotImplementedError

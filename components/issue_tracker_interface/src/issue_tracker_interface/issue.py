"""Issue contract - Core issue representation."""

from abc import ABC, abstractmethod
from enum import Enum

__all__ = ["State", "Issue"]


#the service only knows two states; anything else is forwarded verbatim as a path segment
class State(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


class Issue(ABC):
    """Abstract base class representing an issue."""

    @property
    @abstractmethod
    def number(self) -> int:
        """Return the issue number within its repository."""
        raise NotImplementedError

    @property
    @abstractmethod
    def title(self) -> str:
        """Return the title of the issue."""
        raise NotImplementedError

    @property
    @abstractmethod
    def body(self) -> str:
        """Return the body of the issue."""
        raise NotImplementedError

    @property
    @abstractmethod
    def state(self) -> State:
        """Return the state of the issue."""
        raise NotImplementedError

    @property
    @abstractmethod
    def user(self) -> str | None:
        """Return the login of the user who opened the issue."""
        raise NotImplementedError

    @property
    @abstractmethod
    def votes(self) -> int:
        """Return the number of votes."""
        raise NotImplementedError

    @property
    @abstractmethod
    def created_at(self) -> object:
        """Return the creation timestamp as decoded from the response."""
        raise NotImplementedError

    @property
    @abstractmethod
    def updated_at(self) -> object:
        """Return the last update timestamp as decoded from the response."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<Issue number={self.number!r} title={self.title!r} state={self.state.value}>"

"""Request building: path templating, parameter encoding and auth placement.

Nothing in this module performs I/O. ``prepare_call`` turns an operation
into the exact method, target and body that the transport puts on the wire.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from functools import cached_property
from urllib.parse import urlencode

from issue_tracker_interface.credentials import CredentialProvider

__all__ = [
    "API_PATH",
    "PathBuilder",
    "PreparedCall",
    "RequestMode",
    "encode_params",
    "prepare_call",
]

API_PATH = "/api/v2/yaml/issues/:action/:owner/:repository"


def _segment(value: object) -> str:
    #enum members render as their value, so State.OPEN becomes "open"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


class PathBuilder:
    """Render resource paths for one owner/repository pair.

    Positional arguments are appended verbatim. Values containing ``/`` or
    other reserved characters are not escaped and will change the path.
    """

    def __init__(self, owner: str, repository: str) -> None:
        self._owner = owner
        self._repository = repository

    @cached_property
    def _template(self) -> str:
        #owner and repository never change, so this substitution is done once per instance
        return API_PATH.replace(":owner", self._owner, 1).replace(":repository", self._repository, 1)

    def build(self, action: object, *args: object) -> str:
        path = self._template.replace(":action", _segment(action), 1)
        if args:
            path += "/" + "/".join(_segment(arg) for arg in args)
        return path


def _form_value(key: str, value: object) -> str:
    if isinstance(value, (str, int, Enum)) and not isinstance(value, bool):
        return _segment(value)
    raise TypeError(f"parameter {key!r} must be a string, got {type(value).__name__}")


def encode_params(params: Mapping[str, object]) -> str:
    """Form-encode ``params`` in insertion order, escaping keys and values.

    Raises:
        TypeError: If a value is not a string, an int or an Enum member.
    """
    return urlencode([(str(key), _form_value(key, value)) for key, value in params.items()])


class RequestMode(str, Enum):
    """How a call is put on the wire."""

    INSECURE_READ = "insecure_read"
    SECURE_READ_AS_POST = "secure_read_as_post"
    WRITE = "write"

    @classmethod
    def resolve(cls, verb: str, secure: bool) -> RequestMode:
        """Pick the mode from the operation's declared verb and the client's secure flag.

        The service only accepts authenticated reads over HTTPS as POST, so a
        secure read is sent as a POST even though the operation is a GET.
        """
        if verb.upper() == "GET":
            return cls.SECURE_READ_AS_POST if secure else cls.INSECURE_READ
        return cls.WRITE


@dataclass(frozen=True)
class PreparedCall:
    method: str
    target: str
    body: str | None = None


def prepare_call(
    mode: RequestMode,
    path: str,
    credentials: CredentialProvider,
    params: Mapping[str, object] | None = None,
) -> PreparedCall:
    """Place the login and token for ``mode`` and return the request to send.

    Reads carry the credentials as a literal ``login=...&token=...`` string,
    in the query for insecure reads and in the body for secure ones. Writes
    merge them into ``params`` (overwriting any caller value of the same
    name) and encode the whole mapping.
    """
    login = credentials.get_login()
    token = credentials.get_token()

    if mode is RequestMode.INSECURE_READ:
        return PreparedCall("GET", f"{path}?login={login}&token={token}")
    if mode is RequestMode.SECURE_READ_AS_POST:
        return PreparedCall("POST", path, f"login={login}&token={token}")

    merged = dict(params or {})
    merged["login"] = login
    merged["token"] = token
    return PreparedCall("POST", path, encode_params(merged))

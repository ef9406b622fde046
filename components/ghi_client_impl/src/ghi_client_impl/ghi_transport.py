"""HTTP transport for the ghi client.

Dependencies:
    uv add requests
"""

from __future__ import annotations

import logging

import requests

from ghi_client_impl.ghi_errors import HICCUP_MESSAGE, NO_INTERNET_MESSAGE, TransportError

__all__ = ["API_HOST", "Transport"]

logger = logging.getLogger(__name__)

API_HOST = "github.com"

#raised while the request is being built, before anything is sent
_MALFORMED_REQUEST_ERRORS = (
    requests.exceptions.InvalidURL,
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.URLRequired,
    ValueError,
)


class Transport:
    """Send one request per call to the fixed API host.

    Args:
        secure: Use HTTPS on port 443 instead of HTTP on port 80.
        host:   Host name to connect to.
    """

    def __init__(self, secure: bool = False, host: str = API_HOST) -> None:
        self._secure = secure
        self._host = host

    @property
    def secure(self) -> bool:
        return self._secure

    @property
    def port(self) -> int:
        return 443 if self._secure else 80

    @property
    def scheme(self) -> str:
        return "https" if self._secure else "http"

    def url_for(self, target: str) -> str:
        return f"{self.scheme}://{self._host}:{self.port}{target}"

    def execute(self, method: str, target: str, body: str | None = None) -> bytes:
        """Send ``method`` to ``target`` and return the raw response body.

        A new session is opened for every call and closed before returning,
        whether or not the request succeeded. The response status is not
        checked; error responses are recognised from their body.

        Raises:
            TransportError: If the request could not be built or sent.
        """
        headers = {}
        if body is not None:
            headers["Content-Type"] = "application/x-www-form-urlencoded"

        try:
            with requests.Session() as session:
                response = session.request(method, self.url_for(target), data=body, headers=headers)
                content = response.content
        except _MALFORMED_REQUEST_ERRORS as exc:
            raise TransportError(HICCUP_MESSAGE) from exc
        except (requests.exceptions.SSLError, requests.exceptions.ProxyError) as exc:
            #subclasses of ConnectionError, but the network itself was reachable
            raise TransportError(str(exc)) from exc
        except requests.exceptions.ConnectionError as exc:
            #name resolution, refused or reset connections and connect timeouts
            raise TransportError(NO_INTERNET_MESSAGE) from exc
        except requests.exceptions.RequestException as exc:
            raise TransportError(str(exc)) from exc

        logger.debug("%s %s answered %s (%d bytes)", method, self._host, response.status_code, len(content))
        return content

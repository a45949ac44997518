"""Exceptions raised by the actions cache client.

Every failure surfaces as a subclass of ``ActionsCacheError`` so a caller
(usually a CLI) can decide whether to abort. The service itself only
recovers from one condition: a 404 on delete.
"""


class ActionsCacheError(Exception):
    """Base exception for the actions cache client."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class TransportError(ActionsCacheError):
    """The request never produced an HTTP response (connection, timeout, setup)."""


class HTTPError(ActionsCacheError):
    """The API answered with a non-2xx status code.

    Attributes:
        status_code: HTTP status returned by the API
        url: The request URL
        message: Error message, taken from the JSON body when available
    """

    def __init__(self, status_code: int, url: str, message: str = "") -> None:
        self.status_code = status_code
        self.url = url
        detail = f"HTTP {status_code}: {message}" if message else f"HTTP {status_code}"
        super().__init__(f"{detail} ({url})")
        self.message = message

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class DecodeError(ActionsCacheError):
    """The response body was not valid JSON or did not match the expected shape."""

"""Exception types raised by the Hacker News API client."""

from typing import Iterable, Optional


class HNAPIError(Exception):
    """Base class for every failure reported by the client.

    The client facade fills in ``operation`` (and ``target`` where the call
    is keyed by an id or handle) before re-raising, so a caller can tell
    which request failed without re-inspecting the raw response.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.operation: Optional[str] = None
        self.target: Optional[str] = None

    def __str__(self) -> str:
        if self.operation is None:
            return self.message
        if self.target is None:
            return f"{self.operation}: {self.message}"
        return f"{self.operation}({self.target}): {self.message}"


class TransportError(HNAPIError):
    """The request could not be completed (DNS, TCP, TLS, timeout)."""

    def __init__(self, url: str, cause: Exception) -> None:
        super().__init__(f"could not make GET request to {url}: {cause}")
        self.url = url
        self.cause = cause


class UnexpectedStatus(HNAPIError):
    """The server answered with a non-200 status code."""

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(f"non 200 response code {status_code} from {url}")
        self.url = url
        self.status_code = status_code


class BodyReadError(HNAPIError):
    """The status was 200 but the response body could not be read."""

    def __init__(self, url: str, cause: Exception) -> None:
        super().__init__(f"could not read response body from {url}: {cause}")
        self.url = url
        self.cause = cause


class MalformedPayload(HNAPIError):
    """The body is not valid JSON or does not match the expected shape."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"malformed payload: {detail}")
        self.detail = detail


class NotFound(HNAPIError):
    """The API answered ``null``: no such item or user."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"{kind} not found")
        self.kind = kind


class UnknownItemType(HNAPIError):
    """An item's ``type`` discriminator is outside the known set."""

    def __init__(self, item_type: str) -> None:
        super().__init__(f"unknown item type: '{item_type}'")
        self.item_type = item_type


class TypeMismatch(HNAPIError):
    """A generic item was converted to a variant it does not belong to."""

    def __init__(self, expected: Iterable[str], actual: str) -> None:
        self.expected = tuple(sorted(expected))
        self.actual = actual
        super().__init__(
            f"item is not a {'/'.join(self.expected)} (type is '{actual}')"
        )

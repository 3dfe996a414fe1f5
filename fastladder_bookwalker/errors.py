"""Error types shared across fetch, extraction and publish stages."""

from __future__ import annotations


class FeedError(Exception):
    """Base class for every failure that aborts a run."""


class ConfigurationError(FeedError):
    """Raised when required settings are absent or invalid."""


class TransportError(FeedError):
    """Connection or TLS level failure talking to a remote host."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Request to {url} failed: {reason}")
        self.url = url
        self.reason = reason


class HttpStatusError(FeedError):
    """Remote host answered with a status other than 200 OK.

    Attributes:
        url: Requested URL.
        code: HTTP status code received.
        body: Raw response body, kept for diagnosing upstream changes.
    """

    def __init__(self, url: str, code: int, body: str, reason: str = "") -> None:
        status = f"{code} {reason}".strip()
        super().__init__(f"{url} returned {status}: {body}")
        self.url = url
        self.code = code
        self.body = body


class UrlParseError(FeedError, ValueError):
    """A value expected to be an absolute http(s) URL is not one."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Unparsable absolute URL: {value!r}")
        self.value = value


class MissingFieldError(FeedError):
    """An expected listing node or attribute is absent."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Unable to find {field} in listing item")
        self.field = field


__all__ = [
    "ConfigurationError",
    "FeedError",
    "HttpStatusError",
    "MissingFieldError",
    "TransportError",
    "UrlParseError",
]

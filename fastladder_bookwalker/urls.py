"""URL validation and GUID normalisation."""

from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit

from .errors import UrlParseError

_SCHEMES = ("http", "https")


def parse_absolute_url(value: str) -> str:
    """Return ``value`` stripped, or raise ``UrlParseError`` unless it is absolute http(s)."""

    candidate = (value or "").strip()
    try:
        parts = urlsplit(candidate)
    except ValueError as exc:
        raise UrlParseError(value) from exc
    if parts.scheme.lower() not in _SCHEMES or not parts.hostname:
        raise UrlParseError(value)
    return candidate


def canonical_guid(link: str) -> str:
    """Derive a stable identifier from an item link.

    Query string and fragment are dropped, scheme and host lower-cased and
    trailing empty path segments removed, so ``/de1234/`` and
    ``/de1234?adpcnt=x`` map to the same GUID.
    """

    parts = urlsplit(parse_absolute_url(link))
    path = parts.path.rstrip("/")
    return urlunsplit((parts.scheme.lower(), parts.netloc.lower(), path, "", ""))


__all__ = ["canonical_guid", "parse_absolute_url"]

"""HTTP fetching of storefront listing pages."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urljoin

import httpx
import structlog

from ..config import BookwalkerSettings
from ..errors import HttpStatusError, TransportError


@dataclass(slots=True)
class FetchResponse:
    """Body of a listing page and the URL it was served from."""

    url: str
    text: str


class Fetcher:
    """Issue one GET per listing path against the storefront origin.

    Redirects are never followed: the storefront answers an unknown
    identifier with a redirect, which must surface as an error.
    """

    def __init__(
        self,
        settings: BookwalkerSettings,
        transport: httpx.BaseTransport | None = None,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self.settings = settings
        self.logger = logger or structlog.get_logger("fastladder_bookwalker.fetcher")
        client_kwargs: dict = {}
        if settings.timeout is not None:
            client_kwargs["timeout"] = settings.timeout
        self._client = httpx.Client(
            follow_redirects=False,
            headers={"User-Agent": settings.user_agent} if settings.user_agent else None,
            transport=transport,
            **client_kwargs,
        )

    def __enter__(self) -> "Fetcher":
        return self

    def __exit__(self, *_exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def url_for(self, path: str) -> str:
        return urljoin(self.settings.base_url, path)

    def fetch(self, path: str) -> FetchResponse:
        url = self.url_for(path)
        try:
            response = self._client.get(url)
        except httpx.RequestError as exc:
            self.logger.warning("fetch_error", url=url, error=str(exc))
            raise TransportError(url, str(exc) or exc.__class__.__name__) from exc
        if response.status_code != httpx.codes.OK:
            raise HttpStatusError(url, response.status_code, response.text, response.reason_phrase)
        self.logger.info("page_fetched", url=url, size=len(response.content))
        return FetchResponse(url=url, text=response.text)


__all__ = ["FetchResponse", "Fetcher"]

"""Relay feed batches to fastladder's update_feeds RPC."""

from __future__ import annotations

from typing import Sequence
from urllib.parse import urljoin

import httpx
import structlog

from ...config import FastladderSettings
from ...errors import HttpStatusError, TransportError
from ..encoder import encode_feeds
from ..feed import Feed
from .base import BaseExporter

UPDATE_FEEDS_PATH = "/rpc/update_feeds"


class FastladderExporter(BaseExporter):
    """POST the whole batch as form fields ``api_key`` and ``feeds``."""

    def __init__(
        self,
        settings: FastladderSettings,
        transport: httpx.BaseTransport | None = None,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self.settings = settings
        self.endpoint = urljoin(settings.base_url, UPDATE_FEEDS_PATH)
        self.logger = logger or structlog.get_logger("fastladder_bookwalker.publisher")
        client_kwargs: dict = {}
        if settings.timeout is not None:
            client_kwargs["timeout"] = settings.timeout
        self._client = httpx.Client(follow_redirects=False, transport=transport, **client_kwargs)

    def publish(self, feeds: Sequence[Feed]) -> None:
        form = {"api_key": self.settings.api_key, "feeds": encode_feeds(feeds)}
        try:
            response = self._client.post(self.endpoint, data=form)
        except httpx.RequestError as exc:
            self.logger.warning("publish_error", url=self.endpoint, error=str(exc))
            raise TransportError(self.endpoint, str(exc) or exc.__class__.__name__) from exc
        if response.status_code != httpx.codes.OK:
            raise HttpStatusError(
                self.endpoint, response.status_code, response.text, response.reason_phrase
            )
        self.logger.info("feeds_posted", url=self.endpoint, count=len(feeds))

    def close(self) -> None:
        self._client.close()


__all__ = ["FastladderExporter", "UPDATE_FEEDS_PATH"]

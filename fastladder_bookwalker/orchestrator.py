"""Run coordinator wiring fetching, extraction and publishing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Sequence

import structlog

from .config import ListingMode, load_fastladder_settings
from .engine import Feed, Fetcher, ListingParser
from .engine.exporter import BaseExporter, DryRunExporter, FastladderExporter

FEED_TITLE_PREFIX = "BOOK WALKER"


@dataclass(slots=True)
class PageSummary:
    identifier: str
    url: str
    count: int


@dataclass(slots=True)
class CollectResult:
    """Feeds across all identifiers, in identifier then document order."""

    feeds: list[Feed] = field(default_factory=list)
    pages: list[PageSummary] = field(default_factory=list)


def create_exporter(dry_run: bool, environ: Mapping[str, str] | None = None) -> BaseExporter:
    """Build the exporter for this run; live mode validates settings up front."""

    if dry_run:
        return DryRunExporter()
    return FastladderExporter(load_fastladder_settings(environ))


class Orchestrator:
    """Sequential fetch → extract loop over identifiers, one publish per run."""

    def __init__(
        self,
        fetcher: Fetcher,
        parser: ListingParser,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self.fetcher = fetcher
        self.parser = parser
        self.logger = logger or structlog.get_logger("fastladder_bookwalker.orchestrator")

    def collect(self, mode: ListingMode, identifiers: Sequence[str]) -> CollectResult:
        result = CollectResult()
        for identifier in identifiers:
            path = mode.path(identifier)
            response = self.fetcher.fetch(path)
            feeds = self.parser.extract(response.text, response.url, f"{FEED_TITLE_PREFIX} {path}")
            self.logger.info(
                "listing_extracted",
                mode=mode.value,
                identifier=identifier,
                url=response.url,
                count=len(feeds),
            )
            result.feeds.extend(feeds)
            result.pages.append(PageSummary(identifier, response.url, len(feeds)))
        return result

    def run(
        self, mode: ListingMode, identifiers: Sequence[str], exporter: BaseExporter
    ) -> CollectResult:
        try:
            result = self.collect(mode, identifiers)
            exporter.publish(result.feeds)
        finally:
            exporter.close()
        return result


__all__ = ["CollectResult", "FEED_TITLE_PREFIX", "Orchestrator", "PageSummary", "create_exporter"]

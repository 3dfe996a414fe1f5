"""Records produced by listing extraction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

CATEGORY = "bookwalker"


@dataclass(frozen=True, slots=True)
class PriceLabel:
    """Optional trailing label of an item: its price or, failing that, its series."""

    kind: Literal["price", "series"]
    text: str


@dataclass(frozen=True, slots=True)
class ListingItem:
    """Fields pulled out of a single item block."""

    author: str
    title: str
    thumb_url: str
    link: str
    shop: str
    price: str | None
    guid: str


@dataclass(frozen=True, slots=True)
class Feed:
    """One catalog entry in the shape the aggregator ingests."""

    feed_link: str
    feed_title: str
    author: str
    title: str
    thumb_url: str
    link: str
    shop: str
    price: str | None
    category: str
    guid: str


__all__ = ["CATEGORY", "Feed", "ListingItem", "PriceLabel"]

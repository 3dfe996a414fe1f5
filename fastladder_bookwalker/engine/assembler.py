"""Attach page-level metadata to extracted listing items."""

from __future__ import annotations

from typing import Iterable

from .feed import CATEGORY, Feed, ListingItem


def assemble(items: Iterable[ListingItem], source_url: str, feed_title: str) -> list[Feed]:
    return [
        Feed(
            feed_link=source_url,
            feed_title=feed_title,
            author=item.author,
            title=item.title,
            thumb_url=item.thumb_url,
            link=item.link,
            shop=item.shop,
            price=item.price,
            category=CATEGORY,
            guid=item.guid,
        )
        for item in items
    ]


__all__ = ["assemble"]

"""Serialise feeds into the aggregator's wire records."""

from __future__ import annotations

import json
from html import escape
from typing import Iterable

from .feed import Feed


def render_body(feed: Feed) -> str:
    parts = [
        f'<img src="{escape(feed.thumb_url)}"/>',
        f"<p>{escape(feed.author)}</p>",
        f"<p>{escape(feed.shop)}</p>",
    ]
    if feed.price is not None:
        parts.append(f"<p>{escape(feed.price)}</p>")
    return "".join(parts)


def encode_feed(feed: Feed) -> dict[str, str]:
    """Flatten a feed into the record layout ``/rpc/update_feeds`` expects."""

    return {
        "feedlink": feed.feed_link,
        "feedtitle": feed.feed_title,
        "author": feed.author,
        "title": feed.title,
        "body": render_body(feed),
        "link": feed.link,
        "category": feed.category,
        "guid": feed.guid,
    }


def encode_feeds(feeds: Iterable[Feed]) -> str:
    return json.dumps(
        [encode_feed(feed) for feed in feeds], ensure_ascii=False, separators=(",", ":")
    )


__all__ = ["encode_feed", "encode_feeds", "render_body"]

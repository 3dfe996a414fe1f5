"""Engine components wiring fetch → extract → encode → publish."""

from .assembler import assemble
from .encoder import encode_feed, encode_feeds, render_body
from .feed import CATEGORY, Feed, ListingItem, PriceLabel
from .fetcher import FetchResponse, Fetcher
from .parser import ListingParser

__all__ = [
    "CATEGORY",
    "Feed",
    "FetchResponse",
    "Fetcher",
    "ListingItem",
    "ListingParser",
    "PriceLabel",
    "assemble",
    "encode_feed",
    "encode_feeds",
    "render_body",
]

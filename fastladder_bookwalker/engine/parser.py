"""Listing page extraction built on selectolax."""

from __future__ import annotations

from urllib.parse import urljoin

from selectolax.parser import HTMLParser, Node

from ..config import ListingSelectors
from ..errors import MissingFieldError
from ..urls import canonical_guid, parse_absolute_url
from .assembler import assemble
from .feed import Feed, ListingItem, PriceLabel


def _first(scope: Node, selector: str, field: str) -> Node:
    node = scope.css_first(selector)
    if node is None:
        raise MissingFieldError(field)
    return node


def _attribute(node: Node, name: str) -> str:
    value = node.attributes.get(name)
    if value is None or not value.strip():
        raise MissingFieldError(name)
    return value.strip()


def _text(node: Node) -> str:
    return node.text().strip()


class ListingParser:
    """Turn a listing document into feed records.

    Every field lookup is scoped to its item block. A missing mandatory
    node aborts the whole page; no partial results are returned.
    """

    def __init__(self, selectors: ListingSelectors | None = None) -> None:
        self.selectors = selectors or ListingSelectors()

    def extract(self, html: str, source_url: str, feed_title: str) -> list[Feed]:
        return assemble(self.extract_items(html, source_url), source_url, feed_title)

    def extract_items(self, html: str, base_url: str) -> list[ListingItem]:
        tree = HTMLParser(html)
        return [self._parse_item(node, base_url) for node in tree.css(self.selectors.item)]

    def select_price(self, item: Node) -> PriceLabel | None:
        """Return the price label, else the series label, else ``None``."""

        candidates = (("price", self.selectors.price), ("series", self.selectors.series))
        for kind, selector in candidates:
            node = item.css_first(selector)
            if node is not None:
                return PriceLabel(kind=kind, text=_text(node))
        return None

    def _parse_item(self, item: Node, base_url: str) -> ListingItem:
        sel = self.selectors
        image_block = _first(item, sel.image_block, "image block")
        anchor = _first(image_block, sel.anchor, "link anchor")
        link = parse_absolute_url(urljoin(base_url, _attribute(anchor, "href")))
        image = _first(anchor, sel.image, "thumbnail image")
        thumb_url = parse_absolute_url(_attribute(image, "src"))
        author = _text(_first(item, sel.author, "author"))
        title = _text(_first(item, sel.title, "title"))
        if not title:
            raise MissingFieldError("title")
        shop = _text(_first(item, sel.shop, "shop"))
        label = self.select_price(item)
        return ListingItem(
            author=author,
            title=title,
            thumb_url=thumb_url,
            link=link,
            shop=shop,
            price=label.text if label else None,
            guid=canonical_guid(link),
        )


__all__ = ["ListingParser"]

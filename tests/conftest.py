"""Shared fixtures: listing markup builders, settings and network stubs."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

import httpx
import pytest
import structlog
from structlog.testing import capture_logs

from fastladder_bookwalker import logging_conf
from fastladder_bookwalker.config import BookwalkerSettings, FastladderSettings

_DEFAULT_ITEM: dict[str, Any] = {
    "href": "https://bookwalker.jp/de0001/",
    "src": "https://c.bookwalker.jp/0001/thumb.jpg",
    "author": "Author A",
    "title": "Title A",
    "shop": "Shop A",
    "price": "¥660",
    "series": None,
}


def render_item(**overrides: Any) -> str:
    """Render one ``.bookItemInner`` block; pass ``None`` to drop a part."""

    item = {**_DEFAULT_ITEM, **overrides}
    omit = set(item.pop("omit", ()))
    href = f' href="{item["href"]}"' if item["href"] is not None else ""
    src = f' src="{item["src"]}"' if item["src"] is not None else ""
    image = "" if "image" in omit else f"<img{src} alt=\"cover\"/>"
    anchor = "" if "anchor" in omit else f"<a{href}>{image}</a>"
    image_block = "" if "image_block" in omit else f'<h3 class="img-book">{anchor}</h3>'
    parts = [image_block]
    if "author" not in omit:
        parts.append(f'<p class="book-name"><a href="#">{item["author"]}</a></p>')
    if "title" not in omit:
        parts.append(f'<p class="book-tl"><a href="{item["href"]}">{item["title"]}</a></p>')
    if "shop" not in omit:
        parts.append(f'<p class="shop-name">{item["shop"]}</p>')
    if item["series"] is not None:
        parts.append(f'<p class="book-series">{item["series"]}</p>')
    if item["price"] is not None:
        parts.append(f'<p class="book-price">{item["price"]}</p>')
    return f'<li class="o-tile"><div class="bookItemInner">{"".join(parts)}</div></li>'


def render_listing(items: Iterable[str]) -> str:
    return (
        "<html><head><title>BOOK WALKER</title></head><body>"
        f'<ul class="bookItemList">{"".join(items)}</ul>'
        "</body></html>"
    )


@pytest.fixture(autouse=True)
def captured_logs() -> Iterable[list]:
    with capture_logs() as logs:
        yield logs


@pytest.fixture(autouse=True)
def quiet_cli_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "fastladder_bookwalker.app.configure_logging",
        lambda verbose=False, log_file=None: structlog.get_logger("fastladder_bookwalker"),
    )


@pytest.fixture
def real_logging(monkeypatch: pytest.MonkeyPatch) -> Iterable[Callable[..., Any]]:
    """Run the real logging setup, then undo its global side effects."""

    monkeypatch.setattr(logging_conf, "_LOGGING_INITIALISED", False)
    monkeypatch.setattr(
        "fastladder_bookwalker.app.configure_logging", logging_conf.configure_logging
    )
    yield logging_conf.configure_logging
    logger = logging.getLogger("fastladder_bookwalker")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    structlog.reset_defaults()


@pytest.fixture
def item_html() -> Callable[..., str]:
    return render_item


@pytest.fixture
def listing_html() -> Callable[..., str]:
    def _builder(*items: str) -> str:
        return render_listing(items)

    return _builder


@pytest.fixture
def bookwalker_settings() -> BookwalkerSettings:
    return BookwalkerSettings(base_url="https://bookwalker.jp", user_agent="test-agent/1.0")


@pytest.fixture
def fastladder_settings() -> FastladderSettings:
    return FastladderSettings(base_url="https://reader.example.com/", api_key="secret-key")


class RecordingTransport(httpx.MockTransport):
    """Mock transport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            request.read()
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def recording_transport() -> Callable[..., RecordingTransport]:
    return RecordingTransport


@pytest.fixture
def pages_transport() -> Callable[[dict[str, str]], RecordingTransport]:
    """Serve listing HTML keyed by request path; unknown paths redirect home."""

    def _builder(pages: dict[str, str]) -> RecordingTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            html = pages.get(request.url.path)
            if html is None:
                return httpx.Response(302, headers={"Location": "https://bookwalker.jp/"})
            return httpx.Response(200, text=html, headers={"Content-Type": "text/html"})

        return RecordingTransport(handler)

    return _builder

"""Pydantic models describing fetch, extraction and publish settings."""

from __future__ import annotations

from enum import Enum
from urllib.parse import quote

from pydantic import BaseModel, Field, field_validator

from ..urls import parse_absolute_url

DEFAULT_BOOKWALKER_URL = "https://bookwalker.jp"


class ListingMode(str, Enum):
    """Listing pages the storefront exposes per identifier."""

    NEW = "new"
    SCHEDULE = "schedule"

    def path(self, identifier: str) -> str:
        return f"/{self.value}/{quote(identifier, safe='')}/?list=0"


class ListingSelectors(BaseModel):
    """CSS markers locating an item block and the fields inside it."""

    item: str = ".bookItemInner"
    image_block: str = ".img-book"
    anchor: str = "a"
    image: str = "img"
    author: str = ".book-name"
    title: str = ".book-tl"
    shop: str = ".shop-name"
    price: str = ".book-price"
    series: str = ".book-series"

    @field_validator("*")
    @classmethod
    def _require_selector(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("selector cannot be empty")
        return value


class BookwalkerSettings(BaseModel):
    """Storefront connection settings."""

    base_url: str = DEFAULT_BOOKWALKER_URL
    user_agent: str | None = None
    timeout: float | None = Field(default=None, gt=0)
    selectors: ListingSelectors = Field(default_factory=ListingSelectors)

    @field_validator("base_url")
    @classmethod
    def _validate_url(cls, value: str) -> str:
        return parse_absolute_url(value)


class FastladderSettings(BaseModel):
    """Aggregator endpoint and credential."""

    base_url: str
    api_key: str = Field(min_length=1)
    timeout: float | None = Field(default=None, gt=0)

    @field_validator("base_url")
    @classmethod
    def _validate_url(cls, value: str) -> str:
        return parse_absolute_url(value)


class AppConfig(BaseModel):
    """Root of the optional configuration file."""

    bookwalker: BookwalkerSettings = Field(default_factory=BookwalkerSettings)


__all__ = [
    "AppConfig",
    "BookwalkerSettings",
    "DEFAULT_BOOKWALKER_URL",
    "FastladderSettings",
    "ListingMode",
    "ListingSelectors",
]

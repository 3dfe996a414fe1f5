from __future__ import annotations

import pytest
from pydantic import ValidationError

from fastladder_bookwalker.config import (
    BookwalkerSettings,
    FastladderSettings,
    ListingMode,
    ListingSelectors,
)


@pytest.mark.parametrize(
    ("mode", "identifier", "expected"),
    [
        (ListingMode.NEW, "st1", "/new/st1/?list=0"),
        (ListingMode.SCHEDULE, "ct2", "/schedule/ct2/?list=0"),
        (ListingMode.NEW, "a/b", "/new/a%2Fb/?list=0"),
    ],
)
def test_listing_mode_path(mode, identifier, expected) -> None:
    assert mode.path(identifier) == expected


def test_bookwalker_defaults() -> None:
    settings = BookwalkerSettings()
    assert settings.base_url == "https://bookwalker.jp"
    assert settings.timeout is None
    assert settings.selectors.item == ".bookItemInner"
    assert settings.selectors.series == ".book-series"


def test_bookwalker_rejects_relative_base_url() -> None:
    with pytest.raises(ValidationError):
        BookwalkerSettings(base_url="bookwalker.jp")


def test_selectors_cannot_be_blank() -> None:
    with pytest.raises(ValidationError):
        ListingSelectors(title="  ")
    assert ListingSelectors(title=" .name ").title == ".name"


def test_fastladder_settings_validation() -> None:
    with pytest.raises(ValidationError):
        FastladderSettings(base_url="https://reader.example.com", api_key="")
    with pytest.raises(ValidationError):
        FastladderSettings(base_url="not a url", api_key="k")
    with pytest.raises(ValidationError):
        FastladderSettings(base_url="https://reader.example.com", api_key="k", timeout=0)

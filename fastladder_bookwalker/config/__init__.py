"""Configuration package exports."""

from .loader import (
    CONFIG_ENV_VAR,
    FASTLADDER_API_KEY_ENV,
    FASTLADDER_URL_ENV,
    load_app_config,
    load_fastladder_settings,
)
from .models import (
    AppConfig,
    BookwalkerSettings,
    DEFAULT_BOOKWALKER_URL,
    FastladderSettings,
    ListingMode,
    ListingSelectors,
)

__all__ = [
    "AppConfig",
    "BookwalkerSettings",
    "CONFIG_ENV_VAR",
    "DEFAULT_BOOKWALKER_URL",
    "FASTLADDER_API_KEY_ENV",
    "FASTLADDER_URL_ENV",
    "FastladderSettings",
    "ListingMode",
    "ListingSelectors",
    "load_app_config",
    "load_fastladder_settings",
]

"""Configuration exports for market_stats."""

from market_stats.config.state import (
    ApiSettings,
    ConfigLoader,
    ConfigState,
    LoggingSettings,
    QuoteApiSettings,
    RetrySettings,
    get_config,
)

__all__ = [
    "ApiSettings",
    "ConfigLoader",
    "ConfigState",
    "LoggingSettings",
    "QuoteApiSettings",
    "RetrySettings",
    "get_config",
]

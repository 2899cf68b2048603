"""Shared fixtures: quote-chart documents and a pinned clock."""

from datetime import UTC, date, datetime, timedelta

import pytest

from market_stats.infrastructure.impls.system import FixedClock
from market_stats.ingestion.config.value_objects import QuoteApiConfig, RetryConfig
from market_stats.ingestion.models.enums import Instrument
from market_stats.ingestion.models.series import PriceSeries

START_DATE = date(2024, 1, 1)


def day_timestamp(day: date, hour: int = 14) -> int:
    """UNIX seconds for ``day`` at ``hour`` UTC (market-hours bar stamp)."""
    return int(datetime(day.year, day.month, day.day, hour, tzinfo=UTC).timestamp())


def chart_document(timestamps: list[int], closes: list) -> dict:
    """Minimal quote-chart payload with the given arrays."""
    return {
        "chart": {
            "result": [
                {
                    "meta": {"currency": "USD"},
                    "timestamp": timestamps,
                    "indicators": {"quote": [{"close": closes, "open": closes}]},
                }
            ],
            "error": None,
        }
    }


def daily_document(closes: list, start: date = START_DATE) -> dict:
    """Payload with one bar per consecutive calendar day from ``start``."""
    timestamps = [day_timestamp(start + timedelta(days=i)) for i in range(len(closes))]
    return chart_document(timestamps, closes)


def daily_series(
    instrument: Instrument, closes: list[float], start: date = START_DATE
) -> PriceSeries:
    return PriceSeries.from_points(
        instrument,
        ((start + timedelta(days=i), price) for i, price in enumerate(closes)),
    )


@pytest.fixture
def fixed_clock():
    return FixedClock(datetime(2024, 12, 31, 12, 0, tzinfo=UTC))


@pytest.fixture
def quote_config():
    return QuoteApiConfig(
        base_url="https://quotes.example.com/v8/finance/chart",
        headers={"accept": "*/*", "user-agent": "pytest"},
        lookback_days=365,
        extra_params={"includePrePost": "true", "events": "div|split|earn"},
        retry_config=RetryConfig(max_attempts=15, delay_seconds=1.5),
    )


# Factories exposed as fixtures so test modules never import conftest.


@pytest.fixture
def make_chart_document():
    return chart_document


@pytest.fixture
def make_daily_document():
    return daily_document


@pytest.fixture
def make_daily_series():
    return daily_series


@pytest.fixture
def make_timestamp():
    return day_timestamp

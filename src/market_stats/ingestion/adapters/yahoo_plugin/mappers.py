"""Map a validated chart document onto a PriceSeries."""

import math
from typing import Any

from market_stats.common.exceptions import MalformedUpstreamDataError
from market_stats.common.utils.date_utils import unix_seconds_to_date
from market_stats.ingestion.adapters.yahoo_plugin.schema import (
    ValidationError,
    parse_chart_document,
)
from market_stats.ingestion.models.enums import Instrument
from market_stats.ingestion.models.series import PriceSeries


def document_to_series(instrument: Instrument, document: Any) -> PriceSeries:
    """Parse the upstream document into a date-keyed series.

    Prices and timestamps are paired by position. Pairs whose close is
    missing or non-finite are dropped; a repeated date keeps the last price.

    Raises:
        MalformedUpstreamDataError: Close or timestamp arrays absent, mistyped,
            or of different lengths
    """
    try:
        chart = parse_chart_document(document)
    except ValidationError as e:
        raise MalformedUpstreamDataError(
            instrument.display_name,
            f"Unexpected response shape ({e.error_count()} validation errors).",
        ) from e

    closes = chart.closes
    timestamps = chart.timestamps
    if len(closes) != len(timestamps):
        raise MalformedUpstreamDataError(
            instrument.display_name,
            f"Got {len(closes)} closes for {len(timestamps)} timestamps.",
        )

    try:
        points = [
            (unix_seconds_to_date(ts), float(close))
            for ts, close in zip(timestamps, closes)
            if close is not None and math.isfinite(close)
        ]
    except (ValueError, OverflowError, OSError) as e:
        raise MalformedUpstreamDataError(
            instrument.display_name, f"Timestamp out of range ({e})."
        ) from e
    return PriceSeries.from_points(instrument, points)

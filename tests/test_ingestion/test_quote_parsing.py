"""Tests for chart document validation and mapping onto PriceSeries."""

from datetime import date

import pytest

from market_stats.common.exceptions import MalformedUpstreamDataError
from market_stats.ingestion.adapters.yahoo_plugin.mappers import document_to_series
from market_stats.ingestion.adapters.yahoo_plugin.schema import (
    ValidationError,
    parse_chart_document,
)
from market_stats.ingestion.models.enums import Instrument


class TestChartDocument:
    def test_parses_arrays(self, make_daily_document):
        document = parse_chart_document(make_daily_document([1.0, 2.0, 3.0]))
        assert document.closes == [1.0, 2.0, 3.0]
        assert len(document.timestamps) == 3

    def test_non_numeric_closes_become_none(self, make_chart_document):
        document = parse_chart_document(
            make_chart_document([1, 2, 3, 4], [1.5, None, "n/a", True])
        )
        assert document.closes == [1.5, None, None, None]

    def test_missing_result_rejected(self):
        with pytest.raises(ValidationError):
            parse_chart_document({"chart": {"result": [], "error": None}})

    def test_error_payload_rejected(self):
        with pytest.raises(ValidationError):
            parse_chart_document(
                {"chart": {"result": None, "error": {"code": "Not Found"}}}
            )


class TestDocumentToSeries:
    def test_maps_each_bar_to_its_utc_date(self, make_daily_document):
        series = document_to_series(
            Instrument.BITCOIN, make_daily_document([100.0, 101.0, 102.0])
        )

        assert series.instrument is Instrument.BITCOIN
        assert series.sorted_dates() == [
            date(2024, 1, 1),
            date(2024, 1, 2),
            date(2024, 1, 3),
        ]
        assert series.chronological_prices() == [100.0, 101.0, 102.0]

    def test_null_closes_dropped_without_shifting(self, make_daily_document):
        """Later prices stay paired with their own timestamps."""
        series = document_to_series(
            Instrument.SNP500, make_daily_document([10.0, None, 30.0, None, 50.0])
        )

        assert len(series) == 3
        assert series[date(2024, 1, 1)] == 10.0
        assert series[date(2024, 1, 3)] == 30.0
        assert series[date(2024, 1, 5)] == 50.0
        assert date(2024, 1, 2) not in series

    def test_same_day_bars_keep_last(self, make_chart_document, make_timestamp):
        day = date(2024, 3, 1)
        document = make_chart_document(
            [make_timestamp(day, hour=0), make_timestamp(day, hour=23)],
            [1.0, 2.0],
        )

        series = document_to_series(Instrument.ETHEREUM, document)

        assert len(series) == 1
        assert series[day] == 2.0

    def test_empty_arrays_give_empty_series(self, make_chart_document):
        series = document_to_series(Instrument.SOLANA, make_chart_document([], []))
        assert len(series) == 0

    def test_missing_close_is_malformed(self, make_timestamp):
        document = {
            "chart": {
                "result": [
                    {
                        "timestamp": [make_timestamp(date(2024, 1, 1))],
                        "indicators": {"quote": [{"open": [1.0]}]},
                    }
                ]
            }
        }
        with pytest.raises(MalformedUpstreamDataError) as exc_info:
            document_to_series(Instrument.BITCOIN, document)

        assert "Not possible to fetch yearly token<Bitcoin> data." in str(exc_info.value)

    def test_missing_timestamp_is_malformed(self):
        document = {
            "chart": {"result": [{"indicators": {"quote": [{"close": [1.0]}]}}]}
        }
        with pytest.raises(MalformedUpstreamDataError):
            document_to_series(Instrument.BITCOIN, document)

    def test_length_mismatch_is_malformed(self, make_chart_document, make_timestamp):
        document = make_chart_document(
            [make_timestamp(date(2024, 1, 1))], [1.0, 2.0]
        )
        with pytest.raises(MalformedUpstreamDataError, match="2 closes for 1 timestamps"):
            document_to_series(Instrument.BITCOIN, document)

    def test_non_mapping_document_is_malformed(self):
        with pytest.raises(MalformedUpstreamDataError):
            document_to_series(Instrument.BITCOIN, "<html>rate limited</html>")

    def test_timestamp_out_of_range_is_malformed(self, make_chart_document):
        document = make_chart_document([10**13], [1.0])
        with pytest.raises(MalformedUpstreamDataError, match="Timestamp out of range"):
            document_to_series(Instrument.BITCOIN, document)

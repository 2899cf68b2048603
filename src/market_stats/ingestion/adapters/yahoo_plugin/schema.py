"""
Typed view of the quote-chart response document.

Only the fields the series parser reads are modelled; everything else in the
payload is ignored. Expected shape::

    {
        "chart": {
            "result": [
                {
                    "timestamp": [1704067200, ...],
                    "indicators": {"quote": [{"close": [42000.5, null, ...]}]}
                }
            ],
            "error": null
        }
    }
"""

from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator


class QuoteIndicator(BaseModel):
    close: list[float | None]

    @field_validator("close", mode="before")
    @classmethod
    def drop_unrepresentable(cls, v: Any) -> Any:
        """Non-numeric entries become ``None`` (missing trading day)."""
        if not isinstance(v, list):
            return v
        cleaned: list[float | None] = []
        for item in v:
            if isinstance(item, bool) or not isinstance(item, (int, float)):
                cleaned.append(None)
            else:
                cleaned.append(item)
        return cleaned

    class Config:
        extra = "ignore"


class Indicators(BaseModel):
    quote: list[QuoteIndicator] = Field(min_length=1)

    class Config:
        extra = "ignore"


class ChartResult(BaseModel):
    timestamp: list[int]
    indicators: Indicators

    class Config:
        extra = "ignore"


class Chart(BaseModel):
    result: list[ChartResult] = Field(min_length=1)

    class Config:
        extra = "ignore"


class ChartDocument(BaseModel):
    chart: Chart

    class Config:
        extra = "ignore"

    @property
    def closes(self) -> list[float | None]:
        return self.chart.result[0].indicators.quote[0].close

    @property
    def timestamps(self) -> list[int]:
        return self.chart.result[0].timestamp


def parse_chart_document(document: Any) -> ChartDocument:
    """Validate a decoded JSON document.

    Raises:
        pydantic.ValidationError: If required fields are missing or mistyped
    """
    return ChartDocument.model_validate(document)


__all__ = [
    "ChartDocument",
    "ValidationError",
    "parse_chart_document",
]

"""Immutable computation results returned to the façade."""

import math
from dataclasses import dataclass
from typing import Any

from market_stats.ingestion.models.enums import Instrument


def _finite_or_none(value: float) -> float | None:
    # JSON has no NaN; a zero-variance correlation renders as null.
    return value if math.isfinite(value) else None


@dataclass(frozen=True)
class CovarianceResult:
    """Covariance and correlation between two instruments."""

    token_1: Instrument
    token_2: Instrument
    covariance: float
    correlation_coefficient: float
    common_dates: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "token_1": self.token_1.display_name,
            "token_2": self.token_2.display_name,
            "covariance": _finite_or_none(self.covariance),
            "correlation_coefficient": _finite_or_none(self.correlation_coefficient),
        }


@dataclass(frozen=True)
class VolatilityResult:
    """Annualized realized volatility of one instrument."""

    token: Instrument
    volatility: float

    def to_json_value(self) -> float | None:
        return _finite_or_none(self.volatility)

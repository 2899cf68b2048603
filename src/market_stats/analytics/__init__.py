"""Analytics Layer: statistics engine and the service that orchestrates it."""

from market_stats.analytics.results import CovarianceResult, VolatilityResult

__all__ = [
    "CovarianceResult",
    "VolatilityResult",
]

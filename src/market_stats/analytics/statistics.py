"""
Descriptive statistics over price series.

All functions are pure and deterministic. Variances, covariances and standard
deviations are population statistics (divide by n). Degenerate inputs raise
``InsufficientSamplesError`` instead of returning a sentinel; a zero-variance
side makes the correlation NaN rather than raising.
"""

from collections.abc import Sequence

import numpy as np

from market_stats.common.exceptions import InsufficientSamplesError
from market_stats.ingestion.models.series import PriceSeries
from market_stats.transformation.alignment import AlignedSeriesPair

TRADING_DAYS_PER_YEAR = 252


def _as_array(values: Sequence[float], what: str) -> np.ndarray:
    arr = np.asarray(values, dtype=np.float64)
    if arr.size == 0:
        raise InsufficientSamplesError(f"No values available to calculate {what}.")
    return arr


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean."""
    return float(np.mean(_as_array(values, "mean")))


def population_std(values: Sequence[float]) -> float:
    """Standard deviation with divisor n."""
    return float(np.std(_as_array(values, "standard deviation"), ddof=0))


def covariance(pair: AlignedSeriesPair) -> float:
    """Population covariance over the pair's common dates."""
    a = _as_array(pair.first_values(), "covariance")
    b = _as_array(pair.second_values(), "covariance")
    return float(np.mean((a - a.mean()) * (b - b.mean())))


def correlation(pair: AlignedSeriesPair) -> float:
    """Pearson correlation coefficient over the pair's common dates.

    NaN when either side has zero variance.
    """
    a = _as_array(pair.first_values(), "correlation")
    b = _as_array(pair.second_values(), "correlation")
    cov = np.mean((a - a.mean()) * (b - b.mean()))
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(cov) / (np.std(a, ddof=0) * np.std(b, ddof=0)))


def log_returns(prices: Sequence[float]) -> list[float]:
    """ln(p[i+1] / p[i]) for a chronologically sorted price sequence."""
    if len(prices) < 2:
        raise InsufficientSamplesError(
            "Not enough price points to calculate log returns."
        )
    arr = np.asarray(prices, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.log(arr[1:] / arr[:-1]).tolist()


def annualized_std(returns: Sequence[float]) -> float:
    """Population std of daily returns scaled by sqrt(252)."""
    if len(returns) == 0:
        raise InsufficientSamplesError(
            "No log returns available to calculate standard deviation."
        )
    daily = np.std(np.asarray(returns, dtype=np.float64), ddof=0)
    return float(daily * np.sqrt(TRADING_DAYS_PER_YEAR))


def realized_volatility(series: PriceSeries) -> float:
    """Annualized realized volatility of the series' daily log returns."""
    if len(series) == 0:
        raise InsufficientSamplesError(
            "No price data available for the specified token."
        )
    return annualized_std(log_returns(series.chronological_prices()))

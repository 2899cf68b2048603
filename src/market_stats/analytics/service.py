"""Statistics service: fetch, align and compute for one top-level request."""

import asyncio

from market_stats.analytics import statistics
from market_stats.analytics.results import CovarianceResult, VolatilityResult
from market_stats.infrastructure.observability import get_processing_logger
from market_stats.ingestion.adapters.yahoo_plugin.series_fetcher import SeriesFetcher
from market_stats.ingestion.models.enums import Instrument
from market_stats.transformation.alignment import align

log = get_processing_logger("stats-service")


class StatsService:
    """Computes covariance/correlation and realized volatility.

    Holds no per-request state; concurrent calls share only the injected
    fetcher, whose HTTP client handles its own connection reuse.
    """

    def __init__(self, fetcher: SeriesFetcher):
        self.fetcher = fetcher

    async def calculate_covariance(
        self, token_1: Instrument, token_2: Instrument
    ) -> CovarianceResult:
        """Covariance and Pearson correlation of the two instruments' closes.

        Both series are fetched concurrently and both fetches run to
        completion before any failure is raised; the first failure, in
        argument order, wins.

        Raises:
            MarketStatsError: Any fetch, alignment or statistics failure
        """
        fetched = await asyncio.gather(
            self.fetcher.fetch_yearly_series(token_1),
            self.fetcher.fetch_yearly_series(token_2),
            return_exceptions=True,
        )
        for outcome in fetched:
            if isinstance(outcome, BaseException):
                raise outcome
        series_1, series_2 = fetched
        pair = align(series_1, series_2)

        result = CovarianceResult(
            token_1=token_1,
            token_2=token_2,
            covariance=statistics.covariance(pair),
            correlation_coefficient=statistics.correlation(pair),
            common_dates=len(pair),
        )
        log.info(
            "covariance_computed",
            token_1=token_1.display_name,
            token_2=token_2.display_name,
            common_dates=result.common_dates,
            covariance=result.covariance,
            correlation=result.correlation_coefficient,
        )
        return result

    async def calculate_realized_volatility(self, token: Instrument) -> VolatilityResult:
        """Annualized realized volatility over the lookback window."""
        series = await self.fetcher.fetch_yearly_series(token)
        result = VolatilityResult(
            token=token, volatility=statistics.realized_volatility(series)
        )
        log.info(
            "volatility_computed",
            token=token.display_name,
            points=len(series),
            volatility=result.volatility,
        )
        return result

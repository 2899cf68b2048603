"""Dependency injection container for the market statistics pipeline.

Wires the HTTP client, request executor, series fetcher and statistics
service together. This is the single place where concrete implementations
are chosen.

Usage:
    container = MarketStatsContainer(config)
    async with container.stats_service() as service:
        result = await service.calculate_covariance(a, b)
"""

import asyncio
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from market_stats.analytics.service import StatsService
from market_stats.config.state import ConfigState
from market_stats.infrastructure.impls.system import SystemClock
from market_stats.infrastructure.observability import get_infrastructure_logger
from market_stats.infrastructure.ports.system import IClock
from market_stats.ingestion.adapters.yahoo_plugin.series_fetcher import SeriesFetcher
from market_stats.ingestion.config.value_objects import QuoteApiConfig
from market_stats.ingestion.connectors.aiohttp_client import AiohttpClient
from market_stats.ingestion.connectors.executor import RequestExecutor
from market_stats.ingestion.ports.http import IHttpClient


class MarketStatsContainer:
    """Dependency injection container for fetchers and the stats service.

    Tests can subclass this and override ``create_http_client`` to inject
    a mock transport.
    """

    def __init__(
        self,
        config: QuoteApiConfig,
        clock: IClock | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """Initialize container with configuration.

        Args:
            config: Quote API configuration (nested HTTP and retry configs)
            clock: Source of "now" for lookback windows (defaults to system clock)
            sleep: Awaitable used between retry attempts
        """
        self.config = config
        self.clock = clock or SystemClock()
        self.sleep = sleep

    def create_http_client(self) -> IHttpClient:
        """Create HTTP client implementation (currently AiohttpClient)."""
        return AiohttpClient(self.config.http_config)

    def create_executor(self, http_client: IHttpClient) -> RequestExecutor:
        return RequestExecutor(http_client, self.config.retry_config, sleep=self.sleep)

    def create_series_fetcher(self, http_client: IHttpClient) -> SeriesFetcher:
        return SeriesFetcher(
            self.config, self.create_executor(http_client), clock=self.clock
        )

    def create_stats_service(self, http_client: IHttpClient) -> StatsService:
        return StatsService(self.create_series_fetcher(http_client))

    @asynccontextmanager
    async def stats_service(self) -> AsyncIterator[StatsService]:
        """Yield a fully-wired StatsService; the HTTP client is closed on exit."""
        http_client = self.create_http_client()
        try:
            yield self.create_stats_service(http_client)
        finally:
            await http_client.close()


def create_container_from_settings(state: ConfigState) -> MarketStatsContainer:
    """Build a container from the validated application configuration."""
    config = QuoteApiConfig.from_state(state)
    get_infrastructure_logger("dependency-container").info(
        "container_created",
        env=state.env,
        base_url=config.base_url,
        max_attempts=config.retry_config.max_attempts,
    )
    return MarketStatsContainer(config)

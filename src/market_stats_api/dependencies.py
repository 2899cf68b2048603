"""FastAPI dependencies wiring routes to the statistics service."""

from collections.abc import AsyncIterator
from functools import lru_cache

from fastapi import Depends

from market_stats.analytics.service import StatsService
from market_stats.config import get_config
from market_stats.ingestion.dependency_container import (
    MarketStatsContainer,
    create_container_from_settings,
)


@lru_cache(maxsize=1)
def get_container() -> MarketStatsContainer:
    return create_container_from_settings(get_config())


async def get_stats_service(
    container: MarketStatsContainer = Depends(get_container),
) -> AsyncIterator[StatsService]:
    """One service (and one HTTP session) per request."""
    async with container.stats_service() as service:
        yield service

from market_stats.common.utils.date_utils import lookback_window
from market_stats.infrastructure.impls.system import SystemClock
from market_stats.infrastructure.observability import get_ingestion_logger
from market_stats.infrastructure.ports.system import IClock
from market_stats.ingestion.adapters.yahoo_plugin.builders import build_chart_url
from market_stats.ingestion.adapters.yahoo_plugin.mappers import document_to_series
from market_stats.ingestion.config.value_objects import QuoteApiConfig
from market_stats.ingestion.connectors.executor import RequestExecutor
from market_stats.ingestion.models.enums import HttpMethod, Instrument
from market_stats.ingestion.models.series import PriceSeries


class SeriesFetcher:
    """Fetches the trailing-window daily close series for one instrument.

    Dependencies injected (not instantiated):
    - config: Base URL, headers, lookback window, extra query parameters
    - executor: Resilient request executor
    - clock: Source of "now" for the lookback window
    """

    def __init__(
        self,
        config: QuoteApiConfig,
        executor: RequestExecutor,
        clock: IClock | None = None,
    ):
        self.config = config
        self.executor = executor
        self.clock = clock or SystemClock()

    def build_url(self, instrument: Instrument) -> str:
        start, end = lookback_window(self.clock.now(), self.config.lookback_days)
        return build_chart_url(
            self.config.base_url,
            instrument.symbol,
            start,
            end,
            interval=self.config.interval,
            extra_params=self.config.extra_params,
        )

    async def fetch_yearly_series(self, instrument: Instrument) -> PriceSeries:
        """Fetch and parse the lookback-window series for ``instrument``.

        Raises:
            MalformedUpstreamDataError: Response lacks close/timestamp arrays
            FatalHTTPError, AttemptsExhaustedError: Propagated from the executor
        """
        log = get_ingestion_logger("series-fetcher", instrument=instrument.display_name)
        url = self.build_url(instrument)
        log.info(
            "fetching_series",
            symbol=instrument.symbol,
            lookback_days=self.config.lookback_days,
        )

        document = await self.executor.execute(
            HttpMethod.GET, url, headers=dict(self.config.headers) or None
        )
        series = document_to_series(instrument, document)

        log.info("series_fetched", points=len(series))
        return series

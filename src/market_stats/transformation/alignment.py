"""
Series alignment: reconcile two independently fetched series onto the dates
they share.

Crypto trades every calendar day while the equity index only trades on
exchange sessions, so a BTC/S&P pair typically loses weekends and holidays
from the crypto side.
"""

from dataclasses import dataclass
from datetime import date

from market_stats.common.exceptions import AlignmentInconsistencyError, NoOverlapError
from market_stats.infrastructure.observability import get_processing_logger
from market_stats.ingestion.models.series import PriceSeries

log = get_processing_logger("series-aligner")


@dataclass(frozen=True)
class AlignedSeriesPair:
    """Two series restricted to their common dates.

    Invariant: ``first`` and ``second`` have identical key sets, equal to
    ``common_dates``.
    """

    first: PriceSeries
    second: PriceSeries
    common_dates: tuple[date, ...]
    dropped_first: int
    dropped_second: int

    def __len__(self) -> int:
        return len(self.common_dates)

    def first_values(self) -> list[float]:
        return [self.first[d] for d in self.common_dates]

    def second_values(self) -> list[float]:
        return [self.second[d] for d in self.common_dates]


def align(series_a: PriceSeries, series_b: PriceSeries) -> AlignedSeriesPair:
    """Align two series on their common dates.

    When cardinalities differ, the larger side first drops every date the
    smaller side lacks. Both sides are then restricted to the intersection.

    Raises:
        NoOverlapError: The series share no date
        AlignmentInconsistencyError: The restricted sides disagree
    """
    a, b = series_a, series_b
    if len(a) > len(b):
        a = a.restricted_to(b.dates())
    elif len(b) > len(a):
        b = b.restricted_to(a.dates())

    common = a.dates() & b.dates()
    if not common:
        raise NoOverlapError()

    common_dates = tuple(sorted(common))
    first = a.restricted_to(common_dates)
    second = b.restricted_to(common_dates)

    if len(first) != len(second) or first.dates() != second.dates():
        raise AlignmentInconsistencyError(
            series_a.instrument.display_name, series_b.instrument.display_name
        )

    pair = AlignedSeriesPair(
        first=first,
        second=second,
        common_dates=common_dates,
        dropped_first=len(series_a) - len(first),
        dropped_second=len(series_b) - len(second),
    )
    log.info(
        "series_aligned",
        first=series_a.instrument.display_name,
        second=series_b.instrument.display_name,
        common_dates=len(pair),
        dropped_first=pair.dropped_first,
        dropped_second=pair.dropped_second,
    )
    return pair

"""Date-keyed closing-price series."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from market_stats.ingestion.models.enums import Instrument


@dataclass
class PriceSeries:
    """Closing prices for one instrument keyed by calendar date.

    At most one price per date: ``from_points`` keeps the last price seen
    for a repeated date. Insertion order carries no meaning; use
    ``sorted_dates`` / ``chronological_prices`` when order matters.
    """

    instrument: Instrument
    prices: dict[date, float] = field(default_factory=dict)

    @classmethod
    def from_points(
        cls, instrument: Instrument, points: Iterable[tuple[date, float]]
    ) -> "PriceSeries":
        prices: dict[date, float] = {}
        for day, price in points:
            prices[day] = price
        return cls(instrument=instrument, prices=prices)

    def __len__(self) -> int:
        return len(self.prices)

    def __contains__(self, day: object) -> bool:
        return day in self.prices

    def __getitem__(self, day: date) -> float:
        return self.prices[day]

    def dates(self) -> set[date]:
        return set(self.prices)

    def sorted_dates(self) -> list[date]:
        return sorted(self.prices)

    def chronological_prices(self) -> list[float]:
        return [self.prices[d] for d in self.sorted_dates()]

    def restricted_to(self, days: Iterable[date]) -> "PriceSeries":
        """Copy keeping only ``days`` that are present in this series."""
        return PriceSeries(
            instrument=self.instrument,
            prices={d: self.prices[d] for d in days if d in self.prices},
        )

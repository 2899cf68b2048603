"""Default implementations of infrastructure abstractions."""

from datetime import UTC, datetime

from market_stats.infrastructure.ports.system import IClock


class SystemClock(IClock):
    """Default implementation using system time."""

    def now(self) -> datetime:
        """Get current local time."""
        return datetime.now().astimezone()

    def utcnow(self) -> datetime:
        """Get current UTC time."""
        return datetime.now(UTC)


class FixedClock(IClock):
    """Clock pinned to a single instant, for replays and tests."""

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=UTC)
        self._instant = instant

    def now(self) -> datetime:
        return self._instant.astimezone()

    def utcnow(self) -> datetime:
        return self._instant.astimezone(UTC)

"""
Market Stats Exception Hierarchy

Provides specific exception types for every failure the fetch pipeline and
statistics engine can surface, enabling proper error classification at the
façade (client error vs. server error).
"""


class MarketStatsError(Exception):
    """Base exception for all market-stats failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# ============================================================================
# Request executor
# ============================================================================


class UnsupportedMethodError(MarketStatsError):
    """HTTP method outside the supported set. Never retried."""

    def __init__(self, method: str):
        super().__init__(f"The method <{method}> is not supported.")
        self.method = method


class TransientHTTPError(MarketStatsError):
    """A single failed attempt that the executor is allowed to retry."""

    def __init__(
        self,
        message: str,
        url: str,
        status_code: int | None = None,
        body: str | None = None,
    ):
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.body = body


class TransportError(TransientHTTPError):
    """Connection error or per-attempt timeout; no HTTP status available."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Transport failure for {url}: {reason}", url=url)
        self.reason = reason


class FatalHTTPError(MarketStatsError):
    """Upstream failure that aborts the request without using remaining attempts."""

    def __init__(self, url: str, status_code: int, reason: str = "Can't process request."):
        super().__init__(f"URL: {url} Status: {status_code} | {reason}")
        self.url = url
        self.status_code = status_code


class AttemptsExhaustedError(MarketStatsError):
    """Raised when the attempt budget is spent without a 200 response."""

    def __init__(self, url: str, attempts: int):
        super().__init__(f"Attempts reached ({attempts}). Check URL: {url}")
        self.url = url
        self.attempts = attempts


# ============================================================================
# Series fetcher
# ============================================================================


class MalformedUpstreamDataError(MarketStatsError):
    """Upstream document lacks the close-price or timestamp arrays."""

    def __init__(self, instrument: str, detail: str | None = None):
        message = f"Not possible to fetch yearly token<{instrument}> data."
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)
        self.instrument = instrument


# ============================================================================
# Alignment and statistics
# ============================================================================


class NoOverlapError(MarketStatsError):
    """The two series share no calendar date."""

    def __init__(self) -> None:
        super().__init__("No common timestamps found between the two tokens.")


class AlignmentInconsistencyError(MarketStatsError):
    """Aligned series ended up with different date sets."""

    def __init__(self, first: str, second: str):
        super().__init__(
            f"The historical data amount from token_1<{first}> "
            f"is not equal to token_2<{second}>."
        )
        self.first = first
        self.second = second


class InsufficientSamplesError(MarketStatsError):
    """Too few observations for the requested statistic."""


# ============================================================================
# Façade
# ============================================================================


class UnrecognizedInstrumentError(MarketStatsError):
    """Instrument alias not in the supported set. Maps to a client error."""

    def __init__(self, field: str, value: str):
        super().__init__(f"Invalid {field} value: {value}")
        self.field = field
        self.value = value


class MissingParameterError(MarketStatsError):
    """Required query parameter absent. Maps to a client error."""

    def __init__(self, name: str):
        super().__init__(f"Missing query parameter: {name}")
        self.name = name

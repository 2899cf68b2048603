"""Configuration value objects for dependency injection.

Instead of injecting the global ConfigState into each component, inject
specific frozen dataclasses. Enables:
- Easy testing with different configurations
- Clear constructor contracts
- Validation at composition root
"""

from dataclasses import dataclass, field

from market_stats.config.state import ConfigState


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuration for HTTP client."""

    timeout: float = 5.0


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for the request executor's retry loop."""

    max_attempts: int = 15
    delay_seconds: float = 1.5


@dataclass(frozen=True)
class QuoteApiConfig:
    """Configuration for the quote-chart API."""

    base_url: str
    headers: dict[str, str] = field(default_factory=dict)
    lookback_days: int = 365
    interval: str = "1d"
    extra_params: dict[str, str] = field(default_factory=dict)
    http_config: HttpClientConfig = None
    retry_config: RetryConfig = None

    def __post_init__(self):
        """Set defaults for nested configs."""
        if self.http_config is None:
            object.__setattr__(self, "http_config", HttpClientConfig())
        if self.retry_config is None:
            object.__setattr__(self, "retry_config", RetryConfig())

    @classmethod
    def from_state(cls, state: ConfigState) -> "QuoteApiConfig":
        """Build from the validated application configuration."""
        return cls(
            base_url=state.quote_api.base_url,
            headers=dict(state.quote_api.headers),
            lookback_days=state.quote_api.lookback_days,
            interval=state.quote_api.interval,
            extra_params=dict(state.quote_api.extra_params),
            http_config=HttpClientConfig(timeout=state.retry.timeout_seconds),
            retry_config=RetryConfig(
                max_attempts=state.retry.max_attempts,
                delay_seconds=state.retry.delay_seconds,
            ),
        )

"""Configuration value objects injected into ingestion components."""

from .value_objects import HttpClientConfig, QuoteApiConfig, RetryConfig  # noqa: F401

__all__ = [
    "HttpClientConfig",
    "QuoteApiConfig",
    "RetryConfig",
]

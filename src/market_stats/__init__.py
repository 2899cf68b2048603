"""
Market statistics over daily closing prices.
Modular architecture with clean separation of concerns.

Modules:
- ingestion: Resilient quote-chart fetching and series parsing
- transformation: Alignment of independently fetched series
- analytics: Covariance, correlation and realized volatility
- config: Layered YAML + environment configuration
- infrastructure: Clock, logging
"""

__version__ = "0.1.0"

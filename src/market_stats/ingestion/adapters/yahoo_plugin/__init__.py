"""Quote-chart API plugin: URL building, response schema and series fetching."""

from .series_fetcher import SeriesFetcher  # noqa: F401

__all__ = ["SeriesFetcher"]

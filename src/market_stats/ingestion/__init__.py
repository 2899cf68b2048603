"""Ingestion layer: resilient quote-chart requests and series parsing."""

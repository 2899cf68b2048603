"""Ingestion domain models."""

from .enums import HttpMethod, Instrument  # noqa: F401
from .series import PriceSeries  # noqa: F401

__all__ = [
    "HttpMethod",
    "Instrument",
    "PriceSeries",
]

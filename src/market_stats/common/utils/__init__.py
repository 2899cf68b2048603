"""
Utilities Module - Shared Helper Functions
===========================================
"""

from market_stats.common.utils.date_utils import (
    lookback_window,
    to_unix_seconds,
    unix_seconds_to_date,
)

__all__ = [
    "to_unix_seconds",
    "unix_seconds_to_date",
    "lookback_window",
]

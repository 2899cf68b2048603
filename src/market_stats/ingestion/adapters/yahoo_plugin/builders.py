"""URL builder for the quote-chart endpoint."""

from datetime import datetime
from urllib.parse import urlencode

from market_stats.common.utils.date_utils import to_unix_seconds


def build_chart_url(
    base_url: str,
    symbol: str,
    start: datetime,
    end: datetime,
    interval: str = "1d",
    extra_params: dict[str, str] | None = None,
) -> str:
    """Build ``{base_url}/{symbol}?period1=..&period2=..&interval=..``.

    ``symbol`` is inserted as-is; instruments whose symbol needs escaping
    (``^GSPC``) already carry the escaped form.
    """
    params: dict[str, str | int] = {
        "period1": to_unix_seconds(start),
        "period2": to_unix_seconds(end),
        "interval": interval,
    }
    for key, value in (extra_params or {}).items():
        params.setdefault(key, value)

    return f"{base_url.rstrip('/')}/{symbol}?{urlencode(params)}"

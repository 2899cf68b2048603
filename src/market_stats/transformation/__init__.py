r"""Transformation Layer: reconcile fetched series before statistics.

```
PriceSeries (instrument A)   PriceSeries (instrument B)
            \                     /
             align() -> AlignedSeriesPair
                         |
                 analytics.statistics
```
"""

from market_stats.transformation.alignment import AlignedSeriesPair, align

__all__ = [
    "AlignedSeriesPair",
    "align",
]

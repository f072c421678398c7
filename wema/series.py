"""Batch helpers feeding stored values through streaming indicators."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import pandas as pd

from .indicators.base import Indicator
from .indicators.window_ema import WindowExponentialMovingAverage


def replay(indicator: Indicator, values: Iterable[Any]) -> list[Any]:
    """Push ``values`` through ``indicator`` in order and return the outputs."""

    return [indicator.update(v) for v in values]


def window_ema_series(
    series: pd.Series,
    k: Any,
    window_size: int,
    *,
    name: str | None = None,
) -> pd.Series:
    """Return the windowed EMA of ``series`` on the same index.

    A fresh indicator is used so repeated calls are independent. The index
    labels are passed through as data point timestamps.
    """

    indicator = WindowExponentialMovingAverage(k, window_size, name=name)
    out = [indicator.update((ts, value)) for ts, value in series.items()]
    return pd.Series(out, index=series.index, name=indicator.name, dtype=float)


__all__ = ["replay", "window_ema_series"]

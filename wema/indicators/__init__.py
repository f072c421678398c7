"""Streaming indicators."""

from .base import Indicator, WarmUpPeriodProvider
from .data_point import IndicatorDataPoint
from .window_ema import WindowExponentialMovingAverage

__all__ = [
    "Indicator",
    "WarmUpPeriodProvider",
    "IndicatorDataPoint",
    "WindowExponentialMovingAverage",
]

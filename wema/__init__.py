"""Public API surface for the wema package."""

from __future__ import annotations

from .indicators import (
    Indicator,
    IndicatorDataPoint,
    WarmUpPeriodProvider,
    WindowExponentialMovingAverage,
)
from .series import replay, window_ema_series
from .exceptions import (
    WemaValidationError,
    InvalidParameterError,
    InvalidWindowSizeError,
    InvalidSmoothingError,
)

__all__ = [
    "Indicator",
    "IndicatorDataPoint",
    "WarmUpPeriodProvider",
    "WindowExponentialMovingAverage",
    "replay",
    "window_ema_series",
    # exceptions
    "WemaValidationError",
    "InvalidParameterError",
    "InvalidWindowSizeError",
    "InvalidSmoothingError",
]

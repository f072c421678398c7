"""Windowed exponential moving average indicator."""

from __future__ import annotations

from collections import deque
from typing import Any

from .base import Indicator
from .data_point import IndicatorDataPoint


class WindowExponentialMovingAverage(Indicator):
    """Exponential moving average recomputed over the last ``window_size`` values.

    Each ready update folds the whole window from oldest to newest with
    ``acc = v * k + acc * (1 - k)`` starting at ``0``, so values that left the
    window have no influence on the result. Until the window fills, the raw
    input is returned.

    Parameters
    ----------
    k:
        Smoothing coefficient applied to the newest value in each step.
        Usually in ``(0, 1]``; not validated.
    window_size:
        Number of trailing values kept. Not validated.
    name:
        Optional name; defaults to ``"WEMA{k}_{window_size}"``.
    """

    def __init__(self, k: Any, window_size: int, *, name: str | None = None) -> None:
        super().__init__(name if name is not None else f"WEMA{k}_{window_size}")
        self._k = k
        self._window_size = window_size
        self._window: deque[Any] = deque()

    @property
    def k(self) -> Any:
        return self._k

    @property
    def window_size(self) -> int:
        return self._window_size

    @property
    def is_ready(self) -> bool:
        return self.samples >= self._window_size

    @property
    def warm_up_period(self) -> int:
        return self._window_size

    @property
    def window(self) -> list[Any]:
        """Buffered values ordered from oldest to newest."""
        return list(self._window)

    def compute_value(self) -> Any:
        k = self._k
        acc: Any = 0
        for v in self._window:
            acc = v * k + acc * (1 - k)
        return acc

    def compute_next_value(self, point: IndicatorDataPoint) -> Any:
        self._window.append(point.value)
        while len(self._window) > self._window_size:
            self._window.popleft()

        if len(self._window) == self._window_size:
            return self.compute_value()
        return point.value

    def reset(self) -> None:
        super().reset()
        self._window.clear()


__all__ = ["WindowExponentialMovingAverage"]

"""Streaming indicator base class."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from .. import metrics
from .data_point import IndicatorDataPoint, as_data_point

logger = logging.getLogger(__name__)

UpdatedCallback = Callable[["Indicator", IndicatorDataPoint], None]


@runtime_checkable
class WarmUpPeriodProvider(Protocol):
    """Indicators that report how many samples they need before becoming ready."""

    @property
    def warm_up_period(self) -> int: ...


class Indicator(ABC):
    """Base class for indicators fed one data point at a time.

    Subclasses implement :meth:`compute_next_value` and :attr:`is_ready`. The
    base class keeps the sample counter, the latest output in
    :attr:`current` and notifies callbacks registered with
    :meth:`on_updated` after every update.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self.samples = 0
        self.current = IndicatorDataPoint(None, 0)
        self._callbacks: list[UpdatedCallback] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    @abstractmethod
    def is_ready(self) -> bool:
        """Return ``True`` once the indicator has seen enough samples."""

    @abstractmethod
    def compute_next_value(self, point: IndicatorDataPoint) -> Any:
        """Return the indicator output for ``point``."""

    def update(self, item: Any) -> Any:
        """Push one input and return the computed output.

        ``item`` may be an :class:`IndicatorDataPoint`, a ``(time, value)``
        pair or a bare number.
        """

        point = as_data_point(item)
        was_ready = self.is_ready
        self.samples += 1
        value = self.compute_next_value(point)
        self.current = IndicatorDataPoint(point.time, value)

        ready = self.is_ready
        if ready and not was_ready:
            logger.debug("%s ready after %d samples", self._name, self.samples)
        metrics.observe_update(self._name, value, ready)

        for callback in list(self._callbacks):
            callback(self, self.current)
        return value

    def on_updated(self, callback: UpdatedCallback) -> UpdatedCallback:
        """Register ``callback`` to run after each update."""

        self._callbacks.append(callback)
        return callback

    def reset(self) -> None:
        """Return the indicator to its freshly constructed state."""

        logger.debug("resetting %s", self._name)
        self.samples = 0
        self.current = IndicatorDataPoint(None, 0)

    def __str__(self) -> str:
        return f"{self._name}: {self.current.value}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, samples={self.samples}, current={self.current.value!r})"


__all__ = ["Indicator", "WarmUpPeriodProvider", "UpdatedCallback"]

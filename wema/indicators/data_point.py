from __future__ import annotations

"""Input record consumed by indicators."""

from dataclasses import dataclass
from numbers import Number
from typing import Any


@dataclass(frozen=True, slots=True)
class IndicatorDataPoint:
    """A single timestamped observation.

    ``time`` is carried through to the indicator output but never used for
    computation.
    """

    time: Any
    value: Any


def as_data_point(item: Any) -> IndicatorDataPoint:
    """Coerce ``item`` into an :class:`IndicatorDataPoint`.

    Accepts a data point, a ``(time, value)`` pair or a bare number.
    """

    if isinstance(item, IndicatorDataPoint):
        return item
    if isinstance(item, tuple):
        if len(item) != 2:
            raise TypeError("tuple input must be a (time, value) pair")
        time, value = item
        return IndicatorDataPoint(time, value)
    if isinstance(item, Number):
        return IndicatorDataPoint(None, item)
    raise TypeError(f"unsupported indicator input: {item!r}")


__all__ = ["IndicatorDataPoint", "as_data_point"]

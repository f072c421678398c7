from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any
from decimal import Decimal
import logging
import math
from numbers import Real

import yaml

from .exceptions import (
    InvalidConfigError,
    InvalidParameterError,
    InvalidSmoothingError,
    InvalidWindowSizeError,
)
from .indicators.window_ema import WindowExponentialMovingAverage

logger = logging.getLogger(__name__)


def parse_window_size(value: Any) -> int:
    """Validate that ``value`` is a positive window size and return it."""
    if value is None:
        raise InvalidWindowSizeError("window_size must not be None")
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidWindowSizeError("window_size must be int")
    if value <= 0:
        raise InvalidWindowSizeError("window_size must be positive")
    return value


def parse_k(value: Any) -> Any:
    """Validate that ``value`` is a finite smoothing coefficient and return it."""
    if value is None:
        raise InvalidSmoothingError("k must not be None")
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise InvalidSmoothingError("k must be a number")
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidSmoothingError("k must be finite")
    elif not math.isfinite(value):
        raise InvalidSmoothingError("k must be finite")
    return value


@dataclass
class IndicatorConfig:
    """Settings for a :class:`WindowExponentialMovingAverage`."""

    k: float = 0.5
    window_size: int = 3
    name: str | None = None

    def build(self) -> WindowExponentialMovingAverage:
        return WindowExponentialMovingAverage(self.k, self.window_size, name=self.name)


@dataclass
class MetricsConfig:
    """Prometheus exporter settings."""

    enabled: bool = False
    port: int = 8000


@dataclass
class WemaConfig:
    """Configuration aggregating indicator and metrics settings."""

    indicator: IndicatorConfig = field(default_factory=IndicatorConfig)
    metrics: MetricsConfig = field(default_factory=MetricsConfig)


def find_config_file(cwd: Path | None = None) -> str | None:
    """Return path to ``wema.yml``/``wema.yaml`` in ``cwd`` if present."""

    base = Path.cwd() if cwd is None else cwd
    for name in ("wema.yml", "wema.yaml"):
        candidate = base / name
        if candidate.is_file():
            return str(candidate)
    return None


def _section(data: dict, key: str, cls: type) -> Any:
    section = data.get(key) or {}
    if not isinstance(section, dict):
        raise InvalidConfigError(f"{key} section must be a mapping")
    allowed = {f.name for f in fields(cls)}
    unknown = sorted(set(section) - allowed)
    if unknown:
        raise InvalidParameterError(f"unknown {key} option(s): {', '.join(unknown)}")
    return cls(**section)


def load_config(path: str) -> WemaConfig:
    """Parse YAML/JSON and populate :class:`WemaConfig`."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            try:
                data = yaml.safe_load(fh) or {}
            except yaml.YAMLError as exc:
                logger.error("Failed to parse configuration file %s: %s", path, exc)
                raise InvalidConfigError(f"Failed to parse configuration file {path}") from exc
    except (FileNotFoundError, OSError) as exc:
        logger.error("Unable to open configuration file %s: %s", path, exc)
        raise

    if not isinstance(data, dict):
        raise InvalidConfigError("wema config must be a mapping")

    unknown = sorted(set(data) - {"indicator", "metrics"})
    if unknown:
        raise InvalidParameterError(f"unknown config section(s): {', '.join(unknown)}")

    indicator_cfg = _section(data, "indicator", IndicatorConfig)
    metrics_cfg = _section(data, "metrics", MetricsConfig)

    parse_k(indicator_cfg.k)
    parse_window_size(indicator_cfg.window_size)
    logger.debug("Loaded configuration from %s", path)
    return WemaConfig(indicator=indicator_cfg, metrics=metrics_cfg)


__all__ = [
    "IndicatorConfig",
    "MetricsConfig",
    "WemaConfig",
    "find_config_file",
    "load_config",
    "parse_k",
    "parse_window_size",
]

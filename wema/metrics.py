from __future__ import annotations

"""Prometheus metrics for indicator updates."""

from prometheus_client import (
    Counter,
    Gauge,
    generate_latest,
    start_http_server,
    REGISTRY as global_registry,
)

# Guard against re-registration when tests reload this module
if "indicator_updates_total" in global_registry._names_to_collectors:
    indicator_updates_total = global_registry._names_to_collectors["indicator_updates_total"]
else:
    indicator_updates_total = Counter(
        "indicator_updates_total",
        "Total number of values pushed into an indicator",
        ["indicator"],
        registry=global_registry,
    )

if "indicator_ready" in global_registry._names_to_collectors:
    indicator_ready = global_registry._names_to_collectors["indicator_ready"]
else:
    indicator_ready = Gauge(
        "indicator_ready",
        "Whether the indicator has completed its warm-up period (1 = ready)",
        ["indicator"],
        registry=global_registry,
    )

if "indicator_last_value" in global_registry._names_to_collectors:
    indicator_last_value = global_registry._names_to_collectors["indicator_last_value"]
else:
    indicator_last_value = Gauge(
        "indicator_last_value",
        "Most recent output value of the indicator",
        ["indicator"],
        registry=global_registry,
    )

# Expose recorded values for tests
indicator_updates_total._vals = {}  # type: ignore[attr-defined]
indicator_ready._vals = {}  # type: ignore[attr-defined]
indicator_last_value._vals = {}  # type: ignore[attr-defined]


def observe_update(name: str, value: object, ready: bool) -> None:
    """Record one indicator update."""

    indicator_updates_total.labels(indicator=name).inc()
    indicator_updates_total._vals[name] = indicator_updates_total._vals.get(name, 0) + 1  # type: ignore[attr-defined]

    flag = 1 if ready else 0
    indicator_ready.labels(indicator=name).set(flag)
    indicator_ready._vals[name] = flag  # type: ignore[attr-defined]

    try:
        numeric = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        return
    indicator_last_value.labels(indicator=name).set(numeric)
    indicator_last_value._vals[name] = numeric  # type: ignore[attr-defined]


def start_metrics_server(port: int = 8000) -> None:
    """Expose metrics via an HTTP server."""
    start_http_server(port, registry=global_registry)


def collect_metrics() -> str:
    """Return metrics in text exposition format."""
    return generate_latest(global_registry).decode()


def reset_metrics() -> None:
    """Reset all metric values for tests."""
    indicator_updates_total.clear()
    indicator_updates_total._vals = {}  # type: ignore[attr-defined]
    indicator_ready.clear()
    indicator_ready._vals = {}  # type: ignore[attr-defined]
    indicator_last_value.clear()
    indicator_last_value._vals = {}  # type: ignore[attr-defined]


__all__ = [
    "indicator_updates_total",
    "indicator_ready",
    "indicator_last_value",
    "observe_update",
    "start_metrics_server",
    "collect_metrics",
    "reset_metrics",
]

"""Test configuration and shared fixtures."""

import pytest

from wema import metrics


@pytest.fixture(autouse=True)
def _reset_metrics():
    metrics.reset_metrics()
    yield
    metrics.reset_metrics()

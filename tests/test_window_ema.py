from decimal import Decimal
from fractions import Fraction
import math

import pytest

from wema.indicators import WindowExponentialMovingAverage, WarmUpPeriodProvider


def test_default_name_combines_k_and_window():
    ind = WindowExponentialMovingAverage(0.5, 3)
    assert ind.name == "WEMA0.5_3"
    assert WindowExponentialMovingAverage(Decimal("0.25"), 10).name == "WEMA0.25_10"


def test_explicit_name():
    ind = WindowExponentialMovingAverage(0.5, 3, name="fast")
    assert ind.name == "fast"
    assert ind.samples == 0
    assert ind.window == []


@pytest.mark.parametrize("window", [2, 3, 5])
def test_warm_up_echoes_input(window: int) -> None:
    ind = WindowExponentialMovingAverage(0.3, window)
    for i, value in enumerate([7.5, -2.0, 11.0, 4.25][: window - 1]):
        assert ind.update(value) == value
        assert not ind.is_ready
        assert ind.samples == i + 1


@pytest.mark.parametrize("window", [1, 2, 4, 7])
def test_ready_from_nth_update(window: int) -> None:
    ind = WindowExponentialMovingAverage(0.5, window)
    assert ind.warm_up_period == window
    flags = []
    for i in range(window + 3):
        ind.update(float(i))
        flags.append(ind.is_ready)
    assert flags == [False] * (window - 1) + [True] * 4


def test_reference_value_decimal():
    ind = WindowExponentialMovingAverage(Decimal("0.5"), 3)
    assert ind.update(Decimal(10)) == Decimal(10)
    assert ind.update(Decimal(20)) == Decimal(20)
    assert ind.update(Decimal(30)) == Decimal("21.25")


def test_reference_value_float():
    ind = WindowExponentialMovingAverage(0.5, 3)
    outputs = [ind.update(v) for v in (10, 20, 30)]
    assert outputs == [10, 20, pytest.approx(21.25)]


def test_window_forgets_evicted_values():
    ind = WindowExponentialMovingAverage(Fraction(1, 2), 3)
    for v in (10, 20, 30):
        ind.update(v)
    result = ind.update(40)
    assert ind.window == [20, 30, 40]

    fresh = WindowExponentialMovingAverage(Fraction(1, 2), 3)
    for v in (20, 30):
        fresh.update(v)
    assert result == fresh.update(40) == Fraction(30)


def test_buffer_holds_last_n_values_in_order():
    ind = WindowExponentialMovingAverage(0.2, 4)
    for v in range(1, 12):
        ind.update(v)
        assert len(ind.window) <= 4
    assert ind.window == [8, 9, 10, 11]


@pytest.mark.parametrize("window", [1, 3, 50])
def test_sample_count_independent_of_window(window: int) -> None:
    ind = WindowExponentialMovingAverage(0.5, window)
    for v in range(17):
        ind.update(v)
    assert ind.samples == 17


def test_window_of_one_scales_by_k():
    ind = WindowExponentialMovingAverage(Decimal("0.4"), 1)
    assert ind.update(Decimal(5)) == Decimal("2.0")
    assert ind.is_ready
    assert ind.update(Decimal(10)) == Decimal("4.0")
    assert ind.window == [Decimal(10)]


def test_full_recompute_matches_weighted_sum():
    k = 0.3
    values = [3.0, 1.0, 4.0, 1.0, 5.0, 9.0, 2.0, 6.0]
    ind = WindowExponentialMovingAverage(k, 5)
    for v in values:
        out = ind.update(v)
    window = values[-5:]
    expected = sum(v * k * (1 - k) ** (len(window) - 1 - i) for i, v in enumerate(window))
    assert out == pytest.approx(expected)
    assert ind.compute_value() == pytest.approx(expected)


def test_k_is_not_validated():
    ind = WindowExponentialMovingAverage(2, 2)
    ind.update(1)
    # acc = 1*2 = 2; acc = 3*2 + 2*(1-2) = 4
    assert ind.update(3) == 4


def test_zero_window_returns_empty_fold():
    ind = WindowExponentialMovingAverage(0.5, 0)
    assert ind.is_ready
    assert ind.update(42.0) == 0
    assert ind.window == []


def test_negative_window_echoes_input():
    ind = WindowExponentialMovingAverage(0.5, -1)
    assert ind.update(3.0) == 3.0
    assert ind.window == []


def test_nan_propagates():
    ind = WindowExponentialMovingAverage(0.5, 2)
    ind.update(float("nan"))
    assert math.isnan(ind.update(1.0))


def test_reset_returns_to_warm_up():
    ind = WindowExponentialMovingAverage(0.5, 2)
    for v in (1.0, 2.0, 3.0):
        ind.update(v)
    assert ind.is_ready
    ind.reset()
    assert ind.samples == 0
    assert not ind.is_ready
    assert ind.window == []
    assert ind.current.value == 0
    assert ind.update(9.0) == 9.0


def test_satisfies_warm_up_protocol():
    assert isinstance(WindowExponentialMovingAverage(0.5, 3), WarmUpPeriodProvider)


def test_configuration_is_read_only():
    ind = WindowExponentialMovingAverage(0.5, 3)
    with pytest.raises(AttributeError):
        ind.k = 0.9
    with pytest.raises(AttributeError):
        ind.window_size = 10
    assert (ind.k, ind.window_size) == (0.5, 3)


def test_eviction_restores_bound_when_several_values_exceed_it():
    ind = WindowExponentialMovingAverage(0.5, 5)
    for v in (1.0, 2.0, 3.0, 4.0, 5.0):
        ind.update(v)
    ind._window_size = 2
    # 6*0.5 + (5*0.5)*0.5
    assert ind.update(6.0) == pytest.approx(4.25)
    assert ind.window == [5.0, 6.0]

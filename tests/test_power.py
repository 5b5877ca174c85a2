import math

import pytest

from statsuite.inference.intervals import calculate_confidence_interval
from statsuite.inference.power import (
    calculate_power,
    calculate_sample_size_for_mean,
    calculate_sample_size_for_proportion,
)
from statsuite.stats.distributions import (
    approximate_inverse_normal_cdf,
    approximate_inverse_t_cdf,
)


def test_sample_size_for_mean():
    # (1.959964 * 10 / 2)^2 = 96.04 -> 97
    assert calculate_sample_size_for_mean(2.0, 10.0) == 97
    assert calculate_sample_size_for_mean(1.0, 5.0, confidence_level=0.99) == 166


def test_sample_size_for_proportion():
    assert calculate_sample_size_for_proportion(0.05) == 385
    assert calculate_sample_size_for_proportion(0.03, 0.5, 0.95) == 1068
    assert calculate_sample_size_for_proportion(0.05, proportion=0.1) < 385


def test_sample_sizes_are_integers():
    assert isinstance(calculate_sample_size_for_mean(3.0, 12.0), int)
    assert isinstance(calculate_sample_size_for_proportion(0.04), int)


def test_power_normal_approximation():
    power = calculate_power(0.5, 32)
    assert 0.80 < power < 0.81
    assert calculate_power(0.0, 50) == pytest.approx(0.025, abs=1e-4)


def test_power_increases_with_sample_size_and_effect():
    assert calculate_power(0.3, 20) < calculate_power(0.3, 80) < calculate_power(0.3, 200)
    assert calculate_power(0.2, 50) < calculate_power(0.6, 50)
    assert 0.0 <= calculate_power(2.0, 100) <= 1.0


def test_confidence_interval_small_sample_uses_t():
    data = [10, 12, 14, 16, 18]
    ci = calculate_confidence_interval(data)
    expected_margin = approximate_inverse_t_cdf(0.975, 4) * math.sqrt(10) / math.sqrt(5)
    assert ci.margin == pytest.approx(expected_margin)
    assert ci.lower == pytest.approx(14 - expected_margin)
    assert ci.upper == pytest.approx(14 + expected_margin)


def test_confidence_interval_known_std_uses_z():
    ci = calculate_confidence_interval([10, 12, 14, 16, 18], known_std=2.0)
    assert ci.margin == pytest.approx(approximate_inverse_normal_cdf(0.975) * 2.0 / math.sqrt(5))


def test_confidence_interval_large_sample_uses_z():
    data = [float(i % 7) for i in range(40)]
    ci = calculate_confidence_interval(data, confidence_level=0.9)
    narrower = calculate_confidence_interval(data, confidence_level=0.8)
    assert ci.lower < ci.upper
    assert narrower.margin < ci.margin


def test_zero_margin_of_error_gives_infinite_size():
    assert calculate_sample_size_for_mean(0.0, 2.0) == math.inf
    assert calculate_sample_size_for_proportion(0.0) == math.inf
    assert math.isnan(calculate_sample_size_for_mean(0.0, 0.0))


def test_power_with_negative_sample_size_is_nan():
    assert math.isnan(calculate_power(0.5, -1))

import math

import pytest

from statsuite.inference.proportions import two_proportion_z_test


def test_ab_test_not_significant():
    result = two_proportion_z_test(85, 1000, 105, 1000)
    pooled = 190 / 2000
    se = math.sqrt(pooled * (1 - pooled) * (2 / 1000))
    assert result.rate_a == pytest.approx(0.085)
    assert result.rate_b == pytest.approx(0.105)
    assert result.difference == pytest.approx(0.02)
    assert result.z_score == pytest.approx(0.02 / se)
    assert 0.1 < result.p_value < 0.15
    assert not result.is_significant
    assert result.relative_lift == pytest.approx(0.02 / 0.085)
    low, high = result.confidence_interval
    assert low < 0 < high


def test_ab_test_significant_lift():
    result = two_proportion_z_test(100, 1000, 150, 1000)
    assert result.z_score > 3
    assert result.p_value < 0.01
    assert result.is_significant
    assert result.effect_size == pytest.approx(
        2 * (math.asin(math.sqrt(0.15)) - math.asin(math.sqrt(0.10)))
    )


def test_ab_test_worse_variant_has_negative_z():
    result = two_proportion_z_test(150, 1000, 100, 1000)
    assert result.z_score < 0
    assert result.difference < 0


def test_ab_test_no_conversions_is_undefined():
    result = two_proportion_z_test(0, 500, 0, 500)
    assert math.isnan(result.z_score)
    assert math.isnan(result.p_value)
    assert math.isnan(result.relative_lift)
    assert not result.is_significant


def test_ab_test_rejects_empty_groups():
    with pytest.raises(ValueError, match="Totals must be positive"):
        two_proportion_z_test(0, 0, 5, 100)


def test_ab_test_rejects_conversions_outside_trials():
    with pytest.raises(ValueError, match="group A must lie in"):
        two_proportion_z_test(120, 100, 5, 100)
    with pytest.raises(ValueError, match="group B must lie in"):
        two_proportion_z_test(5, 100, -1, 100)

import math

import pytest

import statsuite
from statsuite.schema import (
    ClusterResult,
    RegressionResult,
    StatisticalResult,
)


def test_clamped_p_value():
    assert StatisticalResult(result=1.0, p_value=-0.02).clamped_p_value == 0.0
    assert StatisticalResult(result=1.0, p_value=1.3).clamped_p_value == 1.0
    assert StatisticalResult(result=1.0, p_value=0.2).clamped_p_value == 0.2
    assert StatisticalResult(result=1.0).clamped_p_value is None


def test_is_significant_uses_alpha():
    result = StatisticalResult(result=2.1, p_value=0.07)
    assert not result.is_significant()
    assert result.is_significant(alpha=0.1)
    assert not StatisticalResult(result=0.0).is_significant()


def test_result_to_dict():
    record = StatisticalResult(result=1.5, p_value=0.3, interpretation="x").to_dict()
    assert record["result"] == 1.5
    assert record["interpretation"] == "x"


def test_regression_predict():
    fit = RegressionResult(slope=2.0, intercept=1.0, r_squared=1.0, correlation=1.0)
    assert fit.predict(3) == 7.0
    assert list(fit.predict([0, 1])) == [1.0, 3.0]
    assert math.isnan(fit.se_slope)


def test_cluster_sizes():
    result = ClusterResult(assignments=[0, 2, 2], centroids=[[0.0], [1.0], [2.0]])
    assert result.cluster_sizes == [1, 0, 2]


def test_top_level_exports():
    assert statsuite.calculate_mean([2, 4]) == pytest.approx(3.0)
    for name in ("one_sample_t_test", "k_means_cluster", "forecast_series", "gamma"):
        assert hasattr(statsuite, name)

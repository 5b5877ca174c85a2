import math

import numpy as np
import pandas as pd
import pytest

from statsuite.stats.descriptive import (
    calculate_descriptive_stats,
    calculate_kurtosis,
    calculate_mean,
    calculate_median,
    calculate_mode,
    calculate_percentile_from_z,
    calculate_quartiles,
    calculate_skewness,
    calculate_standard_deviation,
    calculate_variance,
    calculate_z_score,
    calculate_z_scores_from_sample,
    summarize_frame,
)

SAMPLES = [
    [2, 4, 6, 8, 10],
    [1.5, -3.2, 7.7, 0.0, 2.2, 9.1],
    [5, 5, 5, 5],
    [100.0, 0.001, 42.0, 42.0, -17.5, 3.3, 8.8, 1e3],
]


def test_mean_of_evenly_spaced_values():
    assert calculate_mean([2, 4, 6, 8, 10]) == 6


def test_mean_lies_between_extremes():
    for data in SAMPLES:
        assert min(data) <= calculate_mean(data) <= max(data)


def test_median_odd_and_even():
    assert calculate_median([3, 1, 2]) == 2
    assert calculate_median([4, 1, 3, 2]) == 2.5


def test_functions_do_not_mutate_input():
    data = [5, 3, 9, 1]
    calculate_median(data)
    calculate_quartiles(data)
    calculate_descriptive_stats(data)
    assert data == [5, 3, 9, 1]


def test_mode_returns_every_most_frequent_value():
    assert calculate_mode([1, 2, 2, 3, 4]) == [2]
    assert calculate_mode([3, 1, 3, 1, 2]) == [1, 3]
    assert calculate_mode([4, 2, 9]) == [2, 4, 9]
    assert calculate_mode([]) == []


def test_variance_sample_and_population():
    data = [2, 4, 4, 4, 5, 5, 7, 9]
    assert math.isclose(calculate_variance(data, sample=False), 4.0)
    assert math.isclose(calculate_variance(data), 32.0 / 7.0)
    assert math.isclose(calculate_standard_deviation(data, sample=False), 2.0)


def test_single_value_sample_variance_is_nan():
    assert math.isnan(calculate_variance([3.0]))
    assert calculate_variance([3.0], sample=False) == 0.0


def test_standard_deviation_non_negative():
    for data in SAMPLES:
        assert calculate_standard_deviation(data) >= 0


def test_positional_quartiles():
    quartiles = calculate_quartiles([7, 1, 3, 5, 9, 11, 13, 15])
    # sorted: 1 3 5 7 9 11 13 15 -> index 2 and index 6
    assert quartiles == {"q1": 5.0, "q3": 13.0}


def test_quartile_ordering():
    for data in SAMPLES:
        q = calculate_quartiles(data)
        assert q["q1"] <= calculate_median(data) <= q["q3"]


def test_skewness_sign_and_symmetry():
    assert calculate_skewness([1, 2, 3, 4, 5]) == pytest.approx(0.0, abs=1e-12)
    assert calculate_skewness([1, 1, 1, 2, 10]) > 0
    assert calculate_skewness([-10, -2, -1, -1, -1]) < 0


def test_skewness_and_kurtosis_match_unbiased_estimators():
    from scipy import stats as sps

    data = [2.1, 3.4, 1.9, 5.6, 4.4, 3.3, 7.8, 2.2]
    assert math.isclose(calculate_skewness(data), sps.skew(data, bias=False), rel_tol=1e-9)
    assert math.isclose(
        calculate_kurtosis(data), sps.kurtosis(data, fisher=True, bias=False), rel_tol=1e-9
    )


def test_kurtosis_too_small_sample_is_not_finite():
    assert not math.isfinite(calculate_kurtosis([1.0, 2.0, 4.0]))


def test_descriptive_stats_record():
    stats = calculate_descriptive_stats([1, 2, 2, 3, 4])
    assert stats.mode == [2]
    assert stats.median == 2
    assert stats.count == 5
    assert stats.min == 1 and stats.max == 4
    assert stats.range == 3
    assert stats.q1 == 2 and stats.q3 == 3
    assert stats.iqr == 1
    assert math.isclose(stats.mean, 2.4)
    assert math.isclose(stats.variance, 1.3)


def test_z_score_and_percentile():
    assert calculate_z_score(130, 100, 15) == 2.0
    assert math.isclose(calculate_percentile_from_z(0.0), 50.0, abs_tol=2e-5)
    assert math.isinf(calculate_z_score(1.0, 0.0, 0.0))


def test_z_scores_from_sample_flags_outliers():
    data = [10, 11, 9, 10, 12, 10, 11, 9, 10, 30]
    summary = calculate_z_scores_from_sample(data)
    assert len(summary.z_scores) == len(data)
    assert summary.outliers == [30.0]
    assert summary.outlier_count == 1
    assert np.isclose(np.mean(summary.z_scores), 0.0)


def test_summarize_frame_numeric_columns_only():
    df = pd.DataFrame(
        {
            "height": [1.6, 1.7, 1.8, np.nan],
            "label": ["a", "b", "c", "d"],
            "score": [10, 20, 20, 30],
        }
    )
    summary = summarize_frame(df)
    assert list(summary.index) == ["height", "score"]
    assert summary.loc["height", "count"] == 3
    assert math.isclose(summary.loc["height", "mean"], 1.7)
    assert summary.loc["score", "mode"] == [20.0]


def test_summarize_frame_without_numeric_data():
    summary = summarize_frame(pd.DataFrame({"label": ["x", "y"]}))
    assert summary.empty
    assert "mean" in summary.columns

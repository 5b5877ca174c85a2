import math

import numpy as np
import pytest
from scipy import stats as sps

from statsuite.errors import LengthMismatchError
from statsuite.inference.hypothesis import (
    chi_square_test,
    one_sample_t_test,
    one_way_anova,
    paired_t_test,
    two_sample_t_test,
)
from statsuite.schema import AnovaResult
from statsuite.stats.distributions import approximate_t_cdf

A = [5.1, 4.9, 5.6, 5.8, 6.0, 5.4, 5.7]
B = [4.2, 4.8, 4.4, 5.0, 4.6, 4.1]


def test_one_sample_statistic_matches_reference():
    result = one_sample_t_test(A, 5.0)
    expected = sps.ttest_1samp(A, 5.0).statistic
    assert math.isclose(result.test_statistic, expected, rel_tol=1e-9)
    assert result.result == result.test_statistic
    assert result.degrees_of_freedom == len(A) - 1


def test_one_sample_p_value_uses_approximate_t():
    result = one_sample_t_test(A, 5.0)
    expected = 2 * (1 - approximate_t_cdf(abs(result.test_statistic), len(A) - 1))
    assert result.p_value == expected


def test_one_sample_interpretation_threshold():
    far = one_sample_t_test([10.1, 10.2, 9.9, 10.0, 10.1, 9.8] * 6, 5.0)
    assert far.p_value < 0.05
    assert far.interpretation == "Significant difference from population mean"

    near = one_sample_t_test([4.0, 6.0, 5.0, 3.0, 7.0] * 7, 5.0)
    assert near.p_value >= 0.05
    assert near.interpretation == "No significant difference from population mean"


def test_two_sample_pooled_statistic_matches_reference():
    result = two_sample_t_test(A, B)
    ref = sps.ttest_ind(A, B, equal_var=True)
    assert math.isclose(result.test_statistic, ref.statistic, rel_tol=1e-9)
    assert result.degrees_of_freedom == len(A) + len(B) - 2


def test_two_sample_welch_statistic_and_df():
    result = two_sample_t_test(A, B, equal_variances=False)
    ref = sps.ttest_ind(A, B, equal_var=False)
    assert math.isclose(result.test_statistic, ref.statistic, rel_tol=1e-9)

    v1 = np.var(A, ddof=1) / len(A)
    v2 = np.var(B, ddof=1) / len(B)
    df = (v1 + v2) ** 2 / (v1**2 / (len(A) - 1) + v2**2 / (len(B) - 1))
    assert math.isclose(result.degrees_of_freedom, df, rel_tol=1e-9)


@pytest.mark.parametrize("equal_variances", [True, False])
def test_two_sample_statistic_antisymmetric(equal_variances):
    ab = two_sample_t_test(A, B, equal_variances)
    ba = two_sample_t_test(B, A, equal_variances)
    assert ab.test_statistic == -ba.test_statistic
    assert ab.p_value == ba.p_value


def test_paired_reduces_to_one_sample_on_differences():
    before = [200, 190, 210, 205, 198, 215]
    after = [192, 188, 201, 204, 190, 207]
    paired = paired_t_test(before, after)
    diffs = [b - a for b, a in zip(before, after)]
    single = one_sample_t_test(diffs, 0)
    assert paired == single


def test_paired_length_mismatch_raises():
    with pytest.raises(LengthMismatchError, match="equal lengths"):
        paired_t_test([1, 2, 3], [1, 2])


def test_single_observation_warns_and_returns_nan():
    with pytest.warns(UserWarning, match="at least 2"):
        result = one_sample_t_test([4.0], 3.0)
    assert math.isnan(result.test_statistic)


def test_anova_separated_groups():
    result = one_way_anova([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    assert isinstance(result, AnovaResult)
    assert result.test_statistic == pytest.approx(27.0)
    assert result.degrees_of_freedom == 2
    assert result.df_within == 6
    assert result.ss_between == pytest.approx(54.0)
    assert result.ss_within == pytest.approx(6.0)
    assert result.p_value < 0.05
    assert result.interpretation == "Significant differences between groups"


def test_anova_statistic_matches_reference():
    groups = [[4.1, 5.0, 4.6, 5.2], [5.5, 6.1, 5.8], [4.9, 5.3, 5.1, 5.7, 5.0]]
    result = one_way_anova(groups)
    assert math.isclose(result.test_statistic, sps.f_oneway(*groups).statistic, rel_tol=1e-9)


def test_anova_overlapping_groups_not_significant():
    result = one_way_anova([[1, 5, 9], [2, 5, 8], [3, 5, 7]])
    assert result.test_statistic == 0.0
    assert result.p_value == 1.0
    assert result.interpretation == "No significant differences between groups"


def test_anova_warns_on_tiny_group():
    with pytest.warns(UserWarning, match="Group 1"):
        one_way_anova([[1.0, 2.0, 3.0], [4.0]])


def test_chi_square_goodness_of_fit():
    result = chi_square_test([10, 15, 8, 12], [11.25, 11.25, 11.25, 11.25])
    assert result.test_statistic == pytest.approx(26.75 / 11.25)
    assert result.degrees_of_freedom == 3
    # small-df CDF is the linear clamp x / (2 df)
    assert result.p_value == pytest.approx(1 - (26.75 / 11.25) / 6)
    assert result.interpretation == "No significant deviation from expected"


def test_chi_square_strong_deviation():
    result = chi_square_test([50, 5, 5], [20, 20, 20])
    assert result.p_value == 0.0
    assert result.interpretation == "Significant deviation from expected"


def test_chi_square_length_mismatch_raises():
    with pytest.raises(LengthMismatchError, match="same length"):
        chi_square_test([1, 2, 3], [1, 2])


def test_chi_square_zero_expected_is_infinite():
    with pytest.warns(UserWarning, match="positive"):
        result = chi_square_test([1, 2], [0, 3])
    assert math.isinf(result.test_statistic)

"""Classical hypothesis tests: t-tests, one-way ANOVA and chi-square.

Each test returns a :class:`~statsuite.schema.StatisticalResult` whose
``interpretation`` compares the p-value with the package significance level
(0.05). The p-values come from the approximate distribution functions in
:mod:`statsuite.stats.distributions` and inherit their accuracy limits.

Inputs are validated only where a partial computation would be meaningless
(paired and chi-square inputs of unequal length). Small or degenerate
samples still return a result, with a ``UserWarning`` and ``nan``/``inf``
fields where the arithmetic breaks down.
"""

from __future__ import annotations

import warnings
from typing import Sequence

import numpy as np

from ..config import SIGNIFICANCE_LEVEL
from .._numeric import errstate
from ..errors import require_same_length
from ..schema import AnovaResult, StatisticalResult
from ..stats.descriptive import (
    calculate_mean,
    calculate_standard_deviation,
    calculate_variance,
)
from ..stats.distributions import (
    approximate_chi_square_cdf,
    approximate_f_cdf,
    approximate_t_cdf,
)

T_TEST_ASSUMPTIONS = (
    "Observations are independent",
    "Data are approximately normally distributed",
)
ANOVA_ASSUMPTIONS = T_TEST_ASSUMPTIONS + ("Groups have equal variances",)
CHI_SQUARE_ASSUMPTIONS = (
    "Observations are independent",
    "Expected frequencies are positive (ideally at least 5)",
)


def _interpret(p_value: float, significant: str, not_significant: str) -> str:
    return significant if p_value < SIGNIFICANCE_LEVEL else not_significant


def _warn_small_sample(n: int, label: str) -> None:
    if n < 2:
        warnings.warn(
            f"{label} has {n} observation(s); at least 2 are required for a "
            f"sample variance, results will be nan.",
            UserWarning,
            stacklevel=3,
        )


def _two_tailed_t_p_value(t_statistic: float, df: float) -> float:
    return 2.0 * (1.0 - approximate_t_cdf(abs(t_statistic), df))


def one_sample_t_test(
    data: Sequence[float], population_mean: float
) -> StatisticalResult:
    """Test whether a sample mean differs from a hypothesized population mean.

    Args:
        data (Sequence[float]): Sample with at least two observations.
        population_mean (float): Hypothesized mean ``μ0``.

    Returns:
        StatisticalResult: ``t = (x̄ − μ0) / (s / √n)`` with ``df = n − 1`` and
        two-tailed ``p = 2 (1 − T(|t|, df))``.
    """
    n = len(data)
    _warn_small_sample(n, "Sample")
    sample_mean = calculate_mean(data)
    sample_std = calculate_standard_deviation(data)
    with errstate():
        standard_error = np.float64(sample_std) / np.sqrt(n)
        t_statistic = float((sample_mean - population_mean) / standard_error)
    degrees_of_freedom = n - 1
    p_value = _two_tailed_t_p_value(t_statistic, degrees_of_freedom)

    return StatisticalResult(
        result=t_statistic,
        test_statistic=t_statistic,
        degrees_of_freedom=degrees_of_freedom,
        p_value=p_value,
        interpretation=_interpret(
            p_value,
            "Significant difference from population mean",
            "No significant difference from population mean",
        ),
        assumptions=T_TEST_ASSUMPTIONS,
    )


def two_sample_t_test(
    data1: Sequence[float],
    data2: Sequence[float],
    equal_variances: bool = True,
) -> StatisticalResult:
    """Compare the means of two independent samples.

    Args:
        data1 (Sequence[float]): First sample.
        data2 (Sequence[float]): Second sample.
        equal_variances (bool, optional): Use the pooled-variance Student
            test when True (``df = n1 + n2 − 2``); otherwise Welch's test with
            Welch-Satterthwaite degrees of freedom. Defaults to ``True``.

    Returns:
        StatisticalResult: ``t = (mean1 − mean2) / SE``. Swapping the two
        samples negates the statistic and leaves the p-value unchanged.
    """
    n1 = len(data1)
    n2 = len(data2)
    _warn_small_sample(n1, "First sample")
    _warn_small_sample(n2, "Second sample")
    mean1 = calculate_mean(data1)
    mean2 = calculate_mean(data2)
    var1 = calculate_variance(data1)
    var2 = calculate_variance(data2)

    with errstate():
        if equal_variances:
            pooled_variance = np.float64((n1 - 1) * var1 + (n2 - 1) * var2) / (n1 + n2 - 2)
            standard_error = np.sqrt(pooled_variance * (1.0 / n1 + 1.0 / n2))
            degrees_of_freedom = float(n1 + n2 - 2)
        else:
            se1 = np.float64(var1) / n1
            se2 = np.float64(var2) / n2
            standard_error = np.sqrt(se1 + se2)
            degrees_of_freedom = float(
                (se1 + se2) ** 2 / (se1**2 / (n1 - 1) + se2**2 / (n2 - 1))
            )
        t_statistic = float((mean1 - mean2) / standard_error)

    p_value = _two_tailed_t_p_value(t_statistic, degrees_of_freedom)

    assumptions = T_TEST_ASSUMPTIONS
    if equal_variances:
        assumptions = assumptions + ("Both groups have equal variances",)

    return StatisticalResult(
        result=t_statistic,
        test_statistic=t_statistic,
        degrees_of_freedom=degrees_of_freedom,
        p_value=p_value,
        interpretation=_interpret(
            p_value,
            "Significant difference between groups",
            "No significant difference between groups",
        ),
        assumptions=assumptions,
    )


def paired_t_test(data1: Sequence[float], data2: Sequence[float]) -> StatisticalResult:
    """Paired t-test, reduced to a one-sample test of the differences against 0.

    Raises:
        LengthMismatchError: If the two samples differ in length.
    """
    require_same_length(data1, data2, "Paired data must have equal lengths")
    differences = [float(a) - float(b) for a, b in zip(data1, data2)]
    return one_sample_t_test(differences, 0.0)


def one_way_anova(groups: Sequence[Sequence[float]]) -> AnovaResult:
    """One-way analysis of variance across ``k`` groups.

    Args:
        groups (Sequence[Sequence[float]]): At least two groups, each with
            at least two observations. This is not enforced; violating it
            gives a ``UserWarning`` and ``nan``/``inf`` statistics.

    Returns:
        AnovaResult: ``F = MS_between / MS_within`` with
        ``df_between = k − 1`` (reported as ``degrees_of_freedom``),
        ``df_within = n − k`` and ``p = 1 − F_cdf(F, df_between, df_within)``,
        plus the sums of squares and mean squares.

    Note:
        The F CDF is a crude approximation that saturates at 1 for
        ``F >= 10``, so clearly separated groups report ``p = 0``.
    """
    k = len(groups)
    if k < 2:
        warnings.warn(
            f"ANOVA needs at least 2 groups, got {k}.", UserWarning, stacklevel=2
        )
    for index, group in enumerate(groups):
        if len(group) < 2:
            warnings.warn(
                f"Group {index} has {len(group)} observation(s); at least 2 are "
                f"expected.",
                UserWarning,
                stacklevel=2,
            )

    all_data = [float(v) for group in groups for v in group]
    grand_mean = calculate_mean(all_data)
    n = len(all_data)

    ss_between = 0.0
    ss_within = 0.0
    for group in groups:
        arr = np.asarray(group, dtype=float)
        group_mean = calculate_mean(arr)
        ss_between += arr.size * (group_mean - grand_mean) ** 2
        ss_within += float(np.sum((arr - group_mean) ** 2))

    df_between = k - 1
    df_within = n - k
    with errstate():
        ms_between = float(np.float64(ss_between) / df_between)
        ms_within = float(np.float64(ss_within) / df_within)
        f_statistic = float(np.float64(ms_between) / ms_within)

    p_value = 1.0 - approximate_f_cdf(f_statistic, df_between, df_within)

    return AnovaResult(
        result=f_statistic,
        test_statistic=f_statistic,
        degrees_of_freedom=df_between,
        p_value=p_value,
        interpretation=_interpret(
            p_value,
            "Significant differences between groups",
            "No significant differences between groups",
        ),
        assumptions=ANOVA_ASSUMPTIONS,
        ss_between=float(ss_between),
        ss_within=float(ss_within),
        df_within=df_within,
        ms_between=ms_between,
        ms_within=ms_within,
    )


def chi_square_test(
    observed: Sequence[float], expected: Sequence[float]
) -> StatisticalResult:
    """Chi-square goodness-of-fit test.

    Args:
        observed (Sequence[float]): Observed counts per category.
        expected (Sequence[float]): Expected counts per category. Every value
            should be positive; zero expected counts make the statistic
            infinite (a ``UserWarning`` is emitted).

    Returns:
        StatisticalResult: ``χ² = Σ (O − E)² / E`` with ``df = k − 1`` and
        ``p = 1 − χ²_cdf(χ², df)``.

    Raises:
        LengthMismatchError: If ``observed`` and ``expected`` differ in length.

    Note:
        Below 30 degrees of freedom the chi-square CDF is the linear
        placeholder ``min(1, max(0, χ²/(2 df)))``, so p-values are coarse.
    """
    require_same_length(
        observed, expected, "Observed and expected arrays must have the same length"
    )
    obs = np.asarray(observed, dtype=float)
    exp = np.asarray(expected, dtype=float)
    if np.any(exp <= 0):
        warnings.warn(
            "Expected frequencies must be positive; the chi-square statistic "
            "will be infinite or nan.",
            UserWarning,
            stacklevel=2,
        )

    with errstate():
        chi_square = float(np.sum((obs - exp) ** 2 / exp))
    degrees_of_freedom = len(obs) - 1
    p_value = 1.0 - approximate_chi_square_cdf(chi_square, degrees_of_freedom)

    return StatisticalResult(
        result=chi_square,
        test_statistic=chi_square,
        degrees_of_freedom=degrees_of_freedom,
        p_value=p_value,
        interpretation=_interpret(
            p_value,
            "Significant deviation from expected",
            "No significant deviation from expected",
        ),
        assumptions=CHI_SQUARE_ASSUMPTIONS,
    )

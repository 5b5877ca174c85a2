"""
Inferential statistics built on the numerical core.

Modules:
    hypothesis:
        One-sample, two-sample (pooled or Welch) and paired t-tests, one-way
        ANOVA and the chi-square goodness-of-fit test.

    intervals:
        Confidence interval for a mean (z or approximate t critical value).

    proportions:
        Two-proportion z-test for A/B conversion experiments.

    power:
        Sample sizes for estimating a mean or a proportion and the
        normal-approximation power of a z-test.

Interpretation Guardrails:
    p-values are derived from approximate CDFs. For fewer than 30 degrees of
    freedom the t, chi-square and F approximations are rough, so the
    p-values should be read as indicative rather than exact.
"""

from .hypothesis import (
    chi_square_test,
    one_sample_t_test,
    one_way_anova,
    paired_t_test,
    two_sample_t_test,
)
from .intervals import calculate_confidence_interval
from .power import (
    calculate_power,
    calculate_sample_size_for_mean,
    calculate_sample_size_for_proportion,
)
from .proportions import two_proportion_z_test

__all__ = [
    "one_sample_t_test",
    "two_sample_t_test",
    "paired_t_test",
    "one_way_anova",
    "chi_square_test",
    "calculate_confidence_interval",
    "two_proportion_z_test",
    "calculate_sample_size_for_mean",
    "calculate_sample_size_for_proportion",
    "calculate_power",
]

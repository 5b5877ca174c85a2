"""
Numerical core of statsuite.

This subpackage provides the special functions, distribution
approximations, descriptive statistics and regression routines that the
inference, clustering and forecasting modules build on. All functions
operate on sequences and primitive types and hold no state between calls.

Modules:
    special:
        Lanczos approximation of the Gamma function.

    distributions:
        Normal, Student-t, chi-square and F CDF approximations, their
        inverses where needed, and densities built on ``gamma``.

    descriptive:
        Mean, median, mode, variance, quartiles, skewness, kurtosis, the
        combined descriptive record, z-scores and per-column DataFrame
        summaries.

    regression:
        Pearson correlation and closed-form OLS straight-line fits.

Design Principle:
    This subpackage has no dependencies on inference/, clustering or
    forecasting. It provides pure numerical utilities that can be
    independently tested.
"""

from .descriptive import (
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
from .distributions import (
    approximate_chi_square_cdf,
    approximate_f_cdf,
    approximate_inverse_normal_cdf,
    approximate_inverse_t_cdf,
    approximate_normal_cdf,
    approximate_t_cdf,
    chi_square_pdf,
    f_pdf,
    normal_pdf,
    t_pdf,
)
from .regression import calculate_pearson_correlation, linear_regression
from .special import gamma

__all__ = [
    "gamma",
    "approximate_normal_cdf",
    "approximate_inverse_normal_cdf",
    "approximate_t_cdf",
    "approximate_inverse_t_cdf",
    "approximate_chi_square_cdf",
    "approximate_f_cdf",
    "normal_pdf",
    "t_pdf",
    "chi_square_pdf",
    "f_pdf",
    "calculate_mean",
    "calculate_median",
    "calculate_mode",
    "calculate_variance",
    "calculate_standard_deviation",
    "calculate_quartiles",
    "calculate_skewness",
    "calculate_kurtosis",
    "calculate_descriptive_stats",
    "calculate_z_score",
    "calculate_percentile_from_z",
    "calculate_z_scores_from_sample",
    "summarize_frame",
    "calculate_pearson_correlation",
    "linear_regression",
]

"""
A Python package of statistical calculators built on a shared numeric core.

Callers pass plain sequences of numbers and receive immutable result
records. Nothing is cached and no state is kept between calls, so every
function is safe to call concurrently.

Modules:
    - stats: special functions, distribution approximations, descriptive
      statistics, correlation and regression.
    - inference: t-tests, ANOVA, chi-square, confidence intervals, the A/B
      proportion test, sample size and power.
    - clustering: k-means with Euclidean distance.
    - forecasting: moving-average, exponential-smoothing and linear-trend
      forecasts with accuracy metrics and decomposition.
    - schema: result records.
    - config: package-wide defaults.
"""

__version__ = "1.0.0"

from .clustering import k_means_cluster
from .errors import LengthMismatchError
from .forecasting import (
    decompose_series,
    exponential_smoothing_forecast,
    forecast_accuracy,
    forecast_series,
    linear_trend_forecast,
    moving_average_forecast,
)
from .inference import (
    calculate_confidence_interval,
    calculate_power,
    calculate_sample_size_for_mean,
    calculate_sample_size_for_proportion,
    chi_square_test,
    one_sample_t_test,
    one_way_anova,
    paired_t_test,
    two_proportion_z_test,
    two_sample_t_test,
)
from .schema import (
    AnovaResult,
    ClusterResult,
    ConfidenceInterval,
    DescriptiveStats,
    ForecastResult,
    ProportionTestResult,
    RegressionResult,
    StatisticalResult,
)
from .stats import (
    approximate_chi_square_cdf,
    approximate_f_cdf,
    approximate_inverse_normal_cdf,
    approximate_inverse_t_cdf,
    approximate_normal_cdf,
    approximate_t_cdf,
    calculate_descriptive_stats,
    calculate_mean,
    calculate_median,
    calculate_mode,
    calculate_pearson_correlation,
    calculate_quartiles,
    calculate_standard_deviation,
    calculate_variance,
    calculate_z_score,
    gamma,
    linear_regression,
)

__all__ = [
    # Numeric core
    "gamma",
    "approximate_normal_cdf",
    "approximate_inverse_normal_cdf",
    "approximate_t_cdf",
    "approximate_inverse_t_cdf",
    "approximate_chi_square_cdf",
    "approximate_f_cdf",
    "calculate_mean",
    "calculate_median",
    "calculate_mode",
    "calculate_variance",
    "calculate_standard_deviation",
    "calculate_quartiles",
    "calculate_descriptive_stats",
    "calculate_z_score",
    "calculate_pearson_correlation",
    "linear_regression",
    # Inference
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
    # Clustering and forecasting
    "k_means_cluster",
    "forecast_series",
    "moving_average_forecast",
    "exponential_smoothing_forecast",
    "linear_trend_forecast",
    "forecast_accuracy",
    "decompose_series",
    # Records and errors
    "StatisticalResult",
    "AnovaResult",
    "DescriptiveStats",
    "RegressionResult",
    "ConfidenceInterval",
    "ProportionTestResult",
    "ClusterResult",
    "ForecastResult",
    "LengthMismatchError",
]

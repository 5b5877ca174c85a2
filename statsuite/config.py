"""Default parameters shared by the statistical routines."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AnalysisConfig:
    """Container for package-wide default parameters.

    Attributes:
        SIGNIFICANCE_LEVEL: Threshold used by the embedded interpretation
            strings of every hypothesis test. Callers may compare the
            returned p-value against a different alpha themselves.
        CONFIDENCE_LEVEL: Default confidence level for intervals and
            sample-size calculations.
        KMEANS_MAX_ITERATIONS: Iteration cap for k-means.
        KMEANS_INIT_HIGH: Upper bound (exclusive) of the uniform range used
            for random centroid initialisation; the lower bound is 0.
        Z_OUTLIER_THRESHOLD: ``|z|`` above which a sample value is flagged.
        FORECAST_WINDOW: Default moving-average window.
        FORECAST_ALPHA: Default exponential-smoothing factor.
        AB_CRITICAL_VALUE: Critical value for the difference-in-proportions
            interval of the A/B test (95% two-sided).
        LARGE_DF: Degrees of freedom from which the t and chi-square
            approximations switch to the normal distribution.
    """

    SIGNIFICANCE_LEVEL: float = 0.05
    CONFIDENCE_LEVEL: float = 0.95
    KMEANS_MAX_ITERATIONS: int = 100
    KMEANS_INIT_HIGH: float = 10.0
    Z_OUTLIER_THRESHOLD: float = 2.0
    FORECAST_WINDOW: int = 3
    FORECAST_ALPHA: float = 0.3
    AB_CRITICAL_VALUE: float = 1.96
    LARGE_DF: int = 30


CONFIG = AnalysisConfig()

SIGNIFICANCE_LEVEL = CONFIG.SIGNIFICANCE_LEVEL
CONFIDENCE_LEVEL = CONFIG.CONFIDENCE_LEVEL
LARGE_DF = CONFIG.LARGE_DF

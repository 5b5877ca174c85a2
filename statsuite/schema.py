"""Define the result records returned by the statistical routines.

Every record is an immutable dataclass created fresh by a single call; no
record is cached or shared between calls.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional, Tuple, Union

import numpy as np
import pandas as pd

from .config import SIGNIFICANCE_LEVEL

ResultValue = Union[float, List[float], Dict[str, float]]


@dataclass(frozen=True)
class StatisticalResult:
    """Outcome of a hypothesis test.

    Attributes:
        result: Primary value of the test. For every test in this package it
            equals ``test_statistic``.
        test_statistic: t, F or chi-square statistic.
        degrees_of_freedom: Degrees of freedom used for the p-value. For
            ANOVA this is the between-groups df.
        p_value: Raw p-value from the approximate distribution functions.
            The approximations can push it slightly outside [0, 1] at the
            extremes; use ``clamped_p_value`` when a probability is needed.
        confidence: Confidence level associated with the result, if any.
        critical_value: Critical value of the statistic, if computed.
        interpretation: Human-readable verdict at the default significance
            level.
        assumptions: Assumptions the test relies on.
    """

    result: ResultValue
    test_statistic: Optional[float] = None
    degrees_of_freedom: Optional[float] = None
    p_value: Optional[float] = None
    confidence: Optional[float] = None
    critical_value: Optional[float] = None
    interpretation: Optional[str] = None
    assumptions: Tuple[str, ...] = ()

    @property
    def clamped_p_value(self) -> Optional[float]:
        if self.p_value is None:
            return None
        if math.isnan(self.p_value):
            return math.nan
        return min(1.0, max(0.0, float(self.p_value)))

    def is_significant(self, alpha: float = SIGNIFICANCE_LEVEL) -> bool:
        """Compare the p-value against a caller-chosen alpha."""
        p = self.clamped_p_value
        return p is not None and not math.isnan(p) and p < alpha

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class AnovaResult(StatisticalResult):
    """One-way ANOVA outcome with the intermediate sums of squares."""

    ss_between: float = math.nan
    ss_within: float = math.nan
    df_within: float = math.nan
    ms_between: float = math.nan
    ms_within: float = math.nan


@dataclass(frozen=True)
class DescriptiveStats:
    """Fixed summary of a sample.

    ``mode`` holds every value that reaches the maximum frequency, so a
    multimodal sample yields more than one entry. ``variance`` and
    ``standard_deviation`` use the sample (n - 1) denominator.
    """

    count: int
    mean: float
    median: float
    mode: List[float]
    variance: float
    standard_deviation: float
    range: float
    min: float
    max: float
    q1: float
    q3: float
    iqr: float
    skewness: float
    kurtosis: float

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class ZScoreSummary:
    """Per-value z-scores of a sample and the values flagged as outliers."""

    mean: float
    standard_deviation: float
    z_scores: List[float]
    outliers: List[float]
    threshold: float

    @property
    def outlier_count(self) -> int:
        return len(self.outliers)


@dataclass(frozen=True)
class RegressionResult:
    """Ordinary least-squares fit of ``y = slope * x + intercept``."""

    slope: float
    intercept: float
    r_squared: float
    correlation: float
    n: int = 0
    se_slope: float = math.nan
    se_intercept: float = math.nan

    def predict(self, x):
        """Evaluate the fitted line at ``x`` (scalar or array-like)."""
        if np.ndim(x) == 0:
            return self.slope * float(x) + self.intercept
        return self.slope * np.asarray(x, dtype=float) + self.intercept


@dataclass(frozen=True)
class ConfidenceInterval:
    lower: float
    upper: float
    margin: float


@dataclass(frozen=True)
class ProportionTestResult:
    """Two-proportion (A/B) z-test outcome.

    Rates are fractions in [0, 1]; ``difference`` is ``rate_b - rate_a`` and
    ``confidence_interval`` bounds that difference.
    """

    rate_a: float
    rate_b: float
    difference: float
    z_score: float
    p_value: float
    effect_size: float
    is_significant: bool
    confidence_interval: Tuple[float, float]
    relative_lift: float


@dataclass(frozen=True)
class ClusterResult:
    """K-means output.

    ``assignments[i]`` is the cluster label (in ``[0, k)``) of input point
    ``i``. ``iterations`` counts the assignment passes that were executed,
    and ``converged`` is False when the iteration cap stopped the loop.
    """

    assignments: List[int]
    centroids: List[List[float]]
    iterations: int = 0
    converged: bool = False

    @property
    def cluster_sizes(self) -> List[int]:
        return [self.assignments.count(i) for i in range(len(self.centroids))]


@dataclass(frozen=True)
class ForecastAccuracy:
    mae: float
    mse: float
    rmse: float


@dataclass(frozen=True)
class ForecastResult:
    """Forecast values plus in-sample accuracy and an optional decomposition."""

    method: str
    forecast: List[float]
    metrics: ForecastAccuracy
    decomposition: Optional[pd.DataFrame] = field(default=None, compare=False)

"""Confidence intervals for a population mean."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from .._numeric import errstate
from ..config import CONFIDENCE_LEVEL, LARGE_DF
from ..schema import ConfidenceInterval
from ..stats.descriptive import calculate_mean, calculate_standard_deviation
from ..stats.distributions import (
    approximate_inverse_normal_cdf,
    approximate_inverse_t_cdf,
)


def calculate_confidence_interval(
    data: Sequence[float],
    confidence_level: float = CONFIDENCE_LEVEL,
    known_std: Optional[float] = None,
) -> ConfidenceInterval:
    """Two-sided confidence interval for the mean of ``data``.

    Args:
        data (Sequence[float]): Sample of observations.
        confidence_level (float, optional): Coverage in (0, 1). Defaults to
            ``0.95``.
        known_std (float, optional): Known population standard deviation.
            When given (and non-zero) the z critical value is used and the
            sample standard deviation is ignored.

    Returns:
        ConfidenceInterval: ``mean ± critical · σ/√n``. The critical value is
        the normal quantile when ``known_std`` is set or ``n >= 30``, and the
        approximate t quantile with ``n − 1`` df otherwise.
    """
    n = len(data)
    mean = calculate_mean(data)
    std = known_std if known_std else calculate_standard_deviation(data)
    alpha = 1.0 - confidence_level

    if known_std or n >= LARGE_DF:
        critical_value = approximate_inverse_normal_cdf(1.0 - alpha / 2.0)
    else:
        critical_value = approximate_inverse_t_cdf(1.0 - alpha / 2.0, n - 1)

    with errstate():
        standard_error = np.float64(std) / np.sqrt(n)
    margin = float(critical_value * standard_error)

    return ConfidenceInterval(lower=mean - margin, upper=mean + margin, margin=margin)

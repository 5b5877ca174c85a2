"""Provide correlation and simple linear regression utilities.

This module supports:
- Pearson correlation from raw sums, and
- ordinary least-squares straight-line fits with goodness-of-fit and
  standard-error diagnostics.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from .._numeric import errstate
from ..errors import require_same_length
from ..schema import RegressionResult


def calculate_pearson_correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """Compute the Pearson product-moment correlation coefficient.

    Args:
        x (Sequence[float]): First variable.
        y (Sequence[float]): Second variable, paired element-wise with ``x``.

    Returns:
        float: ``r = (nΣxy − ΣxΣy) / √((nΣx² − (Σx)²)(nΣy² − (Σy)²))``.
        ``nan`` when either variable has zero variance.

    Raises:
        LengthMismatchError: If ``x`` and ``y`` differ in length.

    Note:
        The raw-sums formula is used as-is; for data with a very large mean
        relative to its spread it loses precision compared to a centered
        computation.
    """
    require_same_length(x, y, "Arrays must have the same length")
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    n = float(x_arr.size)

    sum_x = float(np.sum(x_arr))
    sum_y = float(np.sum(y_arr))
    sum_xy = float(np.sum(x_arr * y_arr))
    sum_x2 = float(np.sum(x_arr * x_arr))
    sum_y2 = float(np.sum(y_arr * y_arr))

    numerator = n * sum_xy - sum_x * sum_y
    with errstate():
        denominator = np.sqrt(
            np.float64(n * sum_x2 - sum_x * sum_x) * (n * sum_y2 - sum_y * sum_y)
        )
        return float(numerator / denominator)


def linear_regression(x: Sequence[float], y: Sequence[float]) -> RegressionResult:
    """Fit an ordinary least-squares straight line ``y = slope * x + intercept``.

    Args:
        x (Sequence[float]): Independent variable.
        y (Sequence[float]): Dependent variable, paired element-wise with ``x``.

    Returns:
        RegressionResult: Slope, intercept, ``r_squared = 1 − SSres/SStot``,
        Pearson ``correlation``, the number of pairs ``n`` and the standard
        errors of slope and intercept.

    Raises:
        LengthMismatchError: If ``x`` and ``y`` differ in length.

    Note:
        Plain closed-form OLS: no regularization and no outlier handling.
        A constant ``x`` gives ``nan`` slope and intercept, a constant ``y``
        gives ``nan`` for ``r_squared``. Standard errors are ``nan`` unless
        there are more than two pairs and ``x`` has spread.

    References:
        Ordinary least squares linear regression.
    """
    require_same_length(x, y, "Arrays must have the same length")
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    n = int(x_arr.size)

    sum_x = float(np.sum(x_arr))
    sum_y = float(np.sum(y_arr))
    sum_xy = float(np.sum(x_arr * y_arr))
    sum_x2 = float(np.sum(x_arr * x_arr))

    with errstate():
        slope = np.float64(n * sum_xy - sum_x * sum_y) / (n * sum_x2 - sum_x * sum_x)
        intercept = (sum_y - slope * sum_x) / np.float64(n)

        mean_y = sum_y / np.float64(n)
        sst = float(np.sum((y_arr - mean_y) ** 2))
        resid = y_arr - (slope * x_arr + intercept)
        sse = float(np.sum(resid**2))
        r_squared = 1.0 - np.float64(sse) / sst

    dof = n - 2
    se_slope = math.nan
    se_intercept = math.nan
    if dof > 0:
        xbar = sum_x / n
        ssxx = float(np.sum((x_arr - xbar) ** 2))
        if ssxx > 0:
            mse = sse / dof
            se_slope = float(np.sqrt(mse / ssxx))
            se_intercept = float(np.sqrt(mse * (1.0 / n + (xbar**2) / ssxx)))

    return RegressionResult(
        slope=float(slope),
        intercept=float(intercept),
        r_squared=float(r_squared),
        correlation=calculate_pearson_correlation(x_arr, y_arr),
        n=n,
        se_slope=se_slope,
        se_intercept=se_intercept,
    )

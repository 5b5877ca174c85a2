"""Simple univariate time-series forecasting and decomposition.

Three forecasting methods are available:
- ``moving_average``: the mean of the last ``window`` values, held flat.
- ``exponential_smoothing``: the simple-exponential-smoothing level, held flat.
- ``linear_trend``: an OLS line on the observation index, extrapolated.

In-sample accuracy (MAE, MSE, RMSE) is measured against one-step
predictions built the same way for each method. The series is assumed to
be evenly spaced; timestamps are the caller's concern.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

from .config import CONFIG
from .errors import require_same_length
from .schema import ForecastAccuracy, ForecastResult
from .stats.descriptive import calculate_mean
from .stats.regression import linear_regression

logger = logging.getLogger(__name__)

MOVING_AVERAGE = "moving_average"
EXPONENTIAL_SMOOTHING = "exponential_smoothing"
LINEAR_TREND = "linear_trend"
METHODS = (MOVING_AVERAGE, EXPONENTIAL_SMOOTHING, LINEAR_TREND)

MIN_FORECAST_POINTS = 3
MIN_DECOMPOSITION_POINTS = 4
MAX_SEASONAL_PERIOD = 12


def _check_method(method: str) -> None:
    if method not in METHODS:
        raise ValueError(f"method must be one of {METHODS}, got {method!r}")


def _index_trend(values: Sequence[float]):
    return linear_regression(np.arange(len(values), dtype=float), values)


def moving_average_forecast(
    values: Sequence[float], window: int, periods: int
) -> List[float]:
    """Repeat the mean of the last ``window`` values for ``periods`` steps."""
    level = calculate_mean(list(values)[-window:])
    return [level] * periods


def exponential_smoothing_forecast(
    values: Sequence[float], alpha: float, periods: int
) -> List[float]:
    """Repeat the final smoothed level ``s_t = α y_t + (1 − α) s_{t−1}``."""
    smoothed = float(values[0])
    for value in values[1:]:
        smoothed = alpha * float(value) + (1.0 - alpha) * smoothed
    return [smoothed] * periods


def linear_trend_forecast(values: Sequence[float], periods: int) -> List[float]:
    """Extrapolate an OLS trend fitted on indices ``0..n−1`` to ``n..n+periods−1``."""
    n = len(values)
    fit = _index_trend(values)
    return [fit.slope * (n + i) + fit.intercept for i in range(periods)]


def in_sample_predictions(
    values: Sequence[float],
    method: str,
    window: int = CONFIG.FORECAST_WINDOW,
    alpha: float = CONFIG.FORECAST_ALPHA,
) -> List[float]:
    """Build the one-step in-sample predictions used for accuracy metrics.

    Args:
        values (Sequence[float]): Observed series.
        method (str): One of ``METHODS``.
        window (int, optional): Moving-average window.
        alpha (float, optional): Smoothing factor.

    Returns:
        list[float]: Predictions aligned with the *last* ``len(result)``
        observations. Moving average yields ``n − window`` values; the other
        methods yield ``n − 1``.

    Note:
        The smoothing predictions update the level with the previous
        observation (``α y_{t−1} + (1 − α) s``), i.e. they lag the forecast
        recursion by one step.
    """
    _check_method(method)
    values = [float(v) for v in values]
    n = len(values)

    if method == MOVING_AVERAGE:
        return [calculate_mean(values[i - window:i]) for i in range(window, n)]

    if method == EXPONENTIAL_SMOOTHING:
        predictions = []
        smoothed = values[0]
        for i in range(1, n):
            smoothed = alpha * values[i - 1] + (1.0 - alpha) * smoothed
            predictions.append(smoothed)
        return predictions

    fit = _index_trend(values)
    return [fit.slope * i + fit.intercept for i in range(1, n)]


def forecast_accuracy(
    actual: Sequence[float], predicted: Sequence[float]
) -> ForecastAccuracy:
    """Mean absolute error, mean squared error and root mean squared error.

    An empty pair of sequences gives zeros for every metric.

    Raises:
        LengthMismatchError: If the sequences differ in length.
    """
    require_same_length(actual, predicted, "Actual and predicted values must align")
    if len(predicted) == 0:
        return ForecastAccuracy(mae=0.0, mse=0.0, rmse=0.0)

    errors = np.asarray(predicted, dtype=float) - np.asarray(actual, dtype=float)
    mae = float(np.mean(np.abs(errors)))
    mse = float(np.mean(errors**2))
    return ForecastAccuracy(mae=mae, mse=mse, rmse=math.sqrt(mse))


def decompose_series(values: Sequence[float]) -> Optional[pd.DataFrame]:
    """Split a series into linear trend, seasonal means and residuals.

    Args:
        values (Sequence[float]): Observed series.

    Returns:
        pandas.DataFrame | None: Columns ``original``, ``trend``,
        ``seasonal`` and ``residual`` (one row per observation), or ``None``
        when fewer than 4 observations are given.

    Note:
        The seasonal period is ``min(12, n // 2)``. Seasonal components are
        the per-phase means of the detrended series and are only estimated
        when at least two full periods are available; otherwise they are 0.
    """
    n = len(values)
    if n < MIN_DECOMPOSITION_POINTS:
        return None

    original = np.asarray(values, dtype=float)
    fit = _index_trend(original)
    trend = fit.slope * np.arange(n, dtype=float) + fit.intercept
    detrended = original - trend

    period = min(MAX_SEASONAL_PERIOD, n // 2)
    seasonal = np.zeros(n)
    if n >= period * 2:
        for phase in range(period):
            seasonal[phase::period] = calculate_mean(detrended[phase::period])

    return pd.DataFrame(
        {
            "original": original,
            "trend": trend,
            "seasonal": seasonal,
            "residual": original - trend - seasonal,
        }
    )


def forecast_series(
    values: Sequence[float],
    method: str,
    periods: int,
    window: int = CONFIG.FORECAST_WINDOW,
    alpha: float = CONFIG.FORECAST_ALPHA,
) -> ForecastResult:
    """Forecast ``periods`` future values and report in-sample accuracy.

    Args:
        values (Sequence[float]): Observed series with at least 3 values.
        method (str): ``"moving_average"``, ``"exponential_smoothing"`` or
            ``"linear_trend"``.
        periods (int): Number of future steps.
        window (int, optional): Moving-average window. Defaults to ``3``.
        alpha (float, optional): Smoothing factor. Defaults to ``0.3``.

    Returns:
        ForecastResult: Forecast values, accuracy metrics and the series
        decomposition.

    Raises:
        ValueError: If fewer than 3 values are given or ``method`` is unknown.
    """
    _check_method(method)
    if len(values) < MIN_FORECAST_POINTS:
        raise ValueError(
            f"Need at least {MIN_FORECAST_POINTS} data points for forecasting, "
            f"got {len(values)}"
        )
    values = [float(v) for v in values]
    logger.debug("Forecasting %d period(s) with %s", periods, method)

    if method == MOVING_AVERAGE:
        forecast = moving_average_forecast(values, window, periods)
    elif method == EXPONENTIAL_SMOOTHING:
        forecast = exponential_smoothing_forecast(values, alpha, periods)
    else:
        forecast = linear_trend_forecast(values, periods)

    predictions = in_sample_predictions(values, method, window=window, alpha=alpha)
    if predictions:
        actual = values[len(values) - len(predictions):]
    else:
        actual = []
    metrics = forecast_accuracy(actual, predictions)

    return ForecastResult(
        method=method,
        forecast=forecast,
        metrics=metrics,
        decomposition=decompose_series(values),
    )

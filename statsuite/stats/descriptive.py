"""Provide descriptive statistics for one-dimensional samples.

All functions accept any sequence of real numbers and never modify it;
sorting is done on a copy. Inputs are not validated: samples that are too
small for a statistic (variance of one value, skewness of two values, ...)
yield ``nan`` or ``inf`` instead of raising, so callers should guard the
minimum sizes listed in each function.
"""

from __future__ import annotations

import math
from collections import Counter
from typing import Dict, List, Sequence

import numpy as np
import pandas as pd

from .._numeric import errstate
from ..config import CONFIG
from ..schema import DescriptiveStats, ZScoreSummary
from .distributions import approximate_normal_cdf


def _as_array(data: Sequence[float]) -> np.ndarray:
    return np.array(data, dtype=float)


def calculate_mean(data: Sequence[float]) -> float:
    """Arithmetic mean; ``nan`` for an empty sample."""
    arr = _as_array(data)
    with errstate():
        return float(np.float64(np.sum(arr)) / arr.size)


def calculate_median(data: Sequence[float]) -> float:
    """Middle value of the sorted sample (mean of the two middle values when n is even)."""
    ordered = np.sort(_as_array(data))
    n = ordered.size
    if n == 0:
        return math.nan
    mid = n // 2
    if n % 2 == 0:
        return float((ordered[mid - 1] + ordered[mid]) / 2.0)
    return float(ordered[mid])


def calculate_mode(data: Sequence[float]) -> List[float]:
    """Return every value that occurs with the maximum frequency.

    A sample with all-distinct values therefore returns every value. The
    result is sorted ascending; an empty sample gives an empty list.
    """
    counts = Counter(float(v) for v in data)
    if not counts:
        return []
    top = max(counts.values())
    return sorted(value for value, count in counts.items() if count == top)


def calculate_variance(data: Sequence[float], sample: bool = True) -> float:
    """Sum of squared deviations divided by ``n - 1`` (sample) or ``n``.

    Note:
        With ``sample=True`` and ``n <= 1`` the denominator is zero or
        negative and the result is ``nan``; callers must guard ``n < 2``.
    """
    arr = _as_array(data)
    mean = calculate_mean(arr)
    with errstate():
        ss = np.float64(np.sum((arr - mean) ** 2))
        return float(ss / (arr.size - (1 if sample else 0)))


def calculate_standard_deviation(data: Sequence[float], sample: bool = True) -> float:
    with errstate():
        return float(np.sqrt(calculate_variance(data, sample)))


def calculate_quartiles(data: Sequence[float]) -> Dict[str, float]:
    """Positional quartiles of the sorted sample.

    ``q1`` is the element at index ``floor(0.25 n)`` and ``q3`` the element
    at ``floor(0.75 n)``. No interpolation is performed, which differs from
    the default method of most statistics packages.
    """
    ordered = np.sort(_as_array(data))
    n = ordered.size
    if n == 0:
        return {"q1": math.nan, "q3": math.nan}
    return {
        "q1": float(ordered[math.floor(n * 0.25)]),
        "q3": float(ordered[math.floor(n * 0.75)]),
    }


def calculate_skewness(data: Sequence[float]) -> float:
    """Adjusted Fisher-Pearson skewness ``n/((n-1)(n-2)) · Σ((x - mean)/s)³``.

    Requires ``n >= 3``; a constant sample yields ``nan``.
    """
    arr = _as_array(data)
    n = arr.size
    mean = calculate_mean(arr)
    std = calculate_standard_deviation(arr)
    with errstate():
        total = np.float64(np.sum(((arr - mean) / std) ** 3))
        return float(np.float64(n) / ((n - 1) * (n - 2)) * total)


def calculate_kurtosis(data: Sequence[float]) -> float:
    """Excess kurtosis using the unbiased fourth-moment estimator.

    Requires ``n >= 4``; a constant sample yields ``nan``.
    """
    arr = _as_array(data)
    n = arr.size
    mean = calculate_mean(arr)
    std = calculate_standard_deviation(arr)
    with errstate():
        total = np.float64(np.sum(((arr - mean) / std) ** 4))
        n = np.float64(n)
        lead = (n * (n + 1)) / ((n - 1) * (n - 2) * (n - 3))
        correction = (3 * (n - 1) ** 2) / ((n - 2) * (n - 3))
        return float(lead * total - correction)


def calculate_descriptive_stats(data: Sequence[float]) -> DescriptiveStats:
    """Compute the full descriptive summary of a sample.

    Args:
        data (Sequence[float]): Sample of real numbers. Variance needs at
            least 2 values, skewness 3 and kurtosis 4; smaller samples give
            ``nan`` in those fields.

    Returns:
        DescriptiveStats: Fresh summary record.
    """
    arr = _as_array(data)
    quartiles = calculate_quartiles(arr)
    if arr.size:
        minimum = float(np.min(arr))
        maximum = float(np.max(arr))
    else:
        minimum = maximum = math.nan

    return DescriptiveStats(
        count=int(arr.size),
        mean=calculate_mean(arr),
        median=calculate_median(arr),
        mode=calculate_mode(arr),
        variance=calculate_variance(arr),
        standard_deviation=calculate_standard_deviation(arr),
        range=maximum - minimum,
        min=minimum,
        max=maximum,
        q1=quartiles["q1"],
        q3=quartiles["q3"],
        iqr=quartiles["q3"] - quartiles["q1"],
        skewness=calculate_skewness(arr),
        kurtosis=calculate_kurtosis(arr),
    )


def calculate_z_score(value: float, mean: float, standard_deviation: float) -> float:
    """Standard score ``(value - mean) / standard_deviation``."""
    with errstate():
        return float((np.float64(value) - mean) / standard_deviation)


def calculate_percentile_from_z(z: float) -> float:
    """Percentile (0-100) of a z-score under the standard normal."""
    return approximate_normal_cdf(z) * 100.0


def calculate_z_scores_from_sample(
    data: Sequence[float], threshold: float = CONFIG.Z_OUTLIER_THRESHOLD
) -> ZScoreSummary:
    """Standardize every value against the sample mean and standard deviation.

    Args:
        data (Sequence[float]): Sample with at least two values.
        threshold (float, optional): Values with ``|z| > threshold`` are
            reported as outliers. Defaults to ``2.0``.

    Returns:
        ZScoreSummary: Mean, sample standard deviation, z-score per value
        (input order) and the outlying values.
    """
    arr = _as_array(data)
    mean = calculate_mean(arr)
    std = calculate_standard_deviation(arr)
    z_scores = [calculate_z_score(v, mean, std) for v in arr]
    outliers = [float(v) for v, z in zip(arr, z_scores) if abs(z) > threshold]
    return ZScoreSummary(
        mean=mean,
        standard_deviation=std,
        z_scores=z_scores,
        outliers=outliers,
        threshold=float(threshold),
    )


def summarize_frame(df: pd.DataFrame) -> pd.DataFrame:
    """Summarize every numeric column of a DataFrame.

    Args:
        df (pandas.DataFrame): Table whose numeric columns are summarized.
            Non-finite cells are dropped column by column.

    Returns:
        pandas.DataFrame: One row per numeric column (indexed by column
        name) with the fields of :class:`DescriptiveStats` as columns.
        Columns left empty after dropping non-finite cells are skipped.
    """
    names = []
    rows = []
    for column in df.select_dtypes(include="number").columns:
        values = df[column].to_numpy(dtype=float)
        values = values[np.isfinite(values)]
        if values.size == 0:
            continue
        names.append(column)
        rows.append(calculate_descriptive_stats(values).to_dict())

    fields = list(DescriptiveStats.__dataclass_fields__)
    if not rows:
        return pd.DataFrame(columns=fields)
    return pd.DataFrame(rows, index=names, columns=fields)

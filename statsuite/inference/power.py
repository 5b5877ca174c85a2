"""Sample-size and power calculations based on the normal approximation."""

from __future__ import annotations

import math
from typing import Union

import numpy as np

from .._numeric import errstate
from ..config import CONFIDENCE_LEVEL, SIGNIFICANCE_LEVEL
from ..stats.distributions import (
    approximate_inverse_normal_cdf,
    approximate_normal_cdf,
)


def _two_sided_z(confidence_level: float) -> float:
    alpha = 1.0 - confidence_level
    return approximate_inverse_normal_cdf(1.0 - alpha / 2.0)


def _round_up_size(value) -> Union[int, float]:
    value = float(value)
    if not math.isfinite(value):
        return value
    return int(math.ceil(value))


def calculate_sample_size_for_mean(
    margin_of_error: float,
    standard_deviation: float,
    confidence_level: float = CONFIDENCE_LEVEL,
) -> Union[int, float]:
    """Smallest ``n`` with ``z · σ / √n <= E``: ``ceil((z σ / E)²)``.

    Args:
        margin_of_error (float): Desired half-width ``E`` (same unit as the
            data), normally positive.
        standard_deviation (float): Assumed population standard deviation.
        confidence_level (float, optional): Defaults to ``0.95``.

    Returns:
        int | float: Required sample size. A zero margin of error gives
        ``inf`` (a float) and undefined inputs such as ``0 / 0`` give
        ``nan``, instead of raising.
    """
    z = _two_sided_z(confidence_level)
    with errstate():
        size = (np.float64(z * standard_deviation) / margin_of_error) ** 2
    return _round_up_size(size)


def calculate_sample_size_for_proportion(
    margin_of_error: float,
    proportion: float = 0.5,
    confidence_level: float = CONFIDENCE_LEVEL,
) -> Union[int, float]:
    """Required ``n`` to estimate a proportion: ``ceil(z² p (1 − p) / E²)``.

    ``proportion = 0.5`` (the default) gives the most conservative size. A
    zero margin of error returns ``inf`` (a float) rather than an integer.
    """
    z = _two_sided_z(confidence_level)
    with errstate():
        size = np.float64(z**2 * proportion * (1.0 - proportion)) / margin_of_error**2
    return _round_up_size(size)


def calculate_power(
    effect_size: float, sample_size: float, alpha: float = SIGNIFICANCE_LEVEL
) -> float:
    """Approximate power of a two-sided z-test.

    Returns ``Φ(d √n − z_{1−α/2})`` for standardized effect size ``d``. The
    opposite rejection tail is ignored, so this is a simplified proxy rather
    than a noncentral-t power computation. A negative ``sample_size`` gives
    ``nan``.
    """
    z_alpha = approximate_inverse_normal_cdf(1.0 - alpha / 2.0)
    with errstate():
        z_beta = effect_size * np.sqrt(np.float64(sample_size)) - z_alpha
    return approximate_normal_cdf(z_beta)

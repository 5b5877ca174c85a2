"""Two-proportion z-test used for A/B conversion experiments."""

from __future__ import annotations

import math

from ..config import CONFIG, SIGNIFICANCE_LEVEL
from ..schema import ProportionTestResult
from ..stats.distributions import approximate_normal_cdf


def two_proportion_z_test(
    conversions_a: int,
    total_a: int,
    conversions_b: int,
    total_b: int,
    alpha: float = SIGNIFICANCE_LEVEL,
) -> ProportionTestResult:
    """Compare the conversion rates of a control (A) and a variant (B).

    Args:
        conversions_a (int): Successes in group A.
        total_a (int): Trials in group A.
        conversions_b (int): Successes in group B.
        total_b (int): Trials in group B.
        alpha (float, optional): Significance level for ``is_significant``.
            Defaults to ``0.05``.

    Returns:
        ProportionTestResult: Rates, ``difference = p_B − p_A``, the pooled-SE
        z-score (positive when B converts better), two-tailed p-value,
        Cohen's h, a 95% interval for the difference using the unpooled SE
        and the relative lift ``(p_B − p_A) / p_A``.

    Raises:
        ValueError: If either total is not positive, or a group has more
            conversions than trials (or a negative count).

    Note:
        ``z_score`` and ``p_value`` are ``nan`` when the pooled rate is 0 or 1,
        and ``relative_lift`` is ``nan`` (or infinite) when ``p_A`` is 0.
    """
    if total_a <= 0 or total_b <= 0:
        raise ValueError(
            f"Totals must be positive, got total_a={total_a}, total_b={total_b}"
        )
    for label, conversions, total in (
        ("A", conversions_a, total_a),
        ("B", conversions_b, total_b),
    ):
        if not 0 <= conversions <= total:
            raise ValueError(
                f"Conversions in group {label} must lie in [0, {total}], got {conversions}"
            )

    p_a = conversions_a / total_a
    p_b = conversions_b / total_b
    pooled = (conversions_a + conversions_b) / (total_a + total_b)
    diff = p_b - p_a

    se = math.sqrt(pooled * (1.0 - pooled) * (1.0 / total_a + 1.0 / total_b))
    z_score = diff / se if se > 0 else math.nan
    if math.isnan(z_score):
        p_value = math.nan
    else:
        p_value = 2.0 * (1.0 - approximate_normal_cdf(abs(z_score)))

    effect_size = 2.0 * (math.asin(math.sqrt(p_b)) - math.asin(math.sqrt(p_a)))

    se_diff = math.sqrt(p_a * (1.0 - p_a) / total_a + p_b * (1.0 - p_b) / total_b)
    critical = CONFIG.AB_CRITICAL_VALUE
    interval = (diff - critical * se_diff, diff + critical * se_diff)

    if p_a > 0:
        relative_lift = diff / p_a
    else:
        relative_lift = math.nan if diff == 0 else math.copysign(math.inf, diff)

    return ProportionTestResult(
        rate_a=p_a,
        rate_b=p_b,
        difference=diff,
        z_score=z_score,
        p_value=p_value,
        effect_size=effect_size,
        is_significant=bool(p_value < alpha),
        confidence_interval=interval,
        relative_lift=relative_lift,
    )

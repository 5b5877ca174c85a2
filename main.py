#!/usr/bin/env python3
"""
Demonstration run of the statsuite calculators on built-in sample data.
"""

# Walkthrough:
# 1) Summarize a sample (descriptive statistics and z-score outliers).
# 2) Run the hypothesis tests: one-sample, Welch and paired t-tests,
#    one-way ANOVA and a chi-square goodness-of-fit test.
# 3) Fit a regression line and plan sample sizes.
# 4) Cluster two-dimensional points with a fixed seed.
# 5) Forecast a short seasonal series.

import logging
import os
import sys
import time

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from statsuite import (
    calculate_descriptive_stats,
    calculate_power,
    calculate_sample_size_for_mean,
    chi_square_test,
    forecast_series,
    k_means_cluster,
    linear_regression,
    one_sample_t_test,
    one_way_anova,
    paired_t_test,
    two_proportion_z_test,
    two_sample_t_test,
)
from statsuite.stats import calculate_z_scores_from_sample

SAMPLE = [12.1, 11.8, 12.6, 13.0, 11.5, 12.2, 12.9, 14.8, 12.0, 12.4]
CONTROL = [23.1, 24.5, 22.8, 25.0, 23.9, 24.2]
TREATMENT = [25.4, 26.1, 24.9, 27.3, 26.0, 25.8]
GROUPS = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
OBSERVED = [10, 15, 8, 12]
EXPECTED = [11.25, 11.25, 11.25, 11.25]
POINTS = [[1.0, 1.2], [1.3, 0.8], [0.9, 1.1], [8.0, 8.2], [8.4, 7.9], [7.8, 8.1]]
SERIES = [112, 118, 132, 129, 121, 135, 148, 148, 136, 119, 104, 118]


def main():
    """Run every calculator once and log the headline numbers."""

    start_time = time.time()
    logging.info("Running statsuite demonstration")

    stats = calculate_descriptive_stats(SAMPLE)
    logging.info(
        "Descriptive: n=%d mean=%.3f median=%.3f sd=%.3f q1=%.3f q3=%.3f",
        stats.count,
        stats.mean,
        stats.median,
        stats.standard_deviation,
        stats.q1,
        stats.q3,
    )
    outliers = calculate_z_scores_from_sample(SAMPLE)
    logging.info("Values with |z| > %.1f: %s", outliers.threshold, outliers.outliers)

    for label, result in (
        ("One-sample t-test (mu0=12)", one_sample_t_test(SAMPLE, 12.0)),
        ("Welch t-test", two_sample_t_test(CONTROL, TREATMENT, equal_variances=False)),
        ("Paired t-test", paired_t_test(CONTROL, TREATMENT)),
        ("One-way ANOVA", one_way_anova(GROUPS)),
        ("Chi-square", chi_square_test(OBSERVED, EXPECTED)),
    ):
        logging.info(
            "%s: statistic=%.4f df=%.2f p=%.4f -> %s",
            label,
            result.test_statistic,
            result.degrees_of_freedom,
            result.clamped_p_value,
            result.interpretation,
        )

    ab = two_proportion_z_test(85, 1000, 105, 1000)
    logging.info(
        "A/B test: z=%.3f p=%.4f lift=%.1f%% significant=%s",
        ab.z_score,
        ab.p_value,
        ab.relative_lift * 100,
        ab.is_significant,
    )

    fit = linear_regression(range(len(SERIES)), SERIES)
    logging.info(
        "Trend: slope=%.3f intercept=%.3f R^2=%.3f", fit.slope, fit.intercept, fit.r_squared
    )

    logging.info(
        "Sample size for E=0.5, sd=2: %d", calculate_sample_size_for_mean(0.5, 2.0)
    )
    logging.info("Power for d=0.5, n=32: %.3f", calculate_power(0.5, 32))

    clusters = k_means_cluster(POINTS, k=2, seed=42)
    logging.info(
        "k-means: assignments=%s sizes=%s passes=%d converged=%s",
        clusters.assignments,
        clusters.cluster_sizes,
        clusters.iterations,
        clusters.converged,
    )

    forecast = forecast_series(SERIES, "exponential_smoothing", periods=3)
    logging.info(
        "Forecast (%s): %s  MAE=%.2f RMSE=%.2f",
        forecast.method,
        [round(v, 2) for v in forecast.forecast],
        forecast.metrics.mae,
        forecast.metrics.rmse,
    )

    total_duration = time.time() - start_time
    logging.info("Total execution time: %.3f seconds", total_duration)
    return 0


if __name__ == "__main__":
    sys.exit(main())

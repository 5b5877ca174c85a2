"""K-means clustering with Euclidean distance.

Algorithm summary: draw ``k`` centroids uniformly from ``[0, 10)`` in every
dimension, then alternate between assigning each point to its nearest
centroid and moving every centroid to the mean of its points, until an
assignment pass changes nothing or the iteration cap is reached.

Known limitations (kept on purpose so results stay comparable):
- Initialization ignores the data, so clusters can end up empty or poorly
  placed when the data lie far from ``[0, 10)``.
- An empty cluster keeps its previous centroid; it is never re-seeded.
- Without ``seed`` or ``rng`` results differ from run to run.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from .config import CONFIG
from .schema import ClusterResult

logger = logging.getLogger(__name__)


def euclidean_distances(points: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """Return the ``(n, k)`` matrix of distances from every point to every centroid."""
    diff = points[:, np.newaxis, :] - centroids[np.newaxis, :, :]
    return np.sqrt(np.sum(diff**2, axis=2))


def _nearest_centroid(points: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    # argmin returns the first minimum, so ties go to the lowest cluster index.
    return np.argmin(euclidean_distances(points, centroids), axis=1)


def k_means_cluster(
    points: Sequence[Sequence[float]],
    k: int,
    max_iterations: int = CONFIG.KMEANS_MAX_ITERATIONS,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> ClusterResult:
    """Partition points into ``k`` clusters.

    Args:
        points (Sequence[Sequence[float]]): ``n`` points, all with the same
            dimensionality ``d``. The input is not modified.
        k (int): Number of clusters, at least 1.
        max_iterations (int, optional): Maximum number of assignment passes.
            Defaults to ``100``.
        seed (int, optional): Seed for a fresh ``numpy.random.Generator``.
            Ignored when ``rng`` is given.
        rng (numpy.random.Generator, optional): Random source for the
            initial centroids.

    Returns:
        ClusterResult: One label in ``[0, k)`` per input point, the ``k``
        final centroids, the number of assignment passes executed and
        whether the loop stopped because assignments were unchanged.

    Raises:
        ValueError: If ``k < 1``, ``points`` is empty, or the points do not
            share one dimensionality.

    Note:
        Assignments start as all zeros. If the first pass also assigns every
        point to cluster 0 the loop stops immediately and the centroids are
        returned as initialized.
    """
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")
    if len(points) == 0:
        raise ValueError("points must contain at least one point")
    dims = {len(p) for p in points}
    if len(dims) != 1:
        raise ValueError(f"All points must have the same dimensionality, got {sorted(dims)}")

    data = np.array(points, dtype=float)
    n, d = data.shape
    if rng is None:
        rng = np.random.default_rng(seed)

    centroids = rng.random((k, d)) * CONFIG.KMEANS_INIT_HIGH
    assignments = np.zeros(n, dtype=int)
    iterations = 0
    converged = False

    for _ in range(max_iterations):
        new_assignments = _nearest_centroid(data, centroids)
        iterations += 1

        if np.array_equal(new_assignments, assignments):
            converged = True
            break

        assignments = new_assignments

        for cluster in range(k):
            members = data[assignments == cluster]
            if len(members) == 0:
                logger.debug(
                    "Cluster %d is empty after pass %d; keeping its centroid",
                    cluster,
                    iterations,
                )
                continue
            centroids[cluster] = members.mean(axis=0)

    if converged:
        logger.debug("k-means converged after %d pass(es)", iterations)
    else:
        logger.debug("k-means stopped at the iteration cap (%d)", max_iterations)

    return ClusterResult(
        assignments=[int(a) for a in assignments],
        centroids=centroids.tolist(),
        iterations=iterations,
        converged=converged,
    )

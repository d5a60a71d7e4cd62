"""
Fixed-iteration Lloyd's k-means over RGB color samples.

Seeding takes the first k samples verbatim, so results depend on sample order
and are fully deterministic. Callers wanting unbiased seeds must shuffle the
samples themselves. A cluster that receives no samples keeps its previous
centroid; if it stays empty for every iteration it keeps its seed.
"""

from dataclasses import dataclass
from numbers import Integral

import numpy as np

from color_vector import ColorVector, as_points, distances


class InvalidArgumentError(ValueError):
    """Raised when k, iterations or the sample set are out of range."""


@dataclass(frozen=True)
class Centroid:
    """Representative color of one cluster."""
    index: int
    color: ColorVector

    def total(self) -> float:
        return self.color.total()


# =============================================================================
# Lloyd steps
# =============================================================================

def assign(points: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """
    Label each point with the index of its nearest centroid.

    Ties go to the lowest centroid index (argmin returns the first minimum).
    """
    return distances(points, centroids).argmin(axis=1)


def update(points: np.ndarray, labels: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """Move each centroid to the mean of its points; empty clusters stay put."""
    updated = centroids.copy()
    for i in range(len(centroids)):
        members = points[labels == i]
        if len(members):
            updated[i] = members.mean(axis=0)
    return updated


# =============================================================================
# Entry point
# =============================================================================

def _validate(points: np.ndarray, k, iterations) -> None:
    if len(points) == 0:
        raise InvalidArgumentError("samples must not be empty")
    if isinstance(k, bool) or not isinstance(k, Integral):
        raise InvalidArgumentError(f"k must be an integer, got {k!r}")
    if k <= 0:
        raise InvalidArgumentError(f"k must be positive, got {k}")
    if k > len(points):
        raise InvalidArgumentError(f"k={k} exceeds the number of samples ({len(points)})")
    if isinstance(iterations, bool) or not isinstance(iterations, Integral):
        raise InvalidArgumentError(f"iterations must be an integer, got {iterations!r}")
    if iterations < 0:
        raise InvalidArgumentError(f"iterations must be non-negative, got {iterations}")
    if not np.all(np.isfinite(points)):
        raise InvalidArgumentError("samples must contain only finite values")


def run(samples, k: int, iterations: int) -> list[Centroid]:
    """
    Cluster samples into k colors with exactly `iterations` Lloyd rounds.

    Args:
        samples: Sequence of ColorVector or an (n, 3) array of intensities
        k: Number of clusters, 1 <= k <= len(samples)
        iterations: Number of assignment/update rounds (0 returns the seeds)

    Returns:
        k centroids in cluster index order (not sorted for presentation)

    Raises:
        InvalidArgumentError: If samples are empty or malformed, or k or
            iterations are out of range
    """
    try:
        points = as_points(samples)
    except ValueError as e:
        raise InvalidArgumentError(str(e)) from e
    _validate(points, k, iterations)

    centroids = points[:k].copy()
    for _ in range(iterations):
        labels = assign(points, centroids)
        centroids = update(points, labels, centroids)

    return [Centroid(i, ColorVector.from_array(c)) for i, c in enumerate(centroids)]

"""
RGB color vectors with Euclidean distance and averaging.
"""

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np
from scipy.spatial.distance import cdist


@dataclass(frozen=True)
class ColorVector:
    """A single color as three intensities on a 0-255 scale."""
    r: float
    g: float
    b: float

    @classmethod
    def from_array(cls, values) -> 'ColorVector':
        """Build a vector from any 3-element sequence or array."""
        r, g, b = (float(v) for v in values)
        return cls(r, g, b)

    def as_array(self) -> np.ndarray:
        return np.array([self.r, self.g, self.b], dtype=np.float64)

    def total(self) -> float:
        """Sum of the three components (used as a brightness proxy)."""
        return self.r + self.g + self.b

    def __iter__(self):
        return iter((self.r, self.g, self.b))


def distance(a: ColorVector, b: ColorVector) -> float:
    """Euclidean distance between two colors."""
    diff = a.as_array() - b.as_array()
    return float(np.sqrt(np.sum(diff * diff)))


def average(vectors: Sequence[ColorVector]) -> ColorVector:
    """
    Component-wise mean of a non-empty sequence of colors.

    Raises:
        ValueError: If the sequence is empty
    """
    if len(vectors) == 0:
        raise ValueError("Cannot average an empty sequence of colors")
    return ColorVector.from_array(as_points(vectors).mean(axis=0))


def as_points(samples: Iterable) -> np.ndarray:
    """
    Convert samples into an (n, 3) float64 point matrix.

    Accepts a sequence of ColorVector or anything numpy can read as (n, 3).

    Raises:
        ValueError: If the samples are not shaped (n, 3)
    """
    if isinstance(samples, np.ndarray):
        points = samples.astype(np.float64)
    else:
        points = np.array(
            [v.as_array() if isinstance(v, ColorVector) else v for v in samples],
            dtype=np.float64,
        )

    if points.size == 0:
        return points.reshape(0, 3)
    if points.ndim != 2 or points.shape[1] != 3:
        raise ValueError(f"Expected samples shaped (n, 3), got {points.shape}")
    return points


def distances(points: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """Euclidean distance matrix of shape (n_points, n_centroids)."""
    return cdist(points, centroids, metric='euclidean')

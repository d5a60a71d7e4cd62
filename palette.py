"""
Presentation order for clustered palettes.
"""

from typing import Sequence


def brightness(item) -> float:
    """Component sum of a Centroid or ColorVector."""
    return item.total()


def order(centroids: Sequence) -> list:
    """
    Sort centroids darkest first by component sum.

    The sort is stable: centroids with equal sums keep their input order,
    which makes ordering idempotent and repeatable across runs.
    """
    return sorted(centroids, key=brightness)

"""
Unit tests for fixed-iteration k-means.

Covers seeding, tie-breaking, the empty-cluster freeze and argument checks.
"""
import numpy as np
import pytest

import kmeans
from color_vector import ColorVector, average
from kmeans import Centroid, InvalidArgumentError, assign, update
from palette import order


def colors_of(centroids):
    return [c.color for c in centroids]


@pytest.fixture
def mixed_samples():
    """Forty pseudo-random colors from a fixed seed."""
    rng = np.random.default_rng(7)
    return rng.integers(0, 256, size=(40, 3)).astype(np.float64)


class TestRun:
    """End-to-end clustering behaviour"""

    def test_black_and_white(self):
        samples = [(0, 0, 0), (0, 0, 0), (255, 255, 255), (255, 255, 255)]
        result = order(kmeans.run(samples, 2, 5))
        assert colors_of(result) == [ColorVector(0, 0, 0), ColorVector(255, 255, 255)]

    def test_duplicate_seeds_first_round(self):
        """Identical seeds: every sample ties and goes to centroid 0."""
        samples = [(0, 0, 0), (0, 0, 0), (255, 255, 255), (255, 255, 255)]
        result = kmeans.run(samples, 2, 1)
        assert result[0].color == ColorVector(127.5, 127.5, 127.5)
        assert result[1].color == ColorVector(0, 0, 0)

    def test_duplicate_seeds_separate_on_second_round(self):
        samples = [(0, 0, 0), (0, 0, 0), (255, 255, 255), (255, 255, 255)]
        result = kmeans.run(samples, 2, 2)
        assert result[0].color == ColorVector(255, 255, 255)
        assert result[1].color == ColorVector(0, 0, 0)

    def test_cluster_empty_every_round_keeps_seed(self):
        samples = [(0, 0, 0), (0, 0, 0), (0, 0, 0)]
        result = kmeans.run(samples, 2, 4)
        assert colors_of(result) == [ColorVector(0, 0, 0), ColorVector(0, 0, 0)]

    def test_repeated_single_color(self):
        samples = [ColorVector(10, 20, 30)] * 5
        result = kmeans.run(samples, 1, 3)
        assert colors_of(result) == [ColorVector(10, 20, 30)]

    def test_k1_is_global_mean(self, mixed_samples):
        expected = average(mixed_samples)
        for iterations in (1, 2, 7):
            result = kmeans.run(mixed_samples, 1, iterations)
            assert result[0].color == expected

    def test_zero_iterations_returns_seeds(self, mixed_samples):
        result = kmeans.run(mixed_samples, 4, 0)
        assert colors_of(result) == [ColorVector.from_array(p) for p in mixed_samples[:4]]

    def test_returns_k_indexed_centroids(self, mixed_samples):
        result = kmeans.run(mixed_samples, 5, 10)
        assert len(result) == 5
        assert [c.index for c in result] == list(range(5))
        assert all(isinstance(c, Centroid) for c in result)

    def test_deterministic(self, mixed_samples):
        first = kmeans.run(mixed_samples, 5, 10)
        second = kmeans.run(mixed_samples.copy(), 5, 10)
        assert first == second

    def test_does_not_mutate_input(self, mixed_samples):
        before = mixed_samples.copy()
        kmeans.run(mixed_samples, 3, 4)
        np.testing.assert_array_equal(mixed_samples, before)

    def test_k_equals_sample_count(self):
        samples = [(0, 0, 0), (100, 0, 0), (0, 100, 0), (0, 0, 100), (200, 200, 200)]
        result = kmeans.run(samples, len(samples), 10)
        assert len(result) == len(samples)
        assert colors_of(result) == [ColorVector.from_array(s) for s in samples]

    def test_well_separated_clusters(self):
        samples = [(10, 10, 10), (250, 250, 250), (12, 8, 10), (248, 252, 250), (8, 12, 10)]
        result = kmeans.run(samples, 2, 10)
        assert result[0].color == ColorVector(10, 10, 10)
        assert result[1].color == ColorVector(249, 251, 250)


class TestAssign:
    """Nearest-centroid labelling"""

    def test_tie_goes_to_lowest_index(self):
        points = np.array([[5.0, 0.0, 0.0]])
        centroids = np.array([[0.0, 0.0, 0.0], [10.0, 0.0, 0.0]])
        np.testing.assert_array_equal(assign(points, centroids), [0])

    def test_tie_between_later_centroids(self):
        points = np.array([[5.0, 0.0, 0.0]])
        centroids = np.array([[100.0, 100.0, 100.0], [0.0, 0.0, 0.0], [10.0, 0.0, 0.0]])
        np.testing.assert_array_equal(assign(points, centroids), [1])

    def test_nearest(self):
        points = np.array([[0.0, 0.0, 0.0], [255.0, 255.0, 255.0], [200.0, 180.0, 190.0]])
        centroids = np.array([[250.0, 250.0, 250.0], [5.0, 5.0, 5.0]])
        np.testing.assert_array_equal(assign(points, centroids), [1, 0, 0])


class TestUpdate:
    """Centroid recomputation"""

    def test_mean_of_members(self):
        points = np.array([[0.0, 0.0, 0.0], [10.0, 20.0, 30.0], [100.0, 100.0, 100.0]])
        labels = np.array([0, 0, 1])
        centroids = np.zeros((2, 3))
        np.testing.assert_array_equal(
            update(points, labels, centroids),
            [[5.0, 10.0, 15.0], [100.0, 100.0, 100.0]],
        )

    def test_empty_cluster_keeps_previous_value(self):
        points = np.array([[1.0, 2.0, 3.0], [3.0, 4.0, 5.0]])
        labels = np.array([0, 0])
        centroids = np.array([[0.0, 0.0, 0.0], [42.0, 43.0, 44.0]])
        result = update(points, labels, centroids)
        np.testing.assert_array_equal(result[1], [42.0, 43.0, 44.0])
        np.testing.assert_array_equal(result[0], [2.0, 3.0, 4.0])

    def test_returns_new_array(self):
        points = np.array([[1.0, 1.0, 1.0]])
        centroids = np.array([[0.0, 0.0, 0.0]])
        update(points, np.array([0]), centroids)
        np.testing.assert_array_equal(centroids, [[0.0, 0.0, 0.0]])


class TestInvalidArguments:
    """Argument checks happen before any clustering"""

    @pytest.mark.parametrize("k", [0, -1, 5])
    def test_k_out_of_range(self, k):
        samples = [(1, 2, 3)] * 4
        with pytest.raises(InvalidArgumentError):
            kmeans.run(samples, k, 3)

    def test_empty_samples(self):
        with pytest.raises(InvalidArgumentError):
            kmeans.run([], 1, 3)

    def test_negative_iterations(self):
        with pytest.raises(InvalidArgumentError):
            kmeans.run([(1, 2, 3)], 1, -1)

    def test_non_integer_k(self):
        with pytest.raises(InvalidArgumentError):
            kmeans.run([(1, 2, 3), (4, 5, 6)], 1.5, 3)

    def test_non_finite_samples(self):
        with pytest.raises(InvalidArgumentError):
            kmeans.run([(1, 2, 3), (float('nan'), 0, 0)], 1, 3)

    def test_malformed_samples(self):
        with pytest.raises(InvalidArgumentError):
            kmeans.run([(1, 2), (3, 4)], 1, 3)

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            kmeans.run([(1, 2, 3)], 2, 1)

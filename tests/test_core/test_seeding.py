"""
Тесты инициализации kmeans++.
"""

import numpy as np

from clustering.core.distance import l1_norm, l2_norm
from clustering.core.seeding import kmeans_plus_plus


class TestKMeansPlusPlus:
    """D²-взвешенный выбор начальных центров."""

    def test_first_center_uniform_index(self, sequence_source):
        X = np.array([[0.0], [1.0], [2.0], [3.0]])
        centers = np.zeros((1, 1))

        kmeans_plus_plus(X, l2_norm, sequence_source([0.6]), centers)

        # int(0.6 * 4) == 2
        np.testing.assert_array_equal(centers, [[2.0]])

    def test_upper_bound_on_tie(self, sequence_source):
        # квадраты расстояний до X[0]: [0, 1, 1, 0], накопленная сумма [0, 1, 2, 2]
        X = np.array([[0.0], [1.0], [-1.0], [0.0]])
        centers = np.zeros((2, 1))

        # 0.5 * 2 == 1.0: первый индекс со значением строго больше 1.0 имеет номер 2
        kmeans_plus_plus(X, l2_norm, sequence_source([0.0, 0.5]), centers)

        np.testing.assert_array_equal(centers, [[0.0], [-1.0]])

    def test_zero_draw_skips_zero_weight(self, sequence_source):
        X = np.array([[0.0], [1.0], [-1.0], [0.0]])
        centers = np.zeros((2, 1))

        kmeans_plus_plus(X, l2_norm, sequence_source([0.0, 0.0]), centers)

        np.testing.assert_array_equal(centers, [[0.0], [1.0]])

    def test_flat_cumulative_sum_picks_last(self, sequence_source):
        X = np.array([[5.0, 1.0], [5.0, 1.0], [5.0, 1.0]])
        centers = np.zeros((3, 2))

        kmeans_plus_plus(X, l1_norm, sequence_source([0.0, 0.3, 0.9]), centers)

        np.testing.assert_array_equal(centers, np.tile([5.0, 1.0], (3, 1)))

    def test_centers_are_batch_elements(self, small_blocks_dataset, generator):
        X, k = small_blocks_dataset
        centers = np.zeros((k, X.shape[1]))

        kmeans_plus_plus(X, l2_norm, generator, centers)

        for center in centers:
            assert np.any(np.all(X == center, axis=1))

    def test_one_metric_pass_per_new_center(self, small_blocks_dataset, generator):
        X, k = small_blocks_dataset
        centers = np.zeros((k, X.shape[1]))
        calls = []

        def counting_metric(a, b):
            calls.append(np.shape(a))
            return l2_norm(a, b)

        kmeans_plus_plus(X, counting_metric, generator, centers)

        assert calls.count(X.shape) == k - 1

    def test_spreads_over_separated_blocks(self, small_blocks_dataset, generator):
        X, k = small_blocks_dataset
        centers = np.zeros((k, X.shape[1]))

        kmeans_plus_plus(X, l2_norm, generator, centers)

        blocks = sorted(int(c[0] // 100) for c in centers)
        assert blocks == list(range(k))

    def test_pairwise_only_metric(self, small_blocks_dataset, generator):
        X, k = small_blocks_dataset
        centers = np.zeros((k, X.shape[1]))

        kmeans_plus_plus(X, lambda a, b: float(np.linalg.norm(a - b)), generator, centers)

        blocks = sorted(int(c[0] // 100) for c in centers)
        assert blocks == list(range(k))

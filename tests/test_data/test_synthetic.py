"""
Тесты генераторов синтетических батчей.
"""

import numpy as np
import pytest

from clustering.data.synthetic import block_slices, make_separated_blocks, make_uniform


class TestSeparatedBlocks:
    def test_shape_and_ranges(self):
        rng = np.random.default_rng(0)

        X = make_separated_blocks(103, 10, 4, rng)

        assert X.shape == (103, 4)
        for b, block in enumerate(block_slices(103, 10)):
            assert np.all(X[block] >= 100.0 * b)
            assert np.all(X[block] < 100.0 * b + 1.0)

    def test_remainder_joins_last_block(self):
        slices = block_slices(103, 10)

        assert slices[-1] == slice(90, 103)
        assert sum(s.stop - s.start for s in slices) == 103

    def test_reproducible(self):
        a = make_separated_blocks(50, 5, 2, np.random.default_rng(1))
        b = make_separated_blocks(50, 5, 2, np.random.default_rng(1))

        np.testing.assert_array_equal(a, b)

    @pytest.mark.parametrize("n_elements, n_blocks", [(10, 0), (3, 5)])
    def test_invalid(self, n_elements, n_blocks):
        with pytest.raises(ValueError):
            make_separated_blocks(n_elements, n_blocks, 2, np.random.default_rng(0))


class TestUniform:
    def test_scale(self):
        X = make_uniform(1000, 3, 1000.0, np.random.default_rng(0))

        assert X.shape == (1000, 3)
        assert X.min() >= 0.0
        assert X.max() < 1000.0

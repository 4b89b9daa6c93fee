"""
Общие фикстуры для всех тестов.
"""

import numpy as np
import pytest

from clustering.core.space import numpy_random_source
from clustering.data.synthetic import make_separated_blocks


@pytest.fixture
def generator():
    """Детерминированный источник равномерных чисел."""
    return numpy_random_source(42)


@pytest.fixture
def blocks_dataset():
    """10 разделимых блоков в 20D (как в исходном тесте разделимости)."""
    rng = np.random.default_rng(7)
    n_elements, n_blocks = 10003, 10
    X = make_separated_blocks(n_elements, n_blocks, 20, rng)
    return X, n_blocks


@pytest.fixture
def small_blocks_dataset():
    """4 разделимых блока по 50 элементов в 3D."""
    rng = np.random.default_rng(3)
    X = make_separated_blocks(200, 4, 3, rng)
    return X, 4


@pytest.fixture
def simple_2d_dataset():
    """Очень простой 2D датасет для базовых тестов."""
    X = np.array([
        [0.0, 0.0],
        [1.0, 1.0],
        [2.0, 2.0],
        [10.0, 10.0],
        [11.0, 11.0],
        [12.0, 12.0],
    ])
    initial_centroids = np.array([
        [0.5, 0.5],
        [11.0, 11.0],
    ])
    return X, initial_centroids


@pytest.fixture
def sequence_source():
    """Фабрика источников, отдающих заранее заданную последовательность."""

    def make(values):
        it = iter(values)
        return lambda: next(it)

    return make


@pytest.fixture
def partition():
    """Разбиение как множество множеств индексов (без учёта нумерации меток)."""

    def make(assignment):
        groups = {}
        for idx, label in enumerate(np.asarray(assignment).tolist()):
            groups.setdefault(label, set()).add(idx)
        return {frozenset(g) for g in groups.values()}

    return make

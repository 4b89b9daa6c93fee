"""
Векторное пространство фиксированной размерности.

Связывает размерность элементов, метрику и контракт источника случайных чисел.
Размерность проверяется во время выполнения: все элементы одного запуска
обязаны иметь одну и ту же ширину D.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Sequence

import numpy as np

from .distance import Distance, l2_norm

# Источник равномерных чисел из [0, 1). Движок никогда не создаёт его сам.
RandomSource = Callable[[], float]


@dataclass(frozen=True)
class TerminationCriteria:
    """Условия остановки: порог смещения центров и предел числа итераций."""

    epsilon: float
    max_iterations: int


def numpy_random_source(seed: int | None = None) -> RandomSource:
    """Источник случайных чисел на базе numpy.random.default_rng."""
    rng = np.random.default_rng(seed)

    def generator() -> float:
        return float(rng.random())

    return generator


class VectorSpace:
    """
    Пространство векторов размерности ``dim`` с привязанной метрикой.

    Упрощает подготовку входов движка: строит батчи и элементы нужной ширины,
    выделяет хранилище под центры и разметку и запускает кластеризацию.
    """

    def __init__(self, dim: int, metric: Distance = l2_norm) -> None:
        if dim <= 0:
            raise ValueError("dim must be positive")
        self.dim = dim
        self.metric = metric

    def element(self, values: Iterable[float]) -> np.ndarray:
        arr = np.asarray(list(values), dtype=np.float64)
        if arr.shape != (self.dim,):
            raise ValueError(f"Expected element of shape ({self.dim},), got {arr.shape}")
        return arr

    def batch(self, rows: Sequence[Iterable[float]] | np.ndarray) -> np.ndarray:
        arr = np.asarray(rows, dtype=np.float64)
        if arr.ndim != 2 or arr.shape[1] != self.dim:
            raise ValueError(f"Expected batch of shape (N, {self.dim}), got {arr.shape}")
        return arr

    def empty_centers(self, k: int) -> np.ndarray:
        return np.zeros((k, self.dim), dtype=np.float64)

    @staticmethod
    def empty_assignment(n: int) -> np.ndarray:
        return np.zeros(n, dtype=np.intp)

    def distance(self, a: np.ndarray, b: np.ndarray) -> np.ndarray | float:
        return self.metric(a, b)

    def cluster(
        self,
        elements: np.ndarray,
        criteria: TerminationCriteria,
        generator: RandomSource,
        centers: np.ndarray,
        assignment: np.ndarray,
        executor: Any | None = None,
        logger: logging.Logger | None = None,
    ) -> bool:
        """Запускает kmeans с метрикой этого пространства."""
        from .engine import kmeans

        return kmeans(
            elements,
            criteria,
            generator,
            centers,
            assignment,
            metric=self.metric,
            executor=executor,
            logger=logger,
        )

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Tuple

import numpy as np

from clustering.core.accumulator import ClusterAccumulator
from clustering.core.distance import Distance, block_distances, l2_norm
from clustering.core.seeding import kmeans_plus_plus
from clustering.core.space import RandomSource, TerminationCriteria
from clustering.core.validation import ValidationError, as_batch, validate_inputs
from clustering.metrics.timers import Timer


def assign_block(
    block: np.ndarray, centers: np.ndarray, metric: Distance
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Назначает каждый элемент блока ближайшему центру.

    Центры перебираются по порядку со строгим сравнением, поэтому при равных
    расстояниях побеждает центр с меньшим индексом.

    Returns:
        (labels, distances) формы (M,)
    """
    M = block.shape[0]
    shortest = np.full(M, np.inf, dtype=np.float64)
    closest = np.zeros(M, dtype=np.intp)

    for c in range(centers.shape[0]):
        dist = block_distances(metric, block, centers[c])
        closer = dist < shortest
        shortest[closer] = dist[closer]
        closest[closer] = c

    return closest, shortest


class KMeansBase(ABC):
    """
    Базовый класс движка кластеризации.

    Отвечает за валидацию, инициализацию kmeans++ и цикл Ллойда; реализации
    определяют только то, как выполняется шаг назначения с накоплением
    средних (в одном потоке или по чанкам на пуле).

    Собирает тайминги за один вызов fit/refine:
    - t_assign_total: время шага accumulate (назначение + онлайн-средние);
    - t_update_total: время пересчёта центров и проверки смещения;
    - t_iter_total: сумма двух предыдущих.
    """

    def __init__(
        self,
        metric: Distance = l2_norm,
        criteria: TerminationCriteria = TerminationCriteria(epsilon=1e-4, max_iterations=100),
        logger: Any | None = None,
    ):
        self.metric = metric
        self.criteria = criteria
        self.logger = logger or logging.getLogger("clustering")

        self.centroids: np.ndarray | None = None
        self.labels: np.ndarray | None = None

        self.t_assign_total: float = 0.0
        self.t_update_total: float = 0.0
        self.t_iter_total: float = 0.0

        self.n_iters_actual: int = 0
        self.last_movement: float = 0.0
        self.converged: bool = False

    def fit(
        self,
        elements: np.ndarray,
        generator: RandomSource,
        centers: np.ndarray,
        assignment: np.ndarray,
    ) -> bool:
        """
        Полный запуск: валидация, kmeans++ и цикл Ллойда.

        Args:
            elements: Батч формы (N, D), не изменяется
            generator: Источник равномерных чисел из [0, 1)
            centers: Хранилище (K, D); на выходе финальные центры
            assignment: Хранилище длины N; на выходе индексы кластеров

        Returns:
            True при успехе, False при ошибке валидации (входы не тронуты)
        """
        elements = self._validate(elements, centers, assignment)
        if elements is None:
            return False

        kmeans_plus_plus(elements, self.metric, generator, centers)
        self._run(elements, centers, assignment)
        return True

    def refine(
        self,
        elements: np.ndarray,
        centers: np.ndarray,
        assignment: np.ndarray,
    ) -> bool:
        """Цикл Ллойда, начиная с переданных центров (без kmeans++)."""
        elements = self._validate(elements, centers, assignment)
        if elements is None:
            return False

        self._run(elements, centers, assignment)
        return True

    def _validate(
        self, elements: Any, centers: np.ndarray, assignment: np.ndarray
    ) -> np.ndarray | None:
        """Батч float64 или None после записи диагностики в лог."""
        batch = as_batch(elements)
        if batch is None:
            error = ValidationError.DIMENSION_MISMATCH
        else:
            error = validate_inputs(batch, self.criteria, centers, assignment)
        if error is not None:
            self.logger.error(f"Clustering aborted: {error.value}")
            return None
        return batch

    def _run(self, elements: np.ndarray, centers: np.ndarray, assignment: np.ndarray) -> None:
        """
        Цикл Ллойда с остановкой по пределу итераций или по смещению центров.

        Кластер, которому на итерации не досталось ни одного элемента,
        сохраняет прежний центр и не вносит вклад в смещение.
        """
        max_iterations = self.criteria.max_iterations
        epsilon = self.criteria.epsilon

        # сбрасываем накопленные тайминги для нового запуска
        self.t_assign_total = 0.0
        self.t_update_total = 0.0
        self.t_iter_total = 0.0
        self.n_iters_actual = 0
        self.converged = False

        while True:
            with Timer() as t_assign:
                acc = self.accumulate(elements, centers, assignment)
            with Timer() as t_update:
                movement = self._recompute_centers(centers, acc)

            t_iter_elapsed = t_assign.elapsed + t_update.elapsed
            self.t_assign_total += t_assign.elapsed
            self.t_update_total += t_update.elapsed
            self.t_iter_total += t_iter_elapsed
            self.n_iters_actual += 1
            self.last_movement = movement

            i = self.n_iters_actual
            if i == 1 or i % 10 == 0:
                self.logger.debug(
                    f"  Iteration {i}/{max_iterations} "
                    f"(T_assign={t_assign.elapsed:.6f}s, "
                    f"T_update={t_update.elapsed:.6f}s, "
                    f"max_move={movement:.2e})"
                )

            if i >= max_iterations:
                self.logger.info(f"  Iteration limit reached ({max_iterations})")
                break

            if movement < epsilon:
                self.converged = True
                self.logger.info(
                    f"  Convergence reached after {i} iterations "
                    f"(max_move={movement:.2e} < epsilon={epsilon:.2e})"
                )
                break

        self.centroids = centers.copy()
        self.labels = np.asarray(assignment).copy()

    def _recompute_centers(self, centers: np.ndarray, acc: ClusterAccumulator) -> float:
        """Заменяет центры новыми средними и возвращает максимальное смещение."""
        movement = 0.0
        for k in np.flatnonzero(acc.populated):
            dist = float(self.metric(centers[k], acc.means[k]))
            movement = max(movement, dist)
            centers[k] = acc.means[k]
        return movement

    @abstractmethod
    def accumulate(
        self, elements: np.ndarray, centers: np.ndarray, assignment: np.ndarray
    ) -> ClusterAccumulator:
        """Шаг назначения: пишет метки в assignment и возвращает средние кластеров."""
        raise NotImplementedError

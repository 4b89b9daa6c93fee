# core/serial.py
from __future__ import annotations

from typing import Any

import numpy as np

from .accumulator import ClusterAccumulator
from .base import KMeansBase, assign_block
from .distance import Distance, l2_norm
from .space import TerminationCriteria

DEFAULT_BLOCK_SIZE = 4096


class KMeansSerial(KMeansBase):
    """
    Однопоточная реализация (baseline).

    Батч обходится последовательными блоками по ``block_size`` элементов
    (по умолчанию DEFAULT_BLOCK_SIZE). Каждый блок сразу назначается и
    вливается в бегущие средние кластеров онлайн-формулой, так что средние
    обновляются по ходу обхода, а не суммой с делением в конце. Размер блока
    ограничивает и память под промежуточные расстояния.
    """

    def __init__(
        self,
        metric: Distance = l2_norm,
        criteria: TerminationCriteria = TerminationCriteria(epsilon=1e-4, max_iterations=100),
        block_size: int = DEFAULT_BLOCK_SIZE,
        logger: Any | None = None,
    ) -> None:
        super().__init__(metric=metric, criteria=criteria, logger=logger)
        if block_size <= 0:
            raise ValueError("block_size must be positive")
        self.block_size = block_size

    def accumulate(
        self, elements: np.ndarray, centers: np.ndarray, assignment: np.ndarray
    ) -> ClusterAccumulator:
        N, D = elements.shape
        step = min(self.block_size, N)
        acc = ClusterAccumulator(centers.shape[0], D)

        for start in range(0, N, step):
            stop = min(start + step, N)
            block = elements[start:stop]
            labels, _ = assign_block(block, centers, self.metric)
            assignment[start:stop] = labels
            acc.absorb(block, labels)

        return acc

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, List, Optional

import numpy as np

from clustering.core.accumulator import ClusterAccumulator
from clustering.core.base import KMeansBase, assign_block
from clustering.core.distance import Distance, l2_norm
from clustering.core.executor import Executor
from clustering.core.space import TerminationCriteria


@dataclass(frozen=True)
class ThreadingConfig:
    """Параметры параллельного шага назначения."""

    chunk_size: Optional[int] = None


def _assign_chunk_worker(
    elements: np.ndarray,
    centers: np.ndarray,
    assignment: np.ndarray,
    chunk: slice,
    metric: Distance,
    partials: List[Optional[ClusterAccumulator]],
    slot: int,
) -> None:
    """
    Назначение и онлайн-средние для одного чанка.

    Батч и центры только читаются; воркер пишет лишь в свой срез assignment
    и в свою ячейку partials.
    """
    block = elements[chunk]
    labels, _ = assign_block(block, centers, metric)
    assignment[chunk] = labels

    acc = ClusterAccumulator(centers.shape[0], elements.shape[1])
    acc.absorb(block, labels)
    partials[slot] = acc


class KMeansThreaded(KMeansBase):
    """
    KMeans с шагом назначения, распределённым по чанкам на внешнем пуле потоков.

    От пула нужны только submit(fn, *args) и wait_all(); возвращаемое wait_all()
    значение не используется: частичные накопители чанки кладут в ячейки,
    которыми владеет движок. Необязательный атрибут ``n_workers`` задаёт число
    чанков, без него берётся os.cpu_count().
    """

    def __init__(
        self,
        executor: Executor,
        metric: Distance = l2_norm,
        criteria: TerminationCriteria = TerminationCriteria(epsilon=1e-4, max_iterations=100),
        threading: ThreadingConfig = ThreadingConfig(),
        logger: Any | None = None,
    ) -> None:
        super().__init__(metric=metric, criteria=criteria, logger=logger)
        self.executor = executor
        self.threading = threading

    # --- Разбиение ---

    def _make_chunks(self, N: int) -> List[slice]:
        """Разбиение батча на непрерывные чанки."""
        if self.threading.chunk_size is None:
            n_workers = getattr(self.executor, "n_workers", None) or os.cpu_count() or 1
            n_chunks = max(1, min(int(n_workers), N))
            bounds = np.linspace(0, N, n_chunks + 1).astype(int)
            chunks = [slice(a, b) for a, b in zip(bounds[:-1], bounds[1:])]
        else:
            cs = int(self.threading.chunk_size)
            if cs <= 0:
                raise ValueError("chunk_size must be positive")
            chunks = [slice(i, min(i + cs, N)) for i in range(0, N, cs)]
        return [chunk for chunk in chunks if chunk.stop > chunk.start]

    # ---------- Assignment (parallel over chunks) ----------

    def accumulate(
        self, elements: np.ndarray, centers: np.ndarray, assignment: np.ndarray
    ) -> ClusterAccumulator:
        chunks = self._make_chunks(elements.shape[0])
        partials: List[Optional[ClusterAccumulator]] = [None] * len(chunks)

        for slot, chunk in enumerate(chunks):
            self.executor.submit(
                _assign_chunk_worker,
                elements, centers, assignment, chunk, self.metric, partials, slot,
            )

        # барьер: редукция только после завершения всех чанков
        self.executor.wait_all()
        if any(part is None for part in partials):
            raise RuntimeError("executor returned before all chunk tasks completed")
        return ClusterAccumulator.reduce(partials)

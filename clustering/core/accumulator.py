"""
Накопители средних по кластерам.

Среднее обновляется онлайн (без повторного прохода по данным), а частичные
накопители чанков сводятся коммутативной редукцией: сумма взвешенных средних,
сумма счётчиков, деление.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np


class ClusterAccumulator:
    """Бегущее среднее и число элементов для каждого из K кластеров."""

    def __init__(self, k: int, dim: int) -> None:
        self.means = np.zeros((k, dim), dtype=np.float64)
        self.counts = np.zeros(k, dtype=np.int64)

    @property
    def populated(self) -> np.ndarray:
        return self.counts > 0

    def absorb(self, block: np.ndarray, labels: np.ndarray) -> None:
        """
        Онлайн-обновление блоком элементов.

        Для каждого кластера: mean = mean * (n_old / n_new) + block_mean * (m / n_new),
        где m: число элементов блока в кластере. Для блока из одного элемента это
        mean * (n - 1) / n + element / n. Блоки вливаются по мере обхода батча,
        повторного прохода по данным нет.
        """
        for k in range(self.means.shape[0]):
            mask = labels == k
            added = int(np.count_nonzero(mask))
            if added == 0:
                continue
            old = int(self.counts[k])
            total = old + added
            block_mean = block[mask].mean(axis=0)
            self.means[k] *= old / total
            self.means[k] += block_mean * (added / total)
            self.counts[k] = total

    @classmethod
    def reduce(cls, parts: Iterable["ClusterAccumulator"]) -> "ClusterAccumulator":
        """Сводит частичные накопители: (Σ mean_i * n_i) / Σ n_i."""
        parts = list(parts)
        if not parts:
            raise ValueError("nothing to reduce")

        k, dim = parts[0].means.shape
        result = cls(k, dim)
        sums = np.zeros((k, dim), dtype=np.float64)

        for part in parts:
            sums += part.means * part.counts[:, None]
            result.counts += part.counts

        populated = result.populated
        result.means[populated] = sums[populated] / result.counts[populated, None]
        return result

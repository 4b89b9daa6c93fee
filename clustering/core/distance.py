"""
Метрики расстояния для кластеризации.

Каждая метрика сворачивает разность по последней оси, поэтому одна и та же
функция работает и для пары векторов (D,) × (D,) -> скаляр, и для целого блока
(N, D) × (D,) -> (N,). Движок вызывает метрику один раз на центр для блока
элементов: это самый горячий участок алгоритма. Метрика, умеющая только
пару векторов, тоже подходит: block_distances посчитает её построчно.
"""

from __future__ import annotations

from typing import Dict, Protocol

import numpy as np


class Distance(Protocol):
    """Протокол метрики: чистая, симметричная, неотрицательная функция."""

    def __call__(self, a: np.ndarray, b: np.ndarray) -> np.ndarray | float:
        ...


def l1_norm(a: np.ndarray, b: np.ndarray) -> np.ndarray | float:
    """Манхэттенское расстояние: сумма модулей разностей."""
    return np.sum(np.abs(b - a), axis=-1)


def l2_norm(a: np.ndarray, b: np.ndarray) -> np.ndarray | float:
    """Евклидово расстояние."""
    diff = b - a
    return np.sqrt(np.einsum("...d,...d->...", diff, diff))


def block_distances(metric: Distance, block: np.ndarray, center: np.ndarray) -> np.ndarray:
    """
    Расстояния от каждого элемента блока (M, D) до ``center``.

    Сначала метрика вызывается на всём блоке. Если она не свернула блок
    в (M,) (вернула скаляр или другую форму, либо первая строка расходится
    с попарным вызовом), считаем попарно по строкам.
    """
    M = block.shape[0]
    try:
        dist = np.asarray(metric(block, center), dtype=np.float64)
    except (TypeError, ValueError):
        dist = None

    vectorized = (
        dist is not None
        and dist.shape == (M,)
        and np.isclose(dist[0], float(metric(block[0], center)), equal_nan=True)
    )
    if not vectorized:
        dist = np.fromiter(
            (float(metric(row, center)) for row in block), dtype=np.float64, count=M
        )
    return dist


METRICS: Dict[str, Distance] = {
    "l1": l1_norm,
    "l2": l2_norm,
}

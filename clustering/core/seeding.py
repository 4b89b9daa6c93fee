"""
Инициализация центров методом kmeans++ (D²-взвешивание).

Каждый следующий центр выбирается из элементов батча с вероятностью,
пропорциональной квадрату расстояния до ближайшего уже выбранного центра.
"""

from __future__ import annotations

import numpy as np

from .distance import Distance, block_distances
from .space import RandomSource


def kmeans_plus_plus(
    elements: np.ndarray,
    metric: Distance,
    generator: RandomSource,
    centers: np.ndarray,
) -> None:
    """
    Заполняет ``centers`` начальными центрами, выбранными из ``elements``.

    Выбор по накопленной сумме квадратов расстояний идёт с семантикой
    upper bound: берётся первый индекс, чья накопленная сумма строго больше
    розыгрыша. Если сумма не растёт (все элементы совпадают с уже выбранными
    центрами), берётся последний элемент батча.

    Args:
        elements: Батч формы (N, D)
        metric: Метрика расстояния
        generator: Источник равномерных чисел из [0, 1)
        centers: Хранилище (K, D), перезаписывается на месте
    """
    N = elements.shape[0]
    K = centers.shape[0]

    first = min(int(generator() * N), N - 1)
    centers[0] = elements[first]

    # Квадрат расстояния до ближайшего выбранного центра, обновляется инкрементально
    nearest_sq = np.full(N, np.inf, dtype=np.float64)

    for c in range(1, K):
        dist = block_distances(metric, elements, centers[c - 1])
        np.minimum(nearest_sq, dist * dist, out=nearest_sq)

        cumulative = np.cumsum(nearest_sq)
        threshold = generator() * cumulative[-1]
        idx = int(np.searchsorted(cumulative, threshold, side="right"))

        centers[c] = elements[min(idx, N - 1)]

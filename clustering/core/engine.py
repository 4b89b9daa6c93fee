"""Точка входа движка кластеризации."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from .distance import Distance, l2_norm
from .serial import KMeansSerial
from .space import RandomSource, TerminationCriteria
from .threaded import KMeansThreaded, ThreadingConfig


def kmeans(
    elements: np.ndarray,
    criteria: TerminationCriteria,
    generator: RandomSource,
    centers: np.ndarray,
    assignment: np.ndarray,
    metric: Distance = l2_norm,
    executor: Any | None = None,
    logger: logging.Logger | None = None,
    threading: ThreadingConfig | None = None,
) -> bool:
    """
    Кластеризует ``elements`` на ``len(centers)`` групп.

    Без ``executor`` работает в вызывающем потоке, иначе шаг назначения
    распределяется по чанкам на переданном пуле.

    Args:
        elements: Батч формы (N, D)
        criteria: Условия остановки
        generator: Источник равномерных чисел из [0, 1), вызывается только при инициализации
        centers: Хранилище (K, D), на выходе финальные центры
        assignment: Хранилище длины N, на выходе индексы кластеров
        metric: Метрика расстояния (l1_norm, l2_norm или своя)
        executor: Пул с контрактом submit/wait_all
        logger: Логгер для диагностики
        threading: Параметры разбиения на чанки

    Returns:
        True при успехе, False при ошибке валидации
    """
    if executor is None:
        model = KMeansSerial(metric=metric, criteria=criteria, logger=logger)
    else:
        model = KMeansThreaded(
            executor,
            metric=metric,
            criteria=criteria,
            threading=threading or ThreadingConfig(),
            logger=logger,
        )
    return model.fit(elements, generator, centers, assignment)

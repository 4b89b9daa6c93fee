"""
Проверка входных данных перед запуском кластеризации.

Ошибки валидации являются обычным результатом, а не исключением: движок пишет
диагностику в лог и возвращает False, ничего не изменив в centers/assignment.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

import numpy as np

from .space import TerminationCriteria


class ValidationError(str, Enum):
    EMPTY_BATCH = "elements is empty"
    INVALID_TERMINATION_CRITERIA = "termination criteria is incorrect"
    INVALID_CLUSTER_COUNT = "number of clusters is less than 1"
    ASSIGNMENT_SIZE_MISMATCH = "assignment must be of the same size as elements"
    ZERO_DIMENSION = "elements must have at least one dimension"
    DIMENSION_MISMATCH = "elements and centers must share the same dimension"
    INVALID_OUTPUT_STORAGE = (
        "centers must be a writable float array and assignment a writable integer array"
    )


def as_batch(elements: Any) -> np.ndarray | None:
    """
    Приводит вход к float64-массиву без копии, если это уже возможно.

    Returns:
        Массив или None, если вход не приводится к прямоугольному числовому батчу
    """
    try:
        return np.asarray(elements, dtype=np.float64)
    except (TypeError, ValueError):
        return None


def validate_inputs(
    elements: np.ndarray,
    criteria: TerminationCriteria,
    centers: np.ndarray,
    assignment: np.ndarray,
) -> ValidationError | None:
    """
    Проверяет предусловия движка в фиксированном порядке.

    Returns:
        Первая найденная ошибка или None, если входы корректны
    """
    if elements.ndim == 0 or elements.shape[0] == 0:
        return ValidationError.EMPTY_BATCH

    if criteria.max_iterations < 1 or criteria.epsilon < 0:
        return ValidationError.INVALID_TERMINATION_CRITERIA
    if criteria.max_iterations > 1 and criteria.epsilon <= 0:
        return ValidationError.INVALID_TERMINATION_CRITERIA

    if not isinstance(centers, np.ndarray) or not isinstance(assignment, np.ndarray):
        return ValidationError.INVALID_OUTPUT_STORAGE

    if centers.ndim == 0 or centers.shape[0] < 1:
        return ValidationError.INVALID_CLUSTER_COUNT

    if assignment.ndim != 1 or assignment.shape[0] != elements.shape[0]:
        return ValidationError.ASSIGNMENT_SIZE_MISMATCH

    if elements.ndim != 2:
        return ValidationError.DIMENSION_MISMATCH
    if elements.shape[1] == 0:
        return ValidationError.ZERO_DIMENSION

    if centers.ndim != 2 or centers.shape[1] != elements.shape[1]:
        return ValidationError.DIMENSION_MISMATCH

    if not (np.issubdtype(centers.dtype, np.floating) and centers.flags.writeable):
        return ValidationError.INVALID_OUTPUT_STORAGE
    if not (np.issubdtype(assignment.dtype, np.integer) and assignment.flags.writeable):
        return ValidationError.INVALID_OUTPUT_STORAGE

    return None

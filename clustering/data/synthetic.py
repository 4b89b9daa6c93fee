"""
Синтетические батчи для тестов и бенчмарка.

- make_separated_blocks: непрерывные блоки, заведомо разделимые на кластеры;
- make_uniform: равномерный шум без выраженной структуры.
"""

from __future__ import annotations

import numpy as np


def make_separated_blocks(
    n_elements: int,
    n_blocks: int,
    dim: int,
    rng: np.random.Generator,
) -> np.ndarray:
    """
    Строит батч из ``n_blocks`` непрерывных блоков вида ``100 * b + U[0, 1)``.

    Размер блока ``n_elements // n_blocks``; остаток от деления достаётся
    последнему блоку.

    Args:
        n_elements: Общее число элементов
        n_blocks: Число блоков (ожидаемых кластеров)
        dim: Размерность
        rng: Генератор numpy

    Returns:
        Массив формы (n_elements, dim)
    """
    if n_blocks <= 0 or n_elements < n_blocks:
        raise ValueError("n_elements must be at least n_blocks and n_blocks must be positive")

    step = n_elements // n_blocks
    block_index = np.minimum(np.arange(n_elements) // step, n_blocks - 1)
    noise = rng.random((n_elements, dim))
    return 100.0 * block_index[:, None] + noise


def block_slices(n_elements: int, n_blocks: int) -> list[slice]:
    """Границы блоков, построенных make_separated_blocks."""
    step = n_elements // n_blocks
    starts = [b * step for b in range(n_blocks)]
    stops = starts[1:] + [n_elements]
    return [slice(a, b) for a, b in zip(starts, stops)]


def make_uniform(
    n_elements: int,
    dim: int,
    scale: float,
    rng: np.random.Generator,
) -> np.ndarray:
    """Равномерный батч ``scale * U[0, 1)`` формы (n_elements, dim)."""
    return scale * rng.random((n_elements, dim))

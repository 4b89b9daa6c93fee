"""
Метрики производительности для сравнения однопоточного и параллельного движков.
"""

from __future__ import annotations


def speedup(t_serial: float, t_parallel: float) -> float:
    """
    Ускорение параллельного запуска: t_serial / t_parallel.

    Raises:
        ZeroDivisionError: Если t_parallel равно нулю
    """
    if t_parallel == 0:
        raise ZeroDivisionError("Parallel time cannot be zero")
    return t_serial / t_parallel


def efficiency(speedup: float, n_workers: int) -> float:
    """
    Параллельная эффективность: speedup / n_workers; 1.0 соответствует линейному ускорению.

    Raises:
        ZeroDivisionError: Если n_workers равно нулю
    """
    if n_workers == 0:
        raise ZeroDivisionError("Number of workers cannot be zero")
    return speedup / n_workers


def throughput(N: int, K: int, D: int, n_iters: int, total_time: float) -> float:
    """
    Пропускная способность: (N × K × D × n_iters) / total_time.

    Грубая оценка числа покоординатных операций метрики в секунду.

    Raises:
        ZeroDivisionError: Если total_time равно нулю
    """
    if total_time == 0:
        raise ZeroDivisionError("Total time cannot be zero")
    return (N * K * D * n_iters) / total_time

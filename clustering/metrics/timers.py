"""
Таймер для замеров фаз кластеризации.

Используется движком для таймингов шага назначения и пересчёта центров,
а также бенчмарком для времени одного запуска.
"""
from __future__ import annotations

import time
from typing import Any


class Timer:
    """
    Контекстный менеджер на time.perf_counter().

    Пример:
        with Timer() as t:
            model.fit(...)
        t.elapsed  # секунды
    """

    def __init__(self) -> None:
        self.start: float = 0.0
        self.end: float = 0.0
        self.elapsed: float = 0.0

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed * 1000.0

    def __enter__(self) -> Timer:
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args: Any) -> None:
        self.end = time.perf_counter()
        self.elapsed = self.end - self.start

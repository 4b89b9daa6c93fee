"""
Абстракция пула воркеров для параллельного шага назначения.

Движку нужны только две операции: отправить единицу работы и дождаться всех
отправленных. Пул создаёт и закрывает вызывающий код.
"""

from __future__ import annotations

import os
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Any, Callable, List, Protocol


class Executor(Protocol):
    """
    Контракт пула: submit(...) и wait_all().

    wait_all() блокирует до завершения всех отправленных задач; его результат
    движку не нужен. Пул может дополнительно объявить атрибут ``n_workers``,
    тогда батч режется на столько же чанков.
    """

    def submit(self, fn: Callable[..., Any], *args: Any) -> Any:
        ...

    def wait_all(self) -> Any:
        ...


class ThreadPoolAdapter:
    """
    Обёртка над concurrent.futures.ThreadPoolExecutor.

    wait_all() блокирует вызывающий поток до завершения всех задач, отправленных
    после предыдущего wait_all(), и возвращает их результаты в порядке отправки.
    Исключение из задачи пробрасывается вызывающему.
    """

    def __init__(self, n_workers: int | None = None) -> None:
        self.n_workers = max(1, int(n_workers or os.cpu_count() or 1))
        self._pool = ThreadPoolExecutor(
            max_workers=self.n_workers, thread_name_prefix="clustering"
        )
        self._pending: List[Future] = []

    def submit(self, fn: Callable[..., Any], *args: Any) -> None:
        self._pending.append(self._pool.submit(fn, *args))

    def wait_all(self) -> List[Any]:
        pending, self._pending = self._pending, []
        wait(pending)
        # result() пробрасывает исключение задачи
        return [future.result() for future in pending]

    def close(self) -> None:
        self._pool.shutdown(wait=True)

    def __enter__(self) -> ThreadPoolAdapter:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

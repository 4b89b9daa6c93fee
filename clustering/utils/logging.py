import logging
from typing import Any, Dict


def setup_logger(level: int = logging.INFO) -> logging.Logger:
    """
    Настраивает логгер проекта ``clustering``.

    Повторный вызов не добавляет второй обработчик.

    :param level: минимальный уровень логирования
    :return: настроенный :class:`logging.Logger`
    """
    logger = logging.getLogger("clustering")
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "[%(asctime)s] %(levelname)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.propagate = False

    return logger


def format_run_prefix(meta: Dict[str, Any]) -> str:
    """
    Префикс для логов бенчмарка.

    Ожидает ключи ``N``, ``D``, ``K`` и опционально ``metric``.
    """
    return (
        f"[N={meta['N']} D={meta['D']} K={meta['K']} "
        f"metric={meta.get('metric', 'l2')}]"
    )

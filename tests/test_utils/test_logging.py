"""
Тесты настройки логирования.
"""

import logging

import pytest

from clustering.utils.logging import format_run_prefix, setup_logger


@pytest.fixture
def restore_project_logger():
    logger = logging.getLogger("clustering")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


class TestSetupLogger:
    def test_single_handler(self, restore_project_logger):
        restore_project_logger.handlers = []

        logger = setup_logger(logging.DEBUG)
        setup_logger(logging.DEBUG)

        assert logger is restore_project_logger
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
        assert logger.propagate is False


class TestFormatRunPrefix:
    def test_prefix(self):
        meta = {"N": 10003, "D": 20, "K": 10, "metric": "l1"}
        assert format_run_prefix(meta) == "[N=10003 D=20 K=10 metric=l1]"

    def test_default_metric(self):
        assert format_run_prefix({"N": 1, "D": 2, "K": 3}) == "[N=1 D=2 K=3 metric=l2]"

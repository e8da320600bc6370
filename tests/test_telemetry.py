"""Tests for logging setup and request correlation ids."""

import logging
import threading

import pytest
import structlog

from maasapi.config import MAASSettings
from maasapi.telemetry import next_request_id, setup_logging


@pytest.fixture
def restore_logging():
    logger = logging.getLogger("maasapi")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    structlog.reset_defaults()


def test_request_ids_increase():
    first = next_request_id()
    second = next_request_id()
    assert second > first


def test_request_ids_are_unique_across_threads():
    seen = []
    lock = threading.Lock()

    def worker():
        ids = [next_request_id() for _ in range(200)]
        with lock:
            seen.extend(ids)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(seen) == len(set(seen)) == 1600


@pytest.mark.parametrize("log_format", ["console", "json"])
def test_setup_logging(restore_logging, log_format):
    setup_logging(MAASSettings(log_level="DEBUG", log_format=log_format))
    assert restore_logging.level == logging.DEBUG
    [handler] = restore_logging.handlers
    assert isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)

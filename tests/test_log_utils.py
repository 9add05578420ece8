# tests/test_log_utils.py
"""Tests for logging configuration."""

import logging

import pytest

from knowledge_inbox.log_utils import NOISY_LOGGERS, configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_installs_single_handler(restore_root_logger):
    configure_logging(logging.DEBUG)
    configure_logging(logging.INFO)

    assert len(restore_root_logger.handlers) == 1
    assert restore_root_logger.level == logging.INFO


def test_accepts_level_names(restore_root_logger):
    configure_logging("WARNING")

    assert restore_root_logger.level == logging.WARNING


def test_quiets_third_party_loggers(restore_root_logger):
    configure_logging(logging.DEBUG)

    for name in NOISY_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING

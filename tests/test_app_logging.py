"""Tests for logging configuration."""

import logging

from track_my_macros.app_logging import configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("track_my_macros")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging(logging.WARNING)
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert logger.level == logging.WARNING


def test_configure_logging_sets_level() -> None:
    configure_logging(logging.DEBUG)

    logger = logging.getLogger("track_my_macros")
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_child_loggers_share_the_handler() -> None:
    configure_logging(logging.INFO)

    child = logging.getLogger("track_my_macros.services.energy")
    assert child.getEffectiveLevel() == logging.INFO
    assert not child.handlers
    assert child.hasHandlers()

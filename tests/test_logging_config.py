"""Tests for the mappoints logging setup."""

import logging

import pytest

from mappoints.app.logging_config import LOGGER_NAME, setup_logging


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    yield logger
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.NOTSET)


class TestSetupLogging:
    def test_level_by_name(self, clean_logger):
        setup_logging("debug")
        assert clean_logger.level == logging.DEBUG

    def test_unknown_level_name(self, clean_logger):
        with pytest.raises(ValueError):
            setup_logging("chatty")

    def test_repeat_call_replaces_handlers(self, clean_logger):
        setup_logging(logging.INFO)
        setup_logging(logging.WARNING)
        assert len(clean_logger.handlers) == 1
        assert clean_logger.handlers[0].level == logging.WARNING

    def test_log_file(self, clean_logger, tmp_path):
        path = tmp_path / "run.log"
        setup_logging(logging.INFO, str(path))
        logging.getLogger("mappoints.views.map_points").info("saved 3 points")
        for h in clean_logger.handlers:
            h.flush()
        assert "saved 3 points" in path.read_text(encoding="utf-8")

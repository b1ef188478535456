import logging

from maplayout.logger import LOGGER_NAME, logger, setup_logging


def test_records_are_not_passed_to_the_root_logger():
    assert logger.name == LOGGER_NAME
    assert not logger.propagate


def test_setup_logging_replaces_handlers(tmp_path):
    log_file = tmp_path / "layout.log"
    try:
        setup_logging(logging.DEBUG, str(log_file))
        setup_logging(logging.DEBUG, str(log_file))

        assert len(logger.handlers) == 2
        assert not logger.propagate

        logger.debug("canvas 700 x 350")
        for handler in logger.handlers:
            handler.flush()
        assert "canvas 700 x 350" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in logger.handlers:
            handler.close()
        setup_logging()

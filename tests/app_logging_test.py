"""Application logger setup."""

import logging

from acft.app_logging import LOGGER_NAME, setup_app_logging


def test_setup_app_logging_console_and_file(tmp_path, monkeypatch):
    monkeypatch.delenv("ACFT_LOG_FILE", raising=False)
    logger = logging.getLogger(LOGGER_NAME)
    saved = list(logger.handlers)
    for h in saved:
        logger.removeHandler(h)
    log_file = tmp_path / "logs" / "app.log"
    try:
        logger = setup_app_logging(level="warning", log_file=log_file)
        assert len(logger.handlers) == 2
        console, file_handler = logger.handlers
        assert console.level == logging.WARNING
        assert file_handler.level == logging.DEBUG

        # Second call is a no-op
        assert setup_app_logging() is logger
        assert len(logger.handlers) == 2

        logging.getLogger("acft.scoring.engine").debug("built table")
        file_handler.flush()
        assert "built table" in log_file.read_text(encoding="utf-8")
    finally:
        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()
        for h in saved:
            logger.addHandler(h)

import logging
import logging.handlers
import structlog
from app.logging_conf import QUIET_LOGGERS, configure_logging
from app.settings import settings


def test_root_logger_writes_json_file():
    """
    The root logger gets a rotating file handler under LOG_DIR formatted by structlog.
    """
    configure_logging()

    root_logger = logging.getLogger()
    root_handlers = [
        h
        for h in root_logger.handlers
        if isinstance(h, logging.handlers.RotatingFileHandler)
    ]

    assert len(root_handlers) > 0
    handler = root_handlers[0]
    assert handler.baseFilename.endswith("app.json")
    assert settings.LOG_DIR.rstrip("/").split("/")[-1] in handler.baseFilename
    assert handler.formatter.__class__.__name__ == "ProcessorFormatter"


def test_structlog_logger_emits_without_error():
    configure_logging()
    logger = structlog.get_logger()

    # Only checks that the processor chain accepts key/value events
    logger.info("automated_test_log", value="check_me")


def test_storage_and_upload_loggers_are_quieted():
    configure_logging()
    for name in QUIET_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING


def test_uvicorn_loggers_do_not_propagate():
    configure_logging()
    for name in ("uvicorn.access", "uvicorn.error"):
        uvicorn_logger = logging.getLogger(name)
        assert not uvicorn_logger.propagate
        assert len(uvicorn_logger.handlers) == 2

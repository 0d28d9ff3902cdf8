import logging
import logging.config
import structlog

from app.settings import settings
from pathlib import Path

LOG_FILE_NAME = "app.json"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5

# Loggers that only matter when something is wrong with storage or uploads
QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "python_multipart")

# Stamped onto catalog records and foreign (stdlib/uvicorn) records alike
SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]


def _formatters() -> dict:
    return {
        "json": {
            "()": structlog.stdlib.ProcessorFormatter,
            "processor": structlog.processors.JSONRenderer(),
            "foreign_pre_chain": SHARED_PROCESSORS,
        },
        "colored": {
            "()": structlog.stdlib.ProcessorFormatter,
            "processor": structlog.dev.ConsoleRenderer(colors=True),
            "foreign_pre_chain": SHARED_PROCESSORS,
        },
    }


def _handlers(log_dir: Path, level: str, json_console: bool) -> dict:
    return {
        "console": {
            "level": level,
            "class": "logging.StreamHandler",
            "formatter": "json" if json_console else "colored",
        },
        # Request and game-store events, always JSON for later inspection
        "file": {
            "level": level,
            "class": "logging.handlers.RotatingFileHandler",
            "filename": str(log_dir / LOG_FILE_NAME),
            "mode": "a",
            "maxBytes": LOG_FILE_MAX_BYTES,
            "backupCount": LOG_FILE_BACKUPS,
            "formatter": "json",
            "encoding": "utf-8",
        },
    }


def configure_logging():
    """
    Route catalog, uvicorn and storage logs through structlog formatters.

    Console output follows LOG_JSON_FORMAT; the rotating file under LOG_DIR
    is always JSON.
    """
    level = settings.LOG_LEVEL.upper()
    log_dir = Path(settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)

    both = ["console", "file"]
    loggers = {
        "": {"handlers": both, "level": level, "propagate": True},
        "uvicorn.access": {"handlers": both, "level": "INFO", "propagate": False},
        "uvicorn.error": {"handlers": both, "level": "INFO", "propagate": False},
    }
    for name in QUIET_LOGGERS:
        loggers[name] = {"level": "WARNING"}

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": _formatters(),
            "handlers": _handlers(log_dir, level, settings.LOG_JSON_FORMAT),
            "loggers": loggers,
        }
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *SHARED_PROCESSORS,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

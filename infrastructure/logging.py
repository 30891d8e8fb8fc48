import logging
import logging.handlers
import sys

import structlog

from infrastructure.config import Settings, settings

# Client libraries whose INFO output is one line per HTTP call or SQL statement
QUIET_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "fsspec")

SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi")


def setup_logging(config: Settings = settings) -> None:
    """Configure unified logging for structlog, uvicorn, and standard library."""
    config.log_dir.mkdir(parents=True, exist_ok=True)
    log_file = config.log_dir / f"{config.app_env}.log"

    common_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if config.app_env == "development":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            *common_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=common_processors,
        processor=renderer,
    )

    # Handlers
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    file_handler = logging.handlers.TimedRotatingFileHandler(
        log_file,
        when="midnight",
        interval=1,
        backupCount=7,
    )
    file_handler.setFormatter(formatter)

    # Root Logger
    root_logger = logging.getLogger()
    root_logger.handlers = [stream_handler, file_handler]
    root_logger.setLevel(config.log_level.upper())

    # Intercept Uvicorn/FastAPI logs
    for logger_name in SERVER_LOGGERS:
        logging_logger = logging.getLogger(logger_name)
        logging_logger.handlers = [stream_handler, file_handler]
        logging_logger.propagate = False

    # Per-request client chatter only shows up when LOG_LEVEL is DEBUG
    quiet_level = logging.DEBUG if root_logger.level <= logging.DEBUG else logging.WARNING
    for logger_name in QUIET_LOGGERS:
        logging.getLogger(logger_name).setLevel(quiet_level)

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

LOGGER_NAME = "events_api"
LOG_FILE_NAME = "app.log"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _current_log_file(logger: logging.Logger) -> str | None:
    for handler in logger.handlers:
        if isinstance(handler, RotatingFileHandler):
            return handler.baseFilename
    return None


def _drop_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logger(name=LOGGER_NAME, log_dir=None, level=logging.INFO):
    """
    Route `name` to stdout and to <log_dir>/app.log (rotating, 5MB x 3 backups).

    Calling again with the same directory only updates the level. A different
    directory replaces the existing handlers, so the config loaded by `serve`
    takes over from the import-time defaults. APP_LOG_DIR sets the default dir.
    """
    log_dir = log_dir or os.getenv("APP_LOG_DIR", "logs")
    log_file = os.path.abspath(os.path.join(log_dir, LOG_FILE_NAME))

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if _current_log_file(logger) == log_file:
        return logger

    _drop_handlers(logger)
    os.makedirs(log_dir, exist_ok=True)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    file_handler = RotatingFileHandler(
        log_file, maxBytes=5*1024*1024, backupCount=3
    )
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    return logger

# Shared by every module; `serve` reconfigures it from settings.
logger = setup_logger()

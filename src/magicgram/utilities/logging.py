import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from magicgram.utilities.env.parsing import _env_flag

LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
LOG_DIR_ENV_VAR = "MAGICGRAM_LOG_DIR"
LOG_TO_FILE_ENV_VAR = "MAGICGRAM_LOG_TO_FILE"
DEFAULT_LOG_SUBDIR = Path(".magicgram") / "logs"
MAX_LOG_BYTES = 5 * 1024 * 1024  # 5 MiB
BACKUP_COUNT = 3
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_log_directory() -> Path:
    """Return the directory where log files should be written."""

    log_dir = os.getenv(LOG_DIR_ENV_VAR)
    if log_dir:
        path = Path(log_dir).expanduser()
    else:
        path = Path.home() / DEFAULT_LOG_SUBDIR

    path.mkdir(parents=True, exist_ok=True)
    return path


def _log_filename(logger_name: str) -> str:
    # "magicgram.text.layout" -> "magicgram_text_layout.log"
    stem = logger_name.replace(os.sep, "_").replace("/", "_")
    stem = "_".join(part for part in stem.split(".") if part)
    return f"{stem or 'root'}.log"


def _build_handlers(logger_name: str) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if _env_flag(LOG_TO_FILE_ENV_VAR, default=True):
        handlers.append(
            RotatingFileHandler(
                _resolve_log_directory() / _log_filename(logger_name),
                maxBytes=MAX_LOG_BYTES,
                backupCount=BACKUP_COUNT,
                encoding="utf-8",
            )
        )
    return handlers


def _configure_logger(logger: logging.Logger, log_level: str) -> None:
    level = getattr(logging, log_level, logging.INFO)
    logger.setLevel(level)

    if logger.handlers:
        # Already configured by an earlier get_logger call or by the host app.
        return

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in _build_handlers(logger.name):
        handler.setFormatter(formatter)
        handler.setLevel(level)
        logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger with a stream handler and, unless
    ``MAGICGRAM_LOG_TO_FILE`` is false, a rotating file handler."""

    log_level = os.getenv(LOG_LEVEL_ENV_VAR, "INFO").upper()
    logger = logging.getLogger(name)
    _configure_logger(logger, log_level)
    return logger

"""Logging configuration for Talent Agent."""
import logging
import logging.handlers
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"

# Rotating file limits
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 3

# Third-party loggers held at WARNING so request chatter stays out of CLI output.
QUIET_LOGGERS = ("aiohttp", "asyncio", "charset_normalizer")


def resolve_level(level: str | int | None) -> int:
    """Map "debug", "INFO", 10, ... to a logging level; unknown names give INFO."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level or "").strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _file_handler(log_file: str) -> logging.Handler:
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.handlers.RotatingFileHandler(
        path,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )


def setup_logging(
    level: str | int = "INFO",
    log_file: str | None = None,
) -> None:
    """Configure root logging for the CLI.

    Does nothing when the root logger already has handlers, so tests and
    embedding applications keep their own setup.

    Args:
        level: Level name (any case) or number
        log_file: Optional path for a rotating log file
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(resolve_level(level))
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(_file_handler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

import logging
import sys
from typing import Optional, Union

LOGGER_NAME = "zod_core"
DEFAULT_FORMAT = "%(name)s - %(levelname)s - %(message)s"

LevelLike = Union[int, str]


def to_level(level: LevelLike, default: int = logging.INFO) -> int:
    """Accept ``logging.DEBUG`` as well as ``"debug"``; unknown names map to ``default``."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else default


class _BelowLevelFilter(logging.Filter):
    def __init__(self, threshold: int) -> None:
        super().__init__()
        self._threshold = threshold

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self._threshold


def configure_split_stream_logging(
    *,
    level: LevelLike = logging.INFO,
    stderr_level: LevelLike = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
    logger_name: str = LOGGER_NAME,
) -> logging.Logger:
    """Attach stdout/stderr handlers to the ``zod_core`` logger.

    Records below ``stderr_level`` go to stdout, the rest to stderr. Only the
    package logger is touched so embedding applications keep their own root
    configuration. Calling this again replaces the handlers it installed.
    """
    level = to_level(level)
    stderr_level = max(to_level(stderr_level, logging.WARNING), logging.DEBUG)
    formatter = formatter or logging.Formatter(DEFAULT_FORMAT)

    logger = logging.getLogger(logger_name)
    logger.handlers.clear()
    logger.setLevel(level)
    logger.propagate = False

    stdout_handler = logging.StreamHandler(stream=sys.stdout)
    stdout_handler.addFilter(_BelowLevelFilter(stderr_level))
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setLevel(stderr_level)
    stderr_handler.setFormatter(formatter)

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)
    return logger

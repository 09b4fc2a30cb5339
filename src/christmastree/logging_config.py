"""
Logging Configuration
Sets up the package logger: console output plus an optional log file.
"""
import logging
import sys
from typing import Optional

# Root of the package namespace; every module logs below it via getLogger(__name__)
PACKAGE_LOGGER = __name__.partition(".")[0]

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Route the package's log records to stdout and, optionally, to a file.

    Calling it again replaces the handlers, so tests and repeated launches in
    one interpreter do not print every line twice.

    Args:
        level: Logging level for the package logger and its handlers.
        log_file: Optional path; the file is truncated on each launch.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}"
                + (f", writing to '{log_file}'." if log_file else "."))


def parse_level(name: str | int | None, default: int = logging.INFO) -> int:
    """Translate a level name ('debug', 'INFO', '10') into a logging level."""
    if name is None or name == "":
        return default
    if isinstance(name, int):
        return name
    if name.isdigit():
        return int(name)
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: '{name}'")
    return level

"""
Logging Configuration
Wires the 'dialtimer' logger to the terminal and, on request, to a file.
"""
import logging
import sys
from typing import List, Optional

LOGGER_NAME = "dialtimer"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _build_handlers(log_file: Optional[str]) -> List[logging.Handler]:
    # stderr keeps log lines out of the dial frames printed on stdout
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    return handlers


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the package logger used by the timer core and the CLI.

    Any handlers from an earlier call are closed and replaced, so the CLI
    can be invoked repeatedly in one process without doubling its output.

    Args:
        level: Logging level for the terminal and the log file.
        log_file: Optional path the log is also written to, truncated first.

    Returns:
        The configured 'dialtimer' logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(log_file):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging initialized (level=%s, file=%s).", logging.getLevelName(level), log_file)
    return logger

"""Logging configuration for the motionsim packages.

A single pre-configured logger is shared by the stepping loop, the serializer
and the command-line entry point. Console logging is enabled at INFO level;
file logging can be switched on for debugging.

Examples:
    ```python
    from utils.logger import logger, enable_file_logging

    enable_file_logging("motionsim_debug.log")
    logger.debug("Stepping stopped at t=%s", 2.9)
    ```
"""
import logging
from typing import Optional

__all__ = ('logger',
           'enable_file_logging',
           'disable_file_logging',
)

logger: logging.Logger = logging.getLogger('motionsim')

_console = logging.StreamHandler()
_console.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))
logger.addHandler(_console)
logger.setLevel(logging.INFO)

# File handler (optional, added dynamically)
file_handler: Optional[logging.FileHandler] = None


def enable_file_logging(filename: str = "motionsim.log") -> None:
    """Enable logging to a file with DEBUG level output.

    An existing file handler is replaced. The file is opened in append mode.

    Args:
        filename: Path of the log file. Defaults to "motionsim.log".
    """
    global file_handler
    if file_handler is not None:
        disable_file_logging()

    file_handler = logging.FileHandler(filename)
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter("%(asctime)s:%(levelname)s:%(message)s")
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)
    logger.info("Logging to %s", filename)


def disable_file_logging() -> None:
    """Remove the file handler and close it. Safe to call more than once."""
    global file_handler
    if file_handler is not None:
        logger.removeHandler(file_handler)
        file_handler.close()
        file_handler = None

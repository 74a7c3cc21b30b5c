"""
Logging Configuration
Sets up the package loggers for the widget and its demo.
"""
import logging
import sys
from typing import Optional

NAMESPACES = ("board", "ui")


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the 'board' and 'ui' loggers.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    file_handler = None
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)

    for name in NAMESPACES:
        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Avoid duplicate lines when called more than once
        if logger.hasHandlers():
            logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if file_handler is not None:
            logger.addHandler(file_handler)

    logging.getLogger("board").info("Logging initialized.")

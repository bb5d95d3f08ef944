""" Logging configuration using loguru... """

# Python Packages
import sys
from loguru import logger

# Constants
from ..base import constants


_configured = False





def setup_logger():
    """
    Configure application logging.

    Console sink always, rotating file sink when LOG_FILE is set.
    Safe to call more than once; only the first call configures sinks.
    """

    global _configured

    if _configured:
        return logger

    # Remove default handler
    logger.remove()

    console_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level>"
    )

    logger.add(
        sys.stdout,
        format = console_format,
        level = constants.LOG_LEVEL,
        colorize = True
    )

    if constants.LOG_FILE:
        logger.add(
            constants.LOG_FILE,
            format = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level = constants.LOG_LEVEL,
            rotation = "10 MB",
            retention = 5
        )

    _configured = True
    logger.info(f"Logger initialized with level: {constants.LOG_LEVEL}")

    return logger

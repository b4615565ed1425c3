import sys
from typing import Optional

from loguru import logger

LOG_FORMAT = "{time} | {level} | {module}:{function}:{line} | {message}"


def setup_logging(level: str, log_path: Optional[str] = None) -> None:
    """Send logs to stderr at ``level``; with ``log_path``, also to a rotated file at DEBUG.

    Raises ``ValueError`` for a level loguru does not know.
    """
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    if log_path:
        logger.add(log_path, level="DEBUG", format=LOG_FORMAT, rotation="100 KB", compression="zip")

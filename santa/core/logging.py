import sys
from loguru import logger

from santa.core.config import Settings

LOG_FORMAT = "{time} | {level} | {module}:{function}:{line} | {message}"


def setup_logging(settings: Settings) -> None:
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level, format=LOG_FORMAT)
    logger.add(
        settings.log_path,
        level="DEBUG",
        format=LOG_FORMAT,
        rotation="100 KB",
        compression="zip",
    )
    logger.bind(
        max_exclusions=settings.max_exclusions,
        max_participants=settings.max_participants,
        max_attempts=settings.max_attempts,
    ).debug("Logging configured")

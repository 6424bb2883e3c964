import os
import sys
from typing import Optional
from loguru import logger

from .config import LoggingSettings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(settings: Optional[LoggingSettings] = None):
    """
    Configure Loguru sinks from LoggingSettings.

    Console level is DEBUG in debug mode, INFO otherwise. A rotating file
    sink is added only when settings.log_dir is set.
    """
    settings = settings or LoggingSettings()
    logger.remove()

    level = "DEBUG" if settings.debug_mode else "INFO"
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)

    if settings.log_dir:
        os.makedirs(settings.log_dir, exist_ok=True)
        logger.add(
            os.path.join(settings.log_dir, "multiselect_{time}.log"),
            rotation=settings.rotation,
            retention=settings.retention,
            level="DEBUG",
        )

    logger.info(f"Logging initialized (console level {level})")

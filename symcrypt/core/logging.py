"""
Thin wrapper around Loguru so every module can simply:

    from loguru import logger

The package disables its own records on import; call
:func:`configure_logging` from the application to see them.
"""

import sys

from loguru import logger

from symcrypt.core.config import settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> "
    "| <level>{level: <8}</level> "
    "| <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> "
    "- <level>{message}</level>"
)


def configure_logging(sink=sys.stderr) -> None:
    # Remove existing handlers (the host application may have added its own)
    logger.remove()
    logger.enable("symcrypt")

    logger.add(
        sink,
        level=settings.LOG_LEVEL,
        diagnose=False,  # never dump locals: they may hold key material
        backtrace=settings.ENV == "development",
        format=LOG_FORMAT,
    )

    if settings.LOG_FILE:
        logger.add(
            settings.LOG_FILE,
            rotation="00:00",  # midnight
            retention="7 days",
            compression="zip",
            level="DEBUG",
            enqueue=True,
            backtrace=False,
            diagnose=False,
        )

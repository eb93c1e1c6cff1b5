# ABOUTME: Loguru sink configuration shared by the CLI and embedding services.
# ABOUTME: Replaces the default handler with a coloured stderr sink and optional rotating file.

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logging(level: str = "INFO", log_file: Path | None = None) -> None:
    """Configure loguru sinks.

    Args:
        level: Minimum level emitted by every sink.
        log_file: Optional path for a rotating log file.
    """
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level.upper(), colorize=True)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            rotation="10 MB",
            retention="10 days",
            compression="zip",
            format=FILE_FORMAT,
            level=level.upper(),
        )

    logger.debug("Logging configured at level {}", level.upper())

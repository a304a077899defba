# baas/core/logger.py
import sys

from loguru import logger

from baas.core.config import Settings

LOG_FILE_NAME = "baas_server.log"


def setup_logging(settings: Settings) -> str:
    """
    Configure loguru sinks and return the log file path.

    - Console: DEBUG in debug mode, INFO in release mode
    - File: DEBUG and above, rotated at midnight, 10 days kept, zipped
    """
    log_dir = settings.log_dir_path
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    # drop previously installed sinks so repeated app creation does not duplicate lines
    logger.remove()

    logger.add(
        sys.stderr,
        level="INFO" if settings.is_release else "DEBUG",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
    )

    logger.add(
        str(log_file),
        rotation="00:00",
        retention="10 days",
        compression="zip",
        level="DEBUG",
        enqueue=True,
        encoding="utf-8",
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{line} - {message}",
    )

    return str(log_file)

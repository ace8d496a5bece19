import sys

from loguru import logger


def configure_logging(level: str = "WARNING", log_file: str | None = None) -> None:
    logger.remove()  # Remove default handler
    logger.add(sys.stderr, level=level, format="<level>{level}</level>: {message}")
    if log_file:
        logger.add(log_file, rotation="10 MB", retention="30 days", level="DEBUG")
    logger.enable("dial_password")

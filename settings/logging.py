"""Logging configuration."""

import sys

from loguru import logger

from settings import LOG_DIR

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | "
    "<cyan>{extra[component]}</cyan> | <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {extra[component]} | {name}:{line} | {message}"


def setup_logging(level: str = "INFO", to_file: bool = True, component: str = "votes"):
    """Configure console and optional daily file sinks tagged with a component name."""
    logger.remove()
    logger.configure(extra={"component": component})

    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.add(
            LOG_DIR / f"{component}_{{time:YYYY-MM-DD}}.log",
            format=FILE_FORMAT,
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
            compression="gz",
        )
        logger.info("Logging to {}", LOG_DIR)

    return logger

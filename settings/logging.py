"""Logging setup shared by the CLI, the admin console and tests."""

import sys

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <cyan>{extra[component]}</cyan> | {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}"


def setup_logging(level: str = LOG_LEVEL, to_file: bool = True, component: str = "aifans"):
    """Replace loguru's default sink with console (+ optional daily file) output."""
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

import logging

from shortforge.core.config import settings


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(f"shortforge.{name}")
    if not logger.handlers:
        handler = logging.StreamHandler()
        fmt = logging.Formatter("[%(levelname)s] %(name)s: %(message)s")
        handler.setFormatter(fmt)
        logger.addHandler(handler)
        logger.setLevel(settings.LOG_LEVEL)
    return logger


"""
Logging setup and it configures:
- Log format
- Log level (LOG_LEVEL)
- Output destination

The main purpose:
Standardized application logging. User API keys never go into a log line.
"""

import logging
import sys
from typing import Optional, Union
from ..config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def resolve_level(level: Union[str, int]) -> int:
    """Turn a level name such as "info" (or a numeric level) into a logging level."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved

def setup_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return the named logger writing to stdout at the configured level.

    Repeated calls reuse the existing handler and only adjust its level.
    """
    logger = logging.getLogger(name)
    numeric_level = resolve_level(settings.log_level if level is None else level)
    logger.setLevel(numeric_level)

    handler = next((h for h in logger.handlers if isinstance(h, logging.StreamHandler)), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    handler.setLevel(numeric_level)

    return logger

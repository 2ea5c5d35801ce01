# spacedash/setup_logging.py
import logging, sys
from spacedash.settings import LOG_FORMAT, LOG_LEVEL

def setup_logging(level: str = LOG_LEVEL, fmt: str = LOG_FORMAT):
    """Root logger to stdout. Level and format come from LOG_LEVEL / LOG_FORMAT."""
    logger = logging.getLogger()
    if logger.handlers:  # don't double add during reload
        return
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    h = logging.StreamHandler(sys.stdout)
    h.setFormatter(logging.Formatter(fmt))
    logger.addHandler(h)

# codebuddy/utils/logger.py
import logging
import sys

from codebuddy.utils.config import settings

def configure_logger(name: str = "codebuddy", level: str | None = None, fmt: str | None = None) -> logging.Logger:
    """
    Returns the named logger writing to stdout. Safe to call again (uvicorn
    reloads, Streamlit reruns): the previous handler is replaced, not stacked.
    An unknown level name falls back to INFO.
    """
    configured = logging.getLogger(name)
    level_name = (level or settings.log_level).upper()
    level_value = logging.getLevelName(level_name)
    configured.setLevel(level_value if isinstance(level_value, int) else logging.INFO)

    configured.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt or settings.log_format))
    configured.addHandler(handler)

    # Keep records out of the root logger so they print once
    configured.propagate = False
    return configured

logger = configure_logger()

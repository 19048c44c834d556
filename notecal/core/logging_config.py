"""Logging configuration for the NoteCal Bridge application.
"""

import logging
from typing import Any, Dict, Union

# Define logging format
LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

def build_logging_config(level: Union[int, str] = logging.DEBUG) -> Dict[str, Any]:
    """Builds the dictConfig used by the app and by uvicorn.

    Args:
        level: Level for the root logger and console handler, as an int or a
               level name such as "INFO".

    Returns:
        A logging.config.dictConfig compatible dictionary.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int): # Unknown names come back as "Level X"
            level = logging.DEBUG

    return {
        "version": 1,
        "disable_existing_loggers": False, # Keep existing loggers (e.g., uvicorn)
        "formatters": {
            "default": {
                "format": LOG_FORMAT,
                "datefmt": DATE_FORMAT,
            },
        },
        "handlers": {
            "console": {
                "level": level,
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout", # Redirect to stdout
            },
        },
        "loggers": {
            # Root logger configuration
            "": {
                "handlers": ["console"],
                "level": level,
                "propagate": True,
            },
            "uvicorn.error": {
                "level": logging.INFO,
                "handlers": ["console"],
                "propagate": False,
            },
            "uvicorn.access": {
                "level": logging.WARNING, # Reduce verbosity of access logs
                "handlers": ["console"],
                "propagate": False,
            },
            "httpx": {
                "level": logging.WARNING,
                "handlers": ["console"],
                "propagate": False,
            },
            "googleapiclient.discovery_cache": {
                "level": logging.ERROR, # Noisy file_cache warnings
                "handlers": ["console"],
                "propagate": False,
            },
        }
    }

LOGGING_CONFIG = build_logging_config()

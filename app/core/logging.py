"""
Logging configuration for the service.

One call to configure_logging() at startup; modules log through
logging.getLogger(__name__). Request bodies are never logged.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # uvicorn already reports every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

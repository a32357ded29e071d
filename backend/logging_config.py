"""Centralized logging setup for the simulator backend."""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
# Every module logger lives under this namespace (backend.core.projection, ...).
APP_LOGGER_NAME = "backend"


def setup_logging(level: str = "INFO") -> None:
    """
    Send records to stdout and set the level of the ``backend`` namespace.

    basicConfig only takes effect once per process; the namespace level is
    applied on every call so a second app factory with another level still
    controls how chatty the simulator modules are.
    """
    resolved = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger(APP_LOGGER_NAME).setLevel(resolved)


def get_logger(name: str) -> logging.Logger:
    if name != APP_LOGGER_NAME and not name.startswith(APP_LOGGER_NAME + "."):
        name = f"{APP_LOGGER_NAME}.{name}"
    return logging.getLogger(name)

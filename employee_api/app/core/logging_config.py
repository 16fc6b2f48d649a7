"""
Logging for the ``employee_api`` package.

Only the package logger is configured: service and app modules log
through ``logging.getLogger(__name__)`` and therefore inherit the
handlers installed here, while loggers owned by uvicorn or other
libraries keep their own configuration.  Each line is tagged with the
variant served so that the logs of the two deployments can be told
apart when they are collected together.
"""

import logging
from typing import List

from .config import Settings, resolve_project_path

PACKAGE_LOGGER = "employee_api"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s ({variant}): %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(settings: Settings) -> logging.Logger:
    """Configure the package logger from ``settings`` and return it.

    Handlers from a previous call are replaced, so building several
    apps in one process (as the tests do) leaves exactly one console
    handler plus, when ``settings.log_file`` is set, one file handler.
    A relative ``log_file`` is resolved against the project root, the
    same way the database path is.  Unknown level names fall back to
    ``INFO``.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    # Records stop here; the root logger may have handlers of its own.
    logger.propagate = False

    formatter = logging.Formatter(
        fmt=LOG_FORMAT.format(variant=settings.variant),
        datefmt=DATE_FORMAT,
    )
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(
            logging.FileHandler(resolve_project_path(settings.log_file), encoding="utf-8")
        )
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger

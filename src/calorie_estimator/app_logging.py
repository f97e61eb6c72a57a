"""Logging configuration helpers."""

import logging

LOGGER_NAME = "calorie_estimator"
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(debug: bool = False) -> logging.Logger:
    """Attach one stream handler to the package logger and set its level.

    Safe to call repeatedly: later calls only adjust the level, so an app
    created with ``debug=True`` after a quiet one still gets debug output.
    """
    level = logging.DEBUG if debug else logging.INFO
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    handler = next(
        (h for h in logger.handlers if getattr(h, "name", None) == LOGGER_NAME),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(LOGGER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    handler.setLevel(level)
    return logger

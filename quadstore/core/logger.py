import logging

LOGGER_NAME = "quadstore"
LOG_FORMAT = "[%(name)s] %(levelname)s: %(message)s"

logger = logging.getLogger(LOGGER_NAME)

if not logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)

logger.setLevel(logging.INFO)


def get_logger(component: str) -> logging.Logger:
    """Child logger such as ``quadstore.shell``; shares the package handler."""
    return logger.getChild(component)


def set_debug(enabled: bool) -> None:
    logger.setLevel(logging.DEBUG if enabled else logging.INFO)

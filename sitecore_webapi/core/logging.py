"""Logging utilities for sitecore_webapi modules."""

import logging

ROOT_LOGGER_NAME = 'sitecore_webapi'


def get_logger(name: str = None) -> logging.Logger:
    """Get a logger that automatically inherits from root logger.

    Loggers live under the ``sitecore_webapi`` namespace, propagate to the
    root logger and only get a default WARNING level while no
    ``basicConfig()`` has been done.

    Args:
        name: Logger name (typically __name__). Names outside the package
            namespace are nested under it.

    Returns:
        Configured logger instance
    """
    if not name:
        full_name = ROOT_LOGGER_NAME
    elif name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + '.'):
        full_name = name
    else:
        full_name = f"{ROOT_LOGGER_NAME}.{name}"

    logger = logging.getLogger(full_name)
    logger.propagate = True

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logger.setLevel(logging.WARNING)

    return logger

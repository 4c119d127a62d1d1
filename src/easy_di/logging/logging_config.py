"""Logging configuration for easy-di entry points.

The library modules only create module level loggers; handlers are installed
by the entry points (the publishing CLI and the examples) through
``configure_logging``.

Example usage:
    from easy_di.logging.logging_config import configure_logging
    configure_logging(verbose=True)
"""
import logging
import sys

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_HANDLER_ATTR = "_easy_di_handler"


def configure_logging(verbose: bool = False, log_format: str = DEFAULT_FORMAT) -> logging.Logger:
    """Configure the ``easy_di`` logger hierarchy.

    A single stdout handler is attached to the ``easy_di`` logger. Calling the
    function again only adjusts the level, so repeated calls never duplicate
    output.

    Args:
        verbose: Log at DEBUG instead of INFO.
        log_format: Format string for the handler.

    Returns:
        The configured ``easy_di`` logger.
    """
    logger = logging.getLogger("easy_di")
    level = logging.DEBUG if verbose else logging.INFO

    if not any(getattr(h, _HANDLER_ATTR, False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(log_format))
        setattr(handler, _HANDLER_ATTR, True)
        logger.addHandler(handler)

    logger.setLevel(level)
    logger.propagate = False
    return logger

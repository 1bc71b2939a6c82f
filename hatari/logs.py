"""
Diagnostic logging for the Hatari SDK.

Everything the SDK logs goes through the ``hatari`` logger. The library only
installs a ``NullHandler`` on it, so nothing is printed until the host
application configures logging or calls :func:`enable_logging`.
"""
import logging

LOGGER_NAME = "hatari"
LOG_FORMAT = "%(asctime)s %(name)s => %(message)s"
_OFF = logging.CRITICAL + 1

_handler = None


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def enable_logging(level: int = logging.DEBUG) -> None:
    """
    Turn the diagnostic channel on, printing records to stderr.

    Args:
        level (int): Lowest level to emit.
    """
    global _handler

    logger = _get_logger()
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(_handler)

    _handler.setLevel(level)
    logger.setLevel(level)


def disable_logging() -> None:
    """
    Turn the diagnostic channel off.

    Child loggers inherit the effective level, so records from every
    ``hatari.*`` module are dropped, including those that would otherwise
    propagate to the root logger.
    """
    global _handler

    logger = _get_logger()
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler = None

    logger.setLevel(_OFF)


def is_logging_enabled() -> bool:
    return _handler is not None


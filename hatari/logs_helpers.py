"""
Call tracing for the public entry points of the SDK.
"""
import functools
import logging
import time


def _describe_arguments(args, kwargs) -> str:
    parts = [repr(a) for a in args]
    parts.extend(f"{k}={v!r}" for k, v in kwargs.items())
    return ", ".join(parts)


def log_call(*, show_args=True, show_result=False):
    """
    Trace calls to the decorated function at DEBUG on its module's logger,
    with the time each call took.

    Args:
        show_args: Log the call arguments. Leave off for functions receiving
            event data or credentials.
        show_result: Log the return value.
    """

    def decorator(func):
        logger = logging.getLogger(func.__module__)
        name = func.__name__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)

            arguments = _describe_arguments(args, kwargs) if show_args else "..."
            logger.debug("-> %s(%s)", name, arguments)
            started = time.monotonic()

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                elapsed = (time.monotonic() - started) * 1000
                logger.debug("%s failed after %.1f ms: %s", name, elapsed, e)
                raise

            elapsed = (time.monotonic() - started) * 1000
            if show_result:
                logger.debug("<- %s => %r (%.1f ms)", name, result, elapsed)
            else:
                logger.debug("<- %s (%.1f ms)", name, elapsed)

            return result

        return wrapper

    return decorator

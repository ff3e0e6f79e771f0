from functools import wraps
from itertools import chain
from typing import Any, Callable

from loguru import logger
from returns.result import Failure, Result, Success

from hillshade.settings import get_settings


def _debug_function_signature(func: Callable[..., Any], *args, **kwargs) -> None:
    """Log the function name together with its arguments."""
    signature = ", ".join(
        chain(
            (repr(arg) for arg in args),
            (f"{key}={repr(value)}" for key, value in kwargs.items()),
        )
    )
    logger.debug(f"Calling {func.__name__}({signature})")


def _log_result(
    result: Result, failure_message: str, success_message: str | None
) -> None:
    match result:
        case Success():
            if success_message:
                logger.info(success_message)
        case Failure(error):
            logger.debug(f"{failure_message}: {error}")
            logger.error(failure_message)


def log_railway_function(failure_message: str, success_message: str | None = None):
    """
    Log the outcome of a function returning a ``Result``.

    Successes are logged at INFO with ``success_message`` (when given). Failures
    log the wrapped error at DEBUG and ``failure_message`` at ERROR. With the
    ``verbose`` setting on, every call is logged with its arguments at DEBUG.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if get_settings().verbose:
                _debug_function_signature(func, *args, **kwargs)
            result = func(*args, **kwargs)
            if isinstance(result, Result):
                _log_result(result, failure_message, success_message)
            return result

        return wrapper

    return decorator

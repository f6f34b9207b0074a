import functools
import logging
from typing import Any, Sequence

from ligen.errors import LigenError


def format_call(name: str, args: Sequence[Any], kwargs: dict) -> str:
    arguments = [repr(a) for a in args]
    arguments.extend(f"{k}={v!r}" for k, v in kwargs.items())

    return f"{name}({', '.join(arguments)})"


def log_call(*, show_args=True, show_result=False):
    """
    Log entry and exit of a repository or service operation at DEBUG.

    The instance is named by its class instead of being passed through
    repr. Rejected inputs (``LigenError``) are logged at DEBUG since the
    caller reports them, anything else at ERROR. Exceptions always
    propagate.

    Args:
        show_args: Log call arguments (default: True)
        show_result: Log return value (default: False)
    """

    def decorator(func):
        logger = logging.getLogger(func.__module__)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            name = func.__qualname__

            if logger.isEnabledFor(logging.DEBUG):
                if show_args:
                    call_args = args
                    # Bound methods, named by the instance class
                    if args and "." in name and hasattr(args[0], func.__name__):
                        name = f"{type(args[0]).__name__}.{func.__name__}"
                        call_args = args[1:]
                    logger.debug("-> %s", format_call(name, call_args, kwargs))
                else:
                    logger.debug("-> %s", name)

            try:
                result = func(*args, **kwargs)
            except LigenError as e:
                logger.debug("<- %s rejected: %s", name, e)
                raise
            except Exception as e:
                logger.error("%s failed: %s", name, e)
                raise

            if show_result:
                logger.debug("<- %s => %r", name, result)
            else:
                logger.debug("<- %s", name)

            return result

        return wrapper

    return decorator
